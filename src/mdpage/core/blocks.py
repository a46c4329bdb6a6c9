"""Block stages: line splitting, headings, list items, list groups, paragraphs"""

import re

from mdpage.core.models import Line, LineKind, Lines


NEWLINE_RE = re.compile(r'\r\n?')
# Exactly 1-6 hashes then one space; seven hashes never backtrack into a match.
HEADING_RE = re.compile(r'(#{1,6}) (.*)')
LIST_ITEM_RE = re.compile(r'\s*[-*+](?:\s+(.*))?')

LIST_OPEN = "<ul>"
LIST_CLOSE = "</ul>"


def split_lines(text: str) -> Lines:
    """Normalize line endings and split text into unclassified plain lines."""
    return tuple(Line(LineKind.plain, s) for s in NEWLINE_RE.sub("\n", text).split("\n"))


def headings(lines: Lines) -> Lines:
    """Tag lines opening with 1-6 '#' and a space as headings of that level."""
    out = []
    for line in lines:
        m = HEADING_RE.fullmatch(line.text) if line.kind == LineKind.plain else None
        if m:
            out.append(Line(LineKind.heading, m.group(2), level=len(m.group(1))))
        else:
            out.append(line)
    return tuple(out)


def list_items(lines: Lines) -> Lines:
    """Tag '-', '*' or '+' bullet lines as list items, stripping the marker.

    Whitespace-only lines directly above a list item are absorbed into it, so
    items separated by blank lines still form one list.
    """
    out: list[Line] = []
    pending: list[Line] = []
    for line in lines:
        if line.kind == LineKind.plain and line.is_blank:
            pending.append(line)
            continue
        m = LIST_ITEM_RE.fullmatch(line.text) if line.kind == LineKind.plain else None
        if m:
            pending = []
            out.append(Line(LineKind.list_item, m.group(1) or ""))
        else:
            out.extend(pending)
            pending = []
            out.append(line)
    out.extend(pending)
    return tuple(out)


def group_lists(lines: Lines) -> Lines:
    """Wrap every maximal run of list items in a single list container."""
    out: list[Line] = []
    run: list[Line] = []

    def _flush() -> None:
        if run:
            items = "".join(f"<li>{item.text}</li>" for item in run)
            out.extend((
                Line(LineKind.list_open, LIST_OPEN),
                Line(LineKind.list_items, items),
                Line(LineKind.list_close, LIST_CLOSE),
            ))
            run.clear()

    for line in lines:
        if line.kind == LineKind.list_item:
            run.append(line)
            continue
        _flush()
        out.append(line)
    _flush()
    return tuple(out)


def paragraphs(lines: Lines) -> Lines:
    """Wrap each non-blank plain line, stripped, in a paragraph container."""
    return tuple(
        Line(LineKind.paragraph, f"<p>{line.text.strip()}</p>")
        if line.kind == LineKind.plain and not line.is_blank else line
        for line in lines
    )


def render(lines: Lines) -> str:
    """Join lines into markup; headings get their level tags here."""
    return "\n".join(
        f"<h{line.level}>{line.text}</h{line.level}>" if line.kind == LineKind.heading else line.text
        for line in lines
    )


def collapse_lists(html: str) -> str:
    """Merge list containers that close and immediately reopen on the next line."""
    return html.replace(f"{LIST_CLOSE}\n{LIST_OPEN}", "")
