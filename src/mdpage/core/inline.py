"""Inline span substitutions: bold, italic, and links.

Each pattern is single-line and non-greedy. Spans never nest: the captured
text of one pattern is inserted verbatim and only later patterns see it.
Bold runs before italic so ``**`` and ``__`` are consumed before a single
``*`` or ``_`` can pair with them.
"""

import re
from typing import Callable

from mdpage.core.models import LineKind, Lines


BOLD_RULES = (
    (re.compile(r'\*\*(.*?)\*\*'), r'<strong>\1</strong>'),
    (re.compile(r'__(.*?)__'),     r'<strong>\1</strong>'),
)
ITALIC_RULES = (
    (re.compile(r'\*(.*?)\*'), r'<em>\1</em>'),
    (re.compile(r'_(.*?)_'),   r'<em>\1</em>'),
)
LINK_RULES = (
    (re.compile(r'\[(.*?)\]\((.*?)\)'), r'<a href="\2">\1</a>'),
)

INLINE_KINDS = (LineKind.heading, LineKind.plain)


def _apply(rules: tuple, text: str) -> str:
    for pattern, template in rules:
        text = pattern.sub(template, text)
    return text


def render_bold(text: str) -> str:
    return _apply(BOLD_RULES, text)


def render_italic(text: str) -> str:
    return _apply(ITALIC_RULES, text)


def render_links(text: str) -> str:
    return _apply(LINK_RULES, text)


def _map_text(lines: Lines, render: Callable[[str], str]) -> Lines:
    """Rewrite the text of heading and plain lines; leave list structure alone."""
    return tuple(
        line.with_text(render(line.text)) if line.kind in INLINE_KINDS else line
        for line in lines
    )


def bold(lines: Lines) -> Lines:
    return _map_text(lines, render_bold)


def italic(lines: Lines) -> Lines:
    return _map_text(lines, render_italic)


def links(lines: Lines) -> Lines:
    return _map_text(lines, render_links)
