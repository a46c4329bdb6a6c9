"""Markdown-to-HTML fragment conversion as an ordered pipeline of pure stages"""

from mdpage.core import blocks, inline
from mdpage.core.models import Lines


# Order matters: 6-hash headings before shorter ones (handled by the exact
# hash count), bold before italic, inline spans before list detection.
STAGES = (
    blocks.headings,
    inline.bold,
    inline.italic,
    inline.links,
    blocks.list_items,
    blocks.group_lists,
    blocks.paragraphs,
)


def run_stages(lines: Lines, stages=STAGES) -> Lines:
    for stage in stages:
        lines = stage(lines)
    return lines


def convert(text: str) -> str:
    """Convert simplified Markdown text into an HTML body fragment.

    Never raises for str input; an empty string converts to an empty string.
    """
    lines = run_stages(blocks.split_lines(text))
    return blocks.collapse_lists(blocks.render(lines))
