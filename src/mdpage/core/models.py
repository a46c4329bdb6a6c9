"""Line-level data model shared by the conversion stages"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional


class LineKind(str, Enum):
    heading = "heading"
    list_item = "list_item"
    list_open = "list_open"
    list_items = "list_items"      # one rendered run of adjacent <li> containers
    list_close = "list_close"
    paragraph = "paragraph"
    plain = "plain"


@dataclass(frozen=True)
class Line:
    """One line of the document plus the classification assigned by earlier stages."""
    kind:  LineKind
    text:  str
    level: Optional[int] = None     # heading level (1-6); None for non-headings

    @property
    def is_blank(self) -> bool:
        return self.text.strip() == ""

    def with_text(self, text: str) -> "Line":
        return replace(self, text=text)


Lines = tuple[Line, ...]
