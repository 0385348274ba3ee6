"""Type definitions for retap - pattern, document, spans and layout.

Offsets are Python code points into the document text. Spans are half-open.
"""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple


class MatchSpan(NamedTuple):
    """Half-open [start, end) range of one match in the document."""

    start: int
    end: int


class Focus(Enum):
    """Which field receives keystrokes."""

    PATTERN = "pattern"
    DOCUMENT = "document"

    def toggled(self) -> "Focus":
        """Get the other field."""
        return Focus.DOCUMENT if self is Focus.PATTERN else Focus.PATTERN


class ViewportSize(NamedTuple):
    """Terminal size in cells."""

    width: int
    height: int


@dataclass(frozen=True)
class FieldLayout:
    """Widget dimensions derived from the viewport.

    Output dimensions are content-box: border and padding come on top.
    """

    document_width: int
    document_height: int
    output_width: int
    output_height: int
