"""Change-detecting compile, extract and render pipeline.

PUBLIC API:
  - Frame: Output shown for one event
  - HighlightPipeline: Memoized pipeline keyed on (pattern, document)
"""

import logging
from dataclasses import dataclass, replace

from rich.style import Style
from rich.text import Text

from ..errors import PatternCompileError
from ..types import MatchSpan
from .compiler import compile_pattern
from .extractor import extract_spans
from .renderer import render_highlight

__all__ = ["Frame", "HighlightPipeline"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Frame:
    """Output area content after one event.

    On a compile error, output and spans are those of the last valid run.
    """

    output: Text
    spans: tuple[MatchSpan, ...] = ()
    error: PatternCompileError | None = None
    recomputed: bool = False

    @property
    def valid(self) -> bool:
        """Check if the current pattern compiled."""
        return self.error is None


class HighlightPipeline:
    """Run compile, extract and render only when input changed.

    last_seen holds the (pattern, document) pair of the last run. A run on
    the same pair returns the previous frame untouched.

    Args:
        style: Highlight style for matched text
        flags: re flags for compilation
        strict: Raise on out-of-order spans instead of truncating
    """

    def __init__(self, style: Style | str, flags: int = 0, strict: bool = False):
        self.style = style
        self.flags = flags
        self.strict = strict
        self.last_seen: tuple[str, str] | None = None
        self.frame = Frame(output=Text())

    def run(self, pattern: str, document: str) -> Frame:
        """Get the frame for current field contents.

        Args:
            pattern: Pattern field text
            document: Document field text

        Returns:
            Fresh frame if either field changed, else the previous one
        """
        if (pattern, document) == self.last_seen:
            if self.frame.recomputed:
                self.frame = replace(self.frame, recomputed=False)
            return self.frame

        self.last_seen = (pattern, document)
        try:
            matcher = compile_pattern(pattern, self.flags)
        except PatternCompileError as e:
            logger.debug(f"Pattern {pattern!r} invalid: {e.reason}")
            # Keep showing the last good highlight
            self.frame = replace(self.frame, error=e, recomputed=True)
            return self.frame

        spans = extract_spans(matcher, document)
        output = render_highlight(document, spans, self.style, strict=self.strict)
        logger.debug(f"Pattern {pattern!r} matched {len(spans)} spans in {len(document)} chars")
        self.frame = Frame(output=output, spans=spans, recomputed=True)
        return self.frame
