"""Match extraction over the whole document.

PUBLIC API:
  - extract_spans: All non-overlapping match spans, left to right
"""

import re

from ..types import MatchSpan

__all__ = ["extract_spans"]


def extract_spans(matcher: re.Pattern, document: str) -> tuple[MatchSpan, ...]:
    """Find every non-overlapping match in one left-to-right scan.

    finditer steps past empty matches, so patterns like "" or "\\b" terminate
    with at most len(document) + 1 spans.

    Args:
        matcher: Compiled pattern
        document: Full document text

    Returns:
        Spans in increasing order, empty tuple when nothing matches
    """
    return tuple(MatchSpan(*match.span()) for match in matcher.finditer(document))
