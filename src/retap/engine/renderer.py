"""Highlight rendering for match spans.

PUBLIC API:
  - render_highlight: Build styled Text from document and spans
"""

import logging
from typing import Sequence

from rich.style import Style
from rich.text import Text

from ..errors import SpanOrderError
from ..types import MatchSpan

__all__ = ["render_highlight"]

logger = logging.getLogger(__name__)


def render_highlight(
    document: str,
    spans: Sequence[MatchSpan],
    style: Style | str,
    strict: bool = False,
) -> Text:
    """Render document with each span wrapped in the highlight style.

    Spans are consumed in order behind a cursor. A span starting before the
    cursor ends rendering there and the rest of the document is dropped.

    Args:
        document: Full document text
        spans: Ordered, non-overlapping match spans
        style: Highlight style for matched text
        strict: Raise instead of truncating on an out-of-order span

    Returns:
        Text whose plain content is the document (or its truncated prefix)

    Raises:
        SpanOrderError: If strict and a span starts before the previous end
    """
    if not spans:
        return Text(document)

    out = Text()
    cursor = 0
    for index, span in enumerate(spans):
        if cursor > span.start:
            if strict:
                raise SpanOrderError(index, span.start, cursor)
            logger.warning(f"Span {index} starts at {span.start} before cursor {cursor}, output truncated")
            return out
        out.append(document[cursor : span.start])
        out.append(document[span.start : span.end], style=style)
        cursor = span.end

    out.append(document[cursor:])
    return out
