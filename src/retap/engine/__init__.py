"""Match-and-highlight engine.

PUBLIC API:
  - compile_pattern: Compile pattern text to a matcher
  - extract_spans: All non-overlapping match spans, left to right
  - render_highlight: Build styled Text from document and spans
  - Frame: Output shown for one event
  - HighlightPipeline: Memoized pipeline keyed on (pattern, document)
"""

from .compiler import compile_pattern
from .extractor import extract_spans
from .renderer import render_highlight
from .pipeline import Frame, HighlightPipeline

__all__ = [
    "compile_pattern",
    "extract_spans",
    "render_highlight",
    "Frame",
    "HighlightPipeline",
]
