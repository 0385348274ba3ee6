"""Textual widgets for retap.

PUBLIC API:
  - PatternField: Single-line regex input
  - DocumentField: Multi-line document editor
  - MatchOutput: Bordered panel showing highlighted document
  - ErrorLine: One-line compile diagnostic
"""

from .fields import PatternField, DocumentField
from .output import MatchOutput, ErrorLine

__all__ = [
    "PatternField",
    "DocumentField",
    "MatchOutput",
    "ErrorLine",
]
