"""Editable fields for pattern and document.

Editing itself (cursor, insert, delete, selection) is the widgets' own.
Only the focused field may take focus, so the other never sees keys.

PUBLIC API:
  - PatternField: Single-line regex input
  - DocumentField: Multi-line document editor
"""

from textual.widgets import Input, TextArea

__all__ = ["PatternField", "DocumentField"]


class _FocusGate:
    """Focus switching shared by both fields."""

    def engage(self) -> None:
        """Allow focus and take it."""
        self.can_focus = True
        self.focus()

    def disengage(self) -> None:
        """Drop focus and refuse it until engaged again."""
        self.blur()
        self.can_focus = False


class PatternField(_FocusGate, Input):
    """Single-line regex input."""

    def __init__(self, pattern: str, placeholder: str):
        super().__init__(value=pattern, placeholder=placeholder, id="pattern", select_on_focus=False)


class DocumentField(_FocusGate, TextArea):
    """Multi-line document editor, seeded with piped text if any."""

    def __init__(self, document: str):
        super().__init__(document, id="document", soft_wrap=True, show_line_numbers=False)
