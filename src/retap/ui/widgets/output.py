"""Match output panel and compile error line.

PUBLIC API:
  - MatchOutput: Bordered panel showing highlighted document
  - ErrorLine: One-line compile diagnostic
"""

from rich.style import Style
from rich.text import Text
from textual.widgets import Static

from ...errors import format_error

__all__ = ["MatchOutput", "ErrorLine"]


class MatchOutput(Static):
    """Highlighted document in a bordered panel.

    Border color comes from retap.tcss; border type and left padding from
    configuration.
    """

    def __init__(self, border: str = "solid", padding_left: int = 3):
        super().__init__("", id="output")
        self._border_type = border
        self._padding_left = padding_left
        self.highlighted = Text()

    def on_mount(self) -> None:
        """Apply configured border type and padding."""
        _, color = self.styles.border_top
        self.styles.border = (self._border_type, color)
        self.styles.padding = (0, 0, 0, self._padding_left)

    def show_output(self, text: Text) -> None:
        """Display rendered output.

        Args:
            text: Document with matches styled
        """
        self.highlighted = text
        self.update(text)


class ErrorLine(Static):
    """Compile error under the pattern field, blank when pattern is valid."""

    def __init__(self, style: Style):
        super().__init__("", id="error")
        self.error_style = style
        self.diagnostic = ""

    def show_error(self, error: Exception | None) -> None:
        """Display diagnostic for error, or clear it.

        Args:
            error: Current compile error or None
        """
        self.diagnostic = format_error(error)
        self.update(Text(self.diagnostic, style=self.error_style))
