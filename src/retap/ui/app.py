"""Textual application wiring fields to the interaction state machine.

PUBLIC API:
  - RetapApp: Live regex tester, returns the final pattern on exit
"""

import logging

from textual import events, on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Input, TextArea

from ..config import RetapConfig
from ..engine import HighlightPipeline
from ..state import ContentChanged, Event, InteractionMachine, Outcome, Resize, classify_key
from ..types import Focus
from .widgets import DocumentField, ErrorLine, MatchOutput, PatternField

__all__ = ["RetapApp"]

logger = logging.getLogger(__name__)


class RetapApp(App[str]):
    """Live regex tester.

    Tab switches between pattern and document, Escape or Ctrl-C quits and
    returns the pattern text.

    Args:
        config: Loaded configuration, defaults when None
        document: Initial document text
        pattern: Initial pattern, config.initial_pattern when None
    """

    CSS_PATH = "retap.tcss"

    BINDINGS = [
        Binding("tab", "key('tab')", "Switch field", priority=True),
        Binding("escape", "key('escape')", "Quit", priority=True),
        Binding("ctrl+c", "key('ctrl+c')", "Quit", show=False, priority=True),
    ]

    def __init__(self, config: RetapConfig | None = None, document: str = "", pattern: str | None = None):
        super().__init__()
        self.retap_config = config or RetapConfig()
        self.initial_document = document
        self.initial_pattern = self.retap_config.initial_pattern if pattern is None else pattern
        pipeline = HighlightPipeline(
            self.retap_config.style.highlight,
            flags=self.retap_config.flags.to_re_flags(),
            strict=self.retap_config.strict_spans,
        )
        self.machine = InteractionMachine(pipeline, self.retap_config.layout, focus=Focus.DOCUMENT)
        self._fields_ready = False

    def compose(self) -> ComposeResult:
        pattern = PatternField(self.initial_pattern, self.retap_config.placeholder)
        document = DocumentField(self.initial_document)
        # Only the focused field may take focus
        pattern.can_focus = self.machine.focus is Focus.PATTERN
        document.can_focus = self.machine.focus is Focus.DOCUMENT
        yield pattern
        yield document
        yield ErrorLine(self.retap_config.style.error)
        yield MatchOutput(self.retap_config.style.border, self.retap_config.layout.padding_left)

    def on_mount(self) -> None:
        """Focus the initial field and size widgets."""
        self._fields_ready = True
        self._field(self.machine.focus).engage()
        self._dispatch(Resize(self.size.width, self.size.height))

    def on_resize(self, event: events.Resize) -> None:
        """Recompute layout for the new terminal size."""
        if not self._fields_ready:
            return
        self._dispatch(Resize(event.size.width, event.size.height))

    def action_key(self, key: str) -> None:
        """Handle Tab, Escape and Ctrl-C."""
        self._dispatch(classify_key(key))

    @on(Input.Changed, "#pattern")
    def on_pattern_changed(self, event: Input.Changed) -> None:
        """Pattern edited."""
        self._dispatch(ContentChanged(Focus.PATTERN))

    @on(TextArea.Changed, "#document")
    def on_document_changed(self, event: TextArea.Changed) -> None:
        """Document edited."""
        self._dispatch(ContentChanged(Focus.DOCUMENT))

    @property
    def pattern(self) -> str:
        """Current pattern field text."""
        return self.query_one(PatternField).value

    @property
    def document(self) -> str:
        """Current document field text."""
        return self.query_one(DocumentField).text

    def _field(self, focus: Focus) -> PatternField | DocumentField:
        if focus is Focus.PATTERN:
            return self.query_one(PatternField)
        return self.query_one(DocumentField)

    def _dispatch(self, event: Event) -> None:
        outcome = self.machine.handle(event, self.pattern, self.document)
        self._apply(outcome)

    def _apply(self, outcome: Outcome) -> None:
        if outcome.quit:
            logger.debug(f"Quit with pattern {outcome.result!r}")
            self.exit(outcome.result)
            return

        if outcome.blur is not None:
            self._field(outcome.blur).disengage()
        if outcome.focus is not None:
            self._field(outcome.focus).engage()

        if outcome.layout is not None:
            document = self.query_one(DocumentField)
            document.styles.width = outcome.layout.document_width
            document.styles.height = outcome.layout.document_height
            output = self.query_one(MatchOutput)
            output.styles.width = outcome.layout.output_width
            output.styles.height = outcome.layout.output_height

        frame = outcome.frame
        if frame.recomputed:
            self.query_one(MatchOutput).show_output(frame.output)
            self.query_one(ErrorLine).show_error(frame.error)
