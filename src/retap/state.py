"""Two-field interaction state machine.

Focus and pattern validity are independent. Every event, whatever its kind,
ends with a pipeline check so output always matches the current fields or
the last valid pattern.

PUBLIC API:
  - ToggleFocus, Quit, Resize, ContentChanged: Event kinds
  - Event: Union of all event kinds
  - Outcome: Effects the front end must apply after an event
  - InteractionMachine: Focus, layout and pipeline state
  - classify_key: Map a key name to an event
"""

import logging
from dataclasses import dataclass

from .config import LayoutConfig
from .engine import Frame, HighlightPipeline
from .layout import compute_layout
from .types import FieldLayout, Focus, ViewportSize

__all__ = [
    "ToggleFocus",
    "Quit",
    "Resize",
    "ContentChanged",
    "Event",
    "Outcome",
    "InteractionMachine",
    "classify_key",
]

logger = logging.getLogger(__name__)

QUIT_KEYS = frozenset(["escape", "ctrl+c"])


@dataclass(frozen=True)
class ToggleFocus:
    """Tab pressed."""


@dataclass(frozen=True)
class Quit:
    """Escape or Ctrl-C pressed."""


@dataclass(frozen=True)
class Resize:
    """Terminal resized."""

    width: int
    height: int


@dataclass(frozen=True)
class ContentChanged:
    """A field's text changed through its own editing."""

    field: Focus


Event = ToggleFocus | Quit | Resize | ContentChanged


def classify_key(key: str) -> ToggleFocus | Quit:
    """Map a bound key name to an event.

    Other keys never reach the machine. Only the focused field can take
    focus, so it alone edits them and reports back via ContentChanged.

    Args:
        key: Key name such as "tab" or "escape"

    Returns:
        ToggleFocus for tab, Quit for escape/ctrl+c

    Raises:
        ValueError: If key is not bound
    """
    if key == "tab":
        return ToggleFocus()
    if key in QUIT_KEYS:
        return Quit()
    raise ValueError(f"Unbound key: {key!r}")


@dataclass
class Outcome:
    """Effects of one event.

    Attributes:
        frame: Output to display
        focus: Field that must receive focus, if focus moved
        blur: Field that must lose focus, if focus moved
        layout: New dimensions, if the terminal resized
        quit: Whether the session ends
        result: Pattern to print on quit
    """

    frame: Frame
    focus: Focus | None = None
    blur: Focus | None = None
    layout: FieldLayout | None = None
    quit: bool = False
    result: str | None = None


class InteractionMachine:
    """Owns focus and viewport, decides when the pipeline runs.

    Args:
        pipeline: Memoized highlight pipeline
        layout_config: Margins for the layout sizer
        focus: Initially focused field
    """

    def __init__(
        self,
        pipeline: HighlightPipeline,
        layout_config: LayoutConfig | None = None,
        focus: Focus = Focus.DOCUMENT,
    ):
        self.pipeline = pipeline
        self.layout_config = layout_config or LayoutConfig()
        self.focus = focus
        self.viewport: ViewportSize | None = None
        self.layout: FieldLayout | None = None

    def handle(self, event: Event, pattern: str, document: str) -> Outcome:
        """Process one event against current field contents.

        Args:
            event: Event to process
            pattern: Pattern field text after the event
            document: Document field text after the event

        Returns:
            Effects for the front end
        """
        match event:
            case ToggleFocus():
                outcome = self._on_toggle_focus()
            case Quit():
                outcome = self._on_quit(pattern)
            case Resize(width=width, height=height):
                outcome = self._on_resize(width, height)
            case ContentChanged():
                outcome = Outcome(frame=self.pipeline.frame)
            case _:
                raise TypeError(f"Unknown event: {event!r}")

        if not outcome.quit:
            outcome.frame = self.pipeline.run(pattern, document)
        return outcome

    def _on_toggle_focus(self) -> Outcome:
        previous = self.focus
        self.focus = previous.toggled()
        logger.debug(f"Focus {previous.value} -> {self.focus.value}")
        return Outcome(frame=self.pipeline.frame, focus=self.focus, blur=previous)

    def _on_quit(self, pattern: str) -> Outcome:
        return Outcome(frame=self.pipeline.frame, quit=True, result=pattern)

    def _on_resize(self, width: int, height: int) -> Outcome:
        self.viewport = ViewportSize(width, height)
        self.layout = compute_layout(self.viewport, self.layout_config)
        logger.debug(f"Resized to {width}x{height}: {self.layout}")
        return Outcome(frame=self.pipeline.frame, layout=self.layout)
