"""Terminal size to field dimensions.

PUBLIC API:
  - compute_layout: Derive field sizes from the viewport
"""

from .config import LayoutConfig
from .types import FieldLayout, ViewportSize

__all__ = ["compute_layout"]

# Pattern line and error line
FIXED_ROWS = 2


def compute_layout(size: ViewportSize, config: LayoutConfig | None = None) -> FieldLayout:
    """Split the terminal between the document field and the output panel.

    The document field gets half the height less config.margin. The pattern
    line, the error line and the bordered output panel share the rest, so
    the stacked rows fill the terminal exactly. Output sizes exclude border
    and padding. All sizes are at least 1.

    Args:
        size: Terminal width and height
        config: Margins, defaults when None

    Returns:
        Field dimensions
    """
    config = config or LayoutConfig()
    document_height = max(1, size.height // 2 - config.margin)

    return FieldLayout(
        document_width=max(1, size.width),
        document_height=document_height,
        output_width=max(1, size.width - 2 * config.border - config.padding_left),
        output_height=max(1, size.height - FIXED_ROWS - document_height - 2 * config.border),
    )
