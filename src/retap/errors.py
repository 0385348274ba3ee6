"""Exceptions and error formatting for retap.

Only PatternCompileError reaches the screen; it is shown inline and never
stops the session. ConfigError is reported by the CLI before the app starts.

PUBLIC API:
  - RetapError: Base exception for all retap errors
  - PatternCompileError: Pattern text failed to compile
  - SpanOrderError: Renderer got spans out of order (strict mode only)
  - ConfigError: Configuration file could not be loaded
  - format_error: One-line diagnostic for display
"""

__all__ = ["RetapError", "PatternCompileError", "SpanOrderError", "ConfigError", "format_error"]


class RetapError(Exception):
    """Base exception for all retap errors."""

    pass


class PatternCompileError(RetapError):
    """Raised when the pattern field does not hold a valid regex.

    Attributes:
        pattern: Pattern text that failed
        reason: Message from the regex engine
        position: Offset into pattern where compilation failed, if known
    """

    def __init__(self, pattern: str, reason: str, position: int | None = None):
        self.pattern = pattern
        self.reason = reason
        self.position = position
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.position is None:
            return f"error parsing regexp: {self.reason}: `{self.pattern}`"
        return f"error parsing regexp: {self.reason} at position {self.position}: `{self.pattern}`"


class SpanOrderError(RetapError):
    """Raised when a match span starts before the end of the previous one."""

    def __init__(self, index: int, start: int, cursor: int):
        self.index = index
        self.start = start
        self.cursor = cursor
        super().__init__(f"span {index} starts at {start}, before previous end {cursor}")


class ConfigError(RetapError):
    """Raised when retap.toml is unreadable or holds invalid values."""

    pass


def format_error(error: Exception | None) -> str:
    """Create the diagnostic line shown under the pattern field.

    Args:
        error: Error to describe, or None for no error

    Returns:
        Error text, empty string when there is no error
    """
    if error is None:
        return ""
    return str(error)
