"""Pattern compilation.

PUBLIC API:
  - compile_pattern: Compile pattern text to a matcher
"""

import re

from ..errors import PatternCompileError

__all__ = ["compile_pattern"]


def compile_pattern(pattern: str, flags: int = 0) -> re.Pattern:
    """Compile pattern field text with Python's re dialect.

    The empty string is valid and matches the empty string at every position.

    Args:
        pattern: Pattern text, possibly incomplete while the user types
        flags: re flags to compile with

    Returns:
        Compiled regex pattern

    Raises:
        PatternCompileError: If the text is not a valid regex
    """
    try:
        return re.compile(pattern, flags)
    except re.error as e:
        raise PatternCompileError(pattern, e.msg, e.pos) from e
    except (OverflowError, RecursionError) as e:
        # Huge repeat counts and deeply nested groups fail outside re.error
        raise PatternCompileError(pattern, str(e) or type(e).__name__) from e
