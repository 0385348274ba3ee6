"""Initial document from piped stdin.

PUBLIC API:
  - read_piped_document: Read stdin when it is not a terminal
  - reattach_tty: Point fd 0 back at the controlling terminal
"""

import logging
import os
import sys
from typing import TextIO

__all__ = ["read_piped_document", "reattach_tty"]

logger = logging.getLogger(__name__)


def read_piped_document(stream: TextIO | None = None) -> str | None:
    """Read all of stdin if it is a pipe or file.

    Read failures are reported on stderr and yield None, so the session
    still starts with an empty document.

    Args:
        stream: Stream to read, sys.stdin when None

    Returns:
        Piped text, or None when stdin is interactive or unreadable
    """
    stream = stream if stream is not None else sys.stdin
    if stream is None or stream.isatty():
        return None

    try:
        text = stream.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Could not read piped input: {e}")
        print(f"Error: could not read piped input: {e}", file=sys.stderr)
        return None

    logger.info(f"Read {len(text)} chars from stdin")
    return text


def reattach_tty() -> bool:
    """Reopen the controlling terminal on fd 0 after stdin was consumed.

    Returns:
        True if fd 0 is a terminal afterwards
    """
    if sys.stdin is not None and sys.stdin.isatty():
        return True
    try:
        tty_path = os.ctermid()
    except (AttributeError, OSError):
        tty_path = "/dev/tty"
    try:
        tty_fd = os.open(tty_path, os.O_RDWR)
    except OSError as e:
        logger.error(f"Could not open {tty_path}: {e}")
        return False
    os.dup2(tty_fd, 0)
    os.close(tty_fd)
    sys.stdin = open(0, closefd=False)
    return True
