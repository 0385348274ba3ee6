"""Live regex tester for the terminal.

Type a pattern in one field and text in the other (or pipe text in) and see
every match highlighted as you type. On exit the final pattern is printed,
ready to paste into grep, sed or code.

PUBLIC API:
  - main: Entry point function for CLI
  - RetapApp: Textual application
  - __version__: Package version string
"""

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from .config import load_config
from .errors import ConfigError
from .stdin import read_piped_document, reattach_tty
from .ui import RetapApp

try:
    __version__ = version("retap")
except PackageNotFoundError:
    __version__ = "0.0.0"

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="retap",
        description="Live regex tester. Prints the final pattern on exit.",
    )
    parser.add_argument("-p", "--pattern", help="initial pattern (default from config, else '.')")
    parser.add_argument("-c", "--config", type=Path, help="config file (default: nearest retap.toml)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for retap.

    Piped stdin becomes the initial document; the terminal is then
    reattached for keyboard input.

    Args:
        argv: Command line arguments, sys.argv[1:] when None

    Returns:
        Process exit status
    """
    args = _build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # A failed read still leaves fd 0 on the drained pipe
    piped = sys.stdin is not None and not sys.stdin.isatty()
    document = read_piped_document()
    if piped and not reattach_tty():
        print("Error: no terminal available for input", file=sys.stderr)
        return 1

    app = RetapApp(config, document=document or "", pattern=args.pattern)
    try:
        result = app.run()
    except Exception:
        logger.exception("retap crashed")
        return 1

    if result is not None:
        print(result)
    return 0


__all__ = ["main", "RetapApp", "__version__"]
