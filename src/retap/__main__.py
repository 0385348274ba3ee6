"""Live regex tester for the terminal.

Entry point for `python -m retap`. Log records go to the Textual console
while the app runs and to stderr otherwise.
"""

import logging
import os
import sys

from textual.logging import TextualHandler

from . import main

logging.basicConfig(
    level=os.environ.get("RETAP_LOG_LEVEL", "WARNING").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%H:%M:%S",
    handlers=[TextualHandler()],
)


def cli() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    cli()
