"""Textual front end for retap.

PUBLIC API:
  - RetapApp: Live regex tester, returns the final pattern on exit
"""

from .app import RetapApp

__all__ = ["RetapApp"]
