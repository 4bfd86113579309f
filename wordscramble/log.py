"""Logging setup shared by the CLI apps."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int = "WARNING") -> None:
    """
    Send package logs to stderr at `level`. Safe to call more than once;
    the previous handler is replaced.
    """
    if isinstance(level, str):
        level = level.upper()
    root = logging.getLogger("wordscramble")
    for h in list(root.handlers):
        root.removeHandler(h)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)
