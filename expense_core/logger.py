"""Logging setup shared by the store and the command line front end.

Every module obtains its logger through ``get_logger(__name__)``. Records
go to stderr so command output on stdout is never interleaved with them.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, Union

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_ROOT_NAME = "expense_tracker"

_handler: Optional[logging.StreamHandler] = None


def configure_logging(level: Union[int, str] = logging.WARNING) -> None:
    """Attach the stderr handler once and (re)set the package log level."""
    global _handler
    root = logging.getLogger(_ROOT_NAME)
    if _handler is None:
        _handler = logging.StreamHandler(sys.stderr)
        _handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
        root.addHandler(_handler)
        root.propagate = False
    if isinstance(level, str):
        level = logging.getLevelName(level.strip().upper())
        if not isinstance(level, int):
            level = logging.WARNING
    root.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the package root logger."""
    return logging.getLogger(f"{_ROOT_NAME}.{name}")
