"""Logging for the ``linda`` package.

The CLI calls :func:`configure_logging` once at startup. Library modules only
ask :func:`get_logger` for a child of the ``linda`` logger and never attach
handlers themselves; until the CLI configures output they stay silent.

Levels come from the explicit argument, then ``LINDA_LOG_LEVEL``, then INFO.
Parsing logs at DEBUG; schema creation and executed statements at INFO.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

ROOT_LOGGER = "linda"
_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

_handler: logging.Handler | None = None


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        level = os.getenv("LINDA_LOG_LEVEL")
    if isinstance(level, int):
        return level
    if level:
        name = level.strip().upper()
        if name.isdigit():
            return int(name)
        value = logging.getLevelName(name)
        if isinstance(value, int):
            return value
    return logging.INFO


def configure_logging(level: int | str | None = None, *, stream: IO[str] | None = None) -> None:
    """Send ``linda`` log records to ``stream`` (stderr when omitted).

    Only the first call has an effect.
    """

    global _handler
    if _handler is not None:
        return

    root = logging.getLogger(ROOT_LOGGER)
    root.handlers = [h for h in root.handlers if not isinstance(h, logging.NullHandler)]
    _handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    _handler.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(_handler)
    root.setLevel(_resolve_level(level))
    # Records stop at "linda"; the host's root logger never sees them twice.
    root.propagate = False


def reset_logging() -> None:
    """Undo :func:`configure_logging` so it can run again."""

    global _handler
    root = logging.getLogger(ROOT_LOGGER)
    root.handlers = []
    root.setLevel(logging.NOTSET)
    root.propagate = True
    _handler = None


def get_logger(name: str) -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER)
    if _handler is None and not root.handlers:
        root.addHandler(logging.NullHandler())
    return logging.getLogger(name)
