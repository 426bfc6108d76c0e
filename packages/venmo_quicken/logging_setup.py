"""Logging configuration for the ``venmo_quicken`` package.

Two helpers are public:

- ``configure_logging(...)``: attach one ``StreamHandler`` to the package
  logger (``"venmo_quicken"``). Only entrypoints (the CLI) call it.
- ``get_logger(name)``: return ``venmo_quicken.<name>`` loggers for library
  modules, installing a ``NullHandler`` on the package logger until an
  application configures output.

Library modules never attach handlers of their own.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

_PKG_LOGGER_NAME = "venmo_quicken"
_LEVEL_ENV = "VENMO_QUICKEN_LOG_LEVEL"
_DEFAULT_FORMAT = "%(levelname)s %(name)s: %(message)s"

_handler: logging.Handler | None = None


def parse_level(level: int | str | None) -> int:
    """Resolve ``level`` to a numeric logging level.

    Accepts ints, numeric strings and level names. ``None`` falls back to the
    ``VENMO_QUICKEN_LOG_LEVEL`` environment variable, then ``INFO``.
    Unrecognized names raise ``ValueError``.
    """

    if isinstance(level, int):
        return level
    if level is None:
        env_val = os.getenv(_LEVEL_ENV)
        return parse_level(env_val) if env_val else logging.INFO
    name = level.strip().upper()
    if name.isdigit():
        return int(name)
    numeric = logging.getLevelNamesMapping().get(name)
    if numeric is None:
        raise ValueError(f"unknown log level: {level!r}")
    return numeric


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str | None = None,
    stream: IO[str] = sys.stderr,
) -> None:
    """Configure the package logger.

    The first call attaches the handler; later calls only adjust the level so
    repeated CLI invocations in one process (tests) do not stack handlers.
    """

    global _handler

    logger = logging.getLogger(_PKG_LOGGER_NAME)
    numeric = parse_level(level)

    if _handler is None:
        for h in list(logger.handlers):
            if isinstance(h, logging.NullHandler):
                logger.removeHandler(h)
        _handler = logging.StreamHandler(stream)
        _handler.setFormatter(logging.Formatter(fmt or _DEFAULT_FORMAT))
        logger.addHandler(_handler)
        logger.propagate = False

    _handler.setLevel(numeric)
    logger.setLevel(numeric)


def get_logger(name: str) -> logging.Logger:
    """Return a package child logger with library-safe defaults."""

    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if _handler is None and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    if name != _PKG_LOGGER_NAME and not name.startswith(_PKG_LOGGER_NAME + "."):
        name = f"{_PKG_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger", "parse_level"]
