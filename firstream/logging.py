"""Package loggers.

All firstream modules log under the ``firstream.`` namespace through
:func:`get_logger`. Each logger writes ``[LEVEL] name: message`` lines to
stderr and does not propagate to the root logger. Only ``init()``
diagnostics are logged: the design summary at DEBUG, non-finite
coefficients at WARNING and allocation failures at ERROR. ``push`` never
logs.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

_FORMAT = "[%(levelname)s] %(name)s: %(message)s"
_level = logging.WARNING

_loggers: dict[str, logging.Logger] = {}


def _resolve_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def _attach_handler(logger: logging.Logger, stream, formatter: logging.Formatter) -> None:
    handler = logging.StreamHandler(stream)
    handler.setLevel(_level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the cached logger for a module.

    Args:
        name: Module name, usually ``__name__``. Names outside the package
            are prefixed with ``firstream.``; None gives the package logger.

    Returns:
        Logger with a single stderr handler.
    """
    if name is None:
        name = "firstream"
    if not (name == "firstream" or name.startswith("firstream.")):
        name = f"firstream.{name}"

    if name in _loggers:
        return _loggers[name]

    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(_level)
        _attach_handler(logger, sys.stderr, logging.Formatter(_FORMAT))
        logger.propagate = False

    _loggers[name] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Change the level of every firstream logger and its handlers.

    Args:
        level: ``logging`` level constant or its name, e.g. ``"DEBUG"``.
    """
    global _level
    _level = _resolve_level(level)

    for logger in _loggers.values():
        logger.setLevel(_level)
        for handler in logger.handlers:
            handler.setLevel(_level)


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[object] = None,
) -> None:
    """Replace the handler of every firstream logger.

    Useful for redirecting filter diagnostics, e.g. into a ``StringIO``.

    Args:
        level: ``logging`` level constant or its name (default: WARNING).
        format_string: Record format; defaults to ``[LEVEL] name: message``.
        stream: Destination stream (default: sys.stderr).
    """
    global _level
    _level = _resolve_level(level)
    formatter = logging.Formatter(format_string or _FORMAT)

    for logger in _loggers.values():
        logger.setLevel(_level)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        _attach_handler(logger, stream or sys.stderr, formatter)
