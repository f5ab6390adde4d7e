"""Logging utilities.

All package loggers live under the ``txt2pdf`` namespace.  The command line
interface calls :func:`configure_logging` once per invocation; repeated calls
reuse the same stderr handler and only adjust the level.
"""

from __future__ import annotations

import logging
import sys

__all__ = ["ROOT_LOGGER_NAME", "get_logger", "configure_logging"]

ROOT_LOGGER_NAME = "txt2pdf"

_HANDLER_NAME = "txt2pdf-stderr"
_FORMAT = "%(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a logger below the package namespace for module ``name``."""

    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    ``verbose`` selects ``DEBUG``; otherwise only warnings and errors are
    emitted.  The handler stream is resolved at call time so that test
    runners capturing ``sys.stderr`` see the output.
    """

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    level = logging.DEBUG if verbose else logging.WARNING
    handler = next((h for h in logger.handlers if h.get_name() == _HANDLER_NAME), None)
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
    elif isinstance(handler, logging.StreamHandler):
        # the previous stream may already be closed, so it is not flushed
        handler.stream = sys.stderr
    handler.setLevel(level)
    logger.setLevel(level)
    logger.propagate = False
    return logger
