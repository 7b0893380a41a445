"""Diagnostic logging for docsync.

Messages meant for the user go through :mod:`docsync.reporting`. The
``docsync`` logger only carries diagnostics, so it stays quiet at WARNING
unless ``--verbose`` is given, and ``--log-file`` keeps a timestamped copy.
"""

from __future__ import annotations

import logging
from pathlib import Path

_ROOT = "docsync"
_STREAM_FORMAT = "[docsync] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``docsync`` or a ``docsync.<name>`` child logger."""
    return logging.getLogger(f"{_ROOT}.{name}" if name else _ROOT)


def _handler(handler: logging.Handler, level: int, fmt: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Install stderr (and optionally file) handlers on the ``docsync`` logger.

    Calling it again replaces the previous handlers, so repeated CLI runs in
    one process do not duplicate output.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logger = get_logger()
    logger.setLevel(level)
    logger.propagate = False

    for existing in list(logger.handlers):
        logger.removeHandler(existing)
        existing.close()

    logger.addHandler(_handler(logging.StreamHandler(), level, _STREAM_FORMAT))
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.addHandler(
            _handler(logging.FileHandler(log_file, encoding="utf-8"), level, _FILE_FORMAT)
        )
    return logger


__all__ = ["configure_logging", "get_logger"]
