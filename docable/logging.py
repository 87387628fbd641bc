"""Logging setup for docable.

Per-file diagnostics (missing namespace marker, no doc blocks, replaced
namespaces) go through ``docable.diagnostics`` and print to the console as
the bare message. Everything else carries a ``[docable] LEVEL`` prefix.
"""

from __future__ import annotations

import logging
from pathlib import Path

ROOT_LOGGER = "docable"
DIAGNOSTICS_LOGGER = f"{ROOT_LOGGER}.diagnostics"

_PREFIXED_FORMAT = "[docable] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class ConsoleFormatter(logging.Formatter):
    """Prints diagnostics verbatim and prefixes all other records."""

    def __init__(self) -> None:
        super().__init__(_PREFIXED_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        if record.name == DIAGNOSTICS_LOGGER:
            return record.getMessage()
        return super().format(record)


def get_logger(name: str | None = None) -> logging.Logger:
    return logging.getLogger(f"{ROOT_LOGGER}.{name}" if name else ROOT_LOGGER)


def get_diagnostics_logger() -> logging.Logger:
    return logging.getLogger(DIAGNOSTICS_LOGGER)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Attach console (stderr) and optional file handlers to the docable logger.

    Safe to call repeatedly: existing handlers are closed and replaced.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler()
    console.setFormatter(ConsoleFormatter())
    logger.addHandler(console)

    if log_file is not None:
        sink = logging.FileHandler(log_file, encoding="utf-8")
        sink.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(sink)

    return logger


__all__ = [
    "DIAGNOSTICS_LOGGER",
    "ConsoleFormatter",
    "configure_logging",
    "get_diagnostics_logger",
    "get_logger",
]
