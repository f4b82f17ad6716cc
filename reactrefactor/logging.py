"""Logging helpers shared by the analysis and refactoring pipeline."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

_LOGGER_NAME = "reactrefactor"
_CONSOLE_FORMAT = "[reactrefactor] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a child of the ``reactrefactor`` logger."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    log_file: Path | None = None,
) -> logging.Logger:
    """Attach console (stderr) and optional file handlers to the package logger.

    Reports are printed on stdout, so console logging always goes to stderr to
    keep ``--format json`` output machine-readable.
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    logger = logging.getLogger(_LOGGER_NAME)
    # The file sink records DEBUG even when the console is quieter.
    logger.setLevel(logging.DEBUG if log_file is not None else level)
    logger.propagate = False

    # Reset handlers to avoid duplicate output when main() runs more than once.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(file_handler)

    return logger


__all__ = ["configure_logging", "get_logger"]
