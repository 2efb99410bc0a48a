"""Logger hierarchy shared by the specreadme library and its CLI.

Library modules log under ``specreadme.<module>`` and never attach handlers.
The CLI calls :func:`configure_logging` once per run. Query commands print
their results to stdout, so the console handler always writes to stderr and
only shows warnings unless ``verbose`` is set. A log file, when configured,
records everything down to DEBUG.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List

ROOT_LOGGER = "specreadme"
CONSOLE_FORMAT = "specreadme: %(levelname)s: %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``specreadme.<name>``, or the package logger when ``name`` is empty."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}" if name else ROOT_LOGGER)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Attach console and optional file handlers to the package logger."""
    console = logging.StreamHandler(sys.stderr)
    console.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    handlers: List[logging.Handler] = [console]
    if log_file is not None:
        handlers.append(_file_handler(log_file))

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(min(handler.level for handler in handlers))
    logger.propagate = False
    _replace_handlers(logger, handlers)
    return logger


def _file_handler(path: Path) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, encoding="utf-8", delay=True)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return handler


def _replace_handlers(logger: logging.Logger, handlers: List[logging.Handler]) -> None:
    # Repeated CLI runs in one process must not stack handlers or leak files.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        logger.addHandler(handler)


__all__ = ["CONSOLE_FORMAT", "FILE_FORMAT", "ROOT_LOGGER", "configure_logging", "get_logger"]
