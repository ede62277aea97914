"""Logger hierarchy and handler setup for the msgforge CLI."""

from __future__ import annotations

import logging
from pathlib import Path

ROOT_LOGGER = "msgforge"

_CONSOLE_FORMAT = "[msgforge] %(levelname)s %(message)s"
_VERBOSE_CONSOLE_FORMAT = "[msgforge] %(levelname)s %(name)s: %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(component: str | None = None) -> logging.Logger:
    """Return ``msgforge.<component>``, or the package logger when no component is given."""
    if not component:
        return logging.getLogger(ROOT_LOGGER)
    return logging.getLogger(f"{ROOT_LOGGER}.{component}")


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Attach console (and optionally file) handlers to the package logger.

    Verbose mode lowers the threshold to DEBUG and prefixes each console line
    with the emitting component. Calling this again replaces the handlers
    installed by the previous call.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = get_logger()
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(
        logging.Formatter(_VERBOSE_CONSOLE_FORMAT if verbose else _CONSOLE_FORMAT)
    )
    logger.addHandler(console)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        sink = logging.FileHandler(log_file, encoding="utf-8")
        # The file always records the full run.
        sink.setLevel(logging.DEBUG)
        sink.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.setLevel(logging.DEBUG)
        logger.addHandler(sink)

    return logger


__all__ = ["ROOT_LOGGER", "configure_logging", "get_logger"]
