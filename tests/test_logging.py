"""Tests for msgforge.logging."""

from __future__ import annotations

import logging
from pathlib import Path

from msgforge.logging import ROOT_LOGGER, configure_logging, get_logger


def test_get_logger_nests_components_under_package_logger() -> None:
    assert get_logger().name == ROOT_LOGGER
    assert get_logger("compiler").name == "msgforge.compiler"


def test_configure_logging_replaces_previous_handlers(tmp_path: Path) -> None:
    logger = configure_logging(verbose=True, log_file=tmp_path / "run.log")
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2

    logger = configure_logging()
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1
    assert logger.propagate is False
