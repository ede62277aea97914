from __future__ import annotations

from pathlib import Path

import pytest

from msgforge.logging import get_logger
from tests._fixtures.messages_builder import MessagesBuilder


@pytest.fixture
def messages_builder(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> MessagesBuilder:
    """Provide a message tree builder rooted at the pytest tmp_path."""
    return MessagesBuilder(tmp_path, monkeypatch)


@pytest.fixture(autouse=True)
def _reset_msgforge_logger():
    """Drop handlers CLI tests attach so later tests never log into closed streams."""
    yield
    logger = get_logger()
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
