# tests/conftest.py

"""Shared pytest fixtures for all price_hook tests."""

import logging
from collections.abc import Generator
from pathlib import Path

import pytest

from src.config.settings import Settings


@pytest.fixture(autouse=True)
def isolated_dirs(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
) -> Generator[None, None, None]:
    """Point results/ and logs/ at a temp dir and drop log handlers after."""
    monkeypatch.setattr(Settings, "RESULTS_DIR", tmp_path / "results")
    monkeypatch.setattr(Settings, "LOGS_DIR", tmp_path / "logs")
    yield
    app_logger = logging.getLogger("price_hook")
    for handler in list(app_logger.handlers):
        handler.close()
        app_logger.removeHandler(handler)
