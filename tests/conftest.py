"""Shared fixtures for okerr tests."""

from typing import Iterator, List

import pytest
from loguru import logger

from okerr.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate every test from OKERR_* variables and the settings cache."""
    for name in ("OKERR_LOG_ENABLED", "OKERR_LOG_LEVEL", "OKERR_LOG_SERIALIZE", "OKERR_DEPRECATION_WARNINGS"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def log_records() -> Iterator[List[dict]]:
    """Capture okerr loguru records for the duration of a test."""
    records: List[dict] = []
    logger.enable("okerr")
    sink_id = logger.add(lambda message: records.append(message.record), level="DEBUG", filter="okerr")
    yield records
    logger.remove(sink_id)
    logger.disable("okerr")
