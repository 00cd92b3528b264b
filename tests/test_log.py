"""Tests for loguru setup."""

import sys
from typing import List

import pytest
from loguru import logger

from okerr import run_catching
from okerr.config import LogLevel, OkerrSettings
from okerr.log import configure_logging, log_event


def _divide_by_zero() -> float:
    return 1 / 0


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def teardown_method(self) -> None:
        configure_logging(OkerrSettings(log_enabled=False))

    def test_disabled_by_default(self) -> None:
        assert configure_logging() is None

    def test_enabled_adds_sink(self) -> None:
        sink_id = configure_logging(OkerrSettings(log_enabled=True, log_level=LogLevel.DEBUG))

        assert isinstance(sink_id, int)

    def test_reconfigure_replaces_sink(self) -> None:
        first = configure_logging(OkerrSettings(log_enabled=True))
        second = configure_logging(OkerrSettings(log_enabled=True))

        assert first != second
        # the first sink is already gone
        with pytest.raises(ValueError):
            logger.remove(first)

    def test_library_silent_until_enabled(self) -> None:
        records: List[dict] = []
        sink_id = logger.add(lambda m: records.append(m.record), level="DEBUG")
        try:
            run_catching(_divide_by_zero)
            configure_logging(OkerrSettings(log_enabled=True, log_level=LogLevel.DEBUG))
            run_catching(_divide_by_zero)
        finally:
            logger.remove(sink_id)

        assert len(records) == 1
        assert records[0]["extra"]["error_type"] == "ZeroDivisionError"

    def test_one_stderr_line_per_record_without_default_handler(self, capsys: pytest.CaptureFixture[str]) -> None:
        logger.remove()
        try:
            configure_logging(OkerrSettings(log_enabled=True, log_level=LogLevel.DEBUG))
            run_catching(_divide_by_zero)
            lines = [line for line in capsys.readouterr().err.splitlines() if line]
        finally:
            configure_logging(OkerrSettings(log_enabled=False))
            logger.add(sys.__stderr__)

        assert len(lines) == 1
        assert "okerr.catching:run_catching" in lines[0]
        assert "Captured exception as Err" in lines[0]

    def test_level_filters_okerr_sink(self, capsys: pytest.CaptureFixture[str]) -> None:
        logger.remove()
        try:
            configure_logging(OkerrSettings(log_enabled=True, log_level=LogLevel.WARNING))
            run_catching(_divide_by_zero)
            err_output = capsys.readouterr().err
        finally:
            configure_logging(OkerrSettings(log_enabled=False))
            logger.add(sys.__stderr__)

        assert err_output == ""


class TestLogEvent:
    """Tests for log_event()."""

    def test_record_attributed_to_caller(self, log_records) -> None:
        run_catching(_divide_by_zero)

        record = log_records[0]
        assert record["name"] == "okerr.catching"
        assert record["function"] == "run_catching"

    def test_fields_bound_as_extra(self) -> None:
        records: List[dict] = []
        sink_id = logger.add(lambda m: records.append(m.record), level="DEBUG")
        try:
            log_event("info", "custom event", key="value")
        finally:
            logger.remove(sink_id)

        assert [r["message"] for r in records] == ["custom event"]
        assert records[0]["level"].name == "INFO"
        assert records[0]["extra"]["key"] == "value"
