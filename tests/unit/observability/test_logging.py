"""Unit tests for structured logging helpers."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import pytest
import structlog
from structlog.testing import capture_logs

from cadence.config import SchedulerSettings
from cadence.observability.logging import JsonLoggerFactory, Logger, get_logger
from cadence.testing.fakes import RecordingLogger


@pytest.fixture
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


# ---------------------------------------------------------------------------
# get_logger
# ---------------------------------------------------------------------------


class TestGetLogger:
    def test_emits_event_with_fields(self) -> None:
        with capture_logs() as captured:
            get_logger("cadence.test").info("job_dispatched", job="report")
        assert captured[0]["event"] == "job_dispatched"
        assert captured[0]["job"] == "report"
        assert captured[0]["log_level"] == "info"

    def test_binds_initial_values(self) -> None:
        with capture_logs() as captured:
            get_logger("cadence.test", component="queue").warning("slow")
        assert captured[0]["component"] == "queue"
        assert captured[0]["log_level"] == "warning"


# ---------------------------------------------------------------------------
# JsonLoggerFactory
# ---------------------------------------------------------------------------


class TestJsonLoggerFactory:
    def test_configure_sets_root_level_and_single_handler(self, restore_logging: None) -> None:
        JsonLoggerFactory.configure(logging.DEBUG)
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)

    def test_renders_json_lines(self, restore_logging: None, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(logging.INFO)
        structlog.get_logger("cadence.json").info("scheduler_started", jobs=2)
        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "scheduler_started"
        assert payload["jobs"] == 2
        assert payload["level"] == "info"
        assert payload["logger"] == "cadence.json"
        assert "timestamp" in payload

    def test_console_renderer(self, restore_logging: None, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(logging.INFO, json=False)
        structlog.get_logger("cadence.console").info("scheduler_stopped")
        assert "scheduler_stopped" in capsys.readouterr().err

    def test_from_settings(self, restore_logging: None) -> None:
        JsonLoggerFactory.from_settings(SchedulerSettings(log_level="warning"))
        assert logging.getLogger().level == logging.WARNING


class TestLoggerProtocol:
    def test_recording_logger_satisfies_protocol(self) -> None:
        log: Logger = RecordingLogger()
        log.info("ok")
        assert isinstance(log, RecordingLogger)
