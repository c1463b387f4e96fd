"""Unit tests for observability logging."""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Iterator

import pytest
import structlog
from structlog.testing import capture_logs

from uow_template.config import UowSettings
from uow_template.observability.logging import JsonLoggerFactory, get_logger
from uow_template.testing.fakes import InMemoryDatabase, InMemoryRecord, InMemoryUnitOfWork


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        log = get_logger("tests.logging", component="uow")
        with capture_logs() as logs:
            log.info("hello", extra_key=1)
        assert logs == [
            {"component": "uow", "extra_key": 1, "event": "hello", "log_level": "info"}
        ]

    def test_without_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger("tests.logging").warning("plain")
        assert logs[0]["event"] == "plain"
        assert logs[0]["log_level"] == "warning"


class TestJsonLoggerFactory:
    def test_configure_sets_root_level_from_name(self) -> None:
        JsonLoggerFactory.configure("debug")
        assert logging.getLogger().level == logging.DEBUG

    def test_emits_json_lines(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(logging.INFO)
        get_logger("tests.json").info("uow.work_committed", operations=3)
        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "uow.work_committed"
        assert payload["operations"] == 3
        assert payload["level"] == "info"
        assert payload["logger"] == "tests.json"
        assert "timestamp" in payload

    def test_from_settings_uses_configured_level(self) -> None:
        JsonLoggerFactory.from_settings(UowSettings(database_url="sqlite://", log_level="warning"))
        assert logging.getLogger().level == logging.WARNING


class TestCoordinatorLogging:
    def test_batch_lifecycle_events(self) -> None:
        db = InMemoryDatabase()

        async def run() -> None:
            uow = InMemoryUnitOfWork(db)
            await uow.begin_work()
            await uow.mark_create(InMemoryRecord("items", 1, "a"))
            await uow.mark_create(InMemoryRecord("items", 2, "b"))
            await uow.commit_work()

        with capture_logs() as logs:
            asyncio.run(run())

        events = [e["event"] for e in logs]
        assert events == [
            "uow.work_begun",
            "uow.operation_queued",
            "uow.operation_queued",
            "uow.operation_applied",
            "uow.operation_applied",
            "uow.work_committed",
        ]
        committed = logs[-1]
        assert committed["operations"] == 2
        assert committed["mode"] == "batch"
        assert committed["uow"] == "InMemoryUnitOfWork"
        assert logs[2]["pending"] == 2

    def test_auto_commit_mode_is_tagged(self) -> None:
        async def run() -> None:
            await InMemoryUnitOfWork(InMemoryDatabase()).mark_create(InMemoryRecord("items", 1, "a"))

        with capture_logs() as logs:
            asyncio.run(run())
        assert logs[-1]["event"] == "uow.work_committed"
        assert logs[-1]["mode"] == "auto"
