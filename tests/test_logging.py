"""Tests for logging configuration and utilities."""

import json
import logging
import os
import time

import pytest

from gtd.logging import (
    ComponentFormatter,
    JSONLHandler,
    configure_logging,
    prune_old_logs,
    resolve_level,
)


class TestResolveLevel:
    def test_explicit_level(self):
        assert resolve_level("debug") == "DEBUG"

    def test_env_var(self, monkeypatch):
        monkeypatch.setenv("GTD_LOG_LEVEL", "warning")
        assert resolve_level(None) == "WARNING"

    def test_unknown_falls_back_to_info(self):
        assert resolve_level("chatty") == "INFO"


class TestPruneOldLogs:
    def test_missing_dir(self, tmp_path):
        assert prune_old_logs(tmp_path / "nope") == 0

    def test_deletes_only_old_jsonl(self, tmp_path):
        old = tmp_path / "2020-01-01.jsonl"
        new = tmp_path / "today.jsonl"
        other = tmp_path / "notes.txt"
        for path in (old, new, other):
            path.write_text("{}\n")
        ancient = time.time() - 30 * 86400
        os.utime(old, (ancient, ancient))
        os.utime(other, (ancient, ancient))

        assert prune_old_logs(tmp_path, retention_days=7) == 1
        assert not old.exists()
        assert new.exists()
        assert other.exists()


class TestJSONLHandler:
    def test_writes_structured_entries(self, tmp_path):
        handler = JSONLHandler(tmp_path)
        logger = logging.getLogger("gtd.tasks.store")
        record = logger.makeRecord(
            logger.name, logging.INFO, __file__, 1, "task_created id=%s", (3,), None
        )

        handler.emit(record)
        handler.close()

        [log_file] = list(tmp_path.glob("*.jsonl"))
        entry = json.loads(log_file.read_text().strip())
        assert entry["level"] == "INFO"
        assert entry["component"] == "tasks"
        assert entry["logger"] == "gtd.tasks.store"
        assert entry["message"] == "task_created id=3"


class TestComponentFormatter:
    @pytest.mark.parametrize(
        ("name", "component"),
        [
            ("gtd.server.routes.tasks", "server"),
            ("gtd", "gtd"),
            ("uvicorn.error", "uvicorn"),
        ],
    )
    def test_component(self, name, component):
        formatter = ComponentFormatter("%(component)s | %(message)s")
        record = logging.LogRecord(name, logging.INFO, __file__, 1, "hi", None, None)
        assert formatter.format(record) == f"{component} | hi"


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


@pytest.mark.usefixtures("restore_root_logger")
class TestConfigureLogging:
    def test_sets_root_level_and_quiets_noisy_loggers(self):
        configure_logging(level="DEBUG")

        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_file_logging_under_home(self, gtd_home):
        configure_logging(level="INFO", log_to_file=True)
        logging.getLogger("gtd.test").info("hello")

        assert list((gtd_home / "logs").glob("*.jsonl"))
