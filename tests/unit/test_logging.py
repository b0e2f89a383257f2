"""Tests for spec_workflow/logging.py."""

import json
import logging
from pathlib import Path

from spec_workflow.logging import (
    ConsoleFormatter,
    JsonFormatter,
    get_logger,
    get_spec_logger,
    setup_logging,
)


def _record(msg: str = "hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord("spec_workflow.test", logging.INFO, __file__, 1, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestFormatters:
    """Tests for JsonFormatter and ConsoleFormatter."""

    def test_json_formatter_includes_context(self) -> None:
        data = json.loads(JsonFormatter().format(_record(spec="auth", task_id="1.2")))

        assert data["level"] == "info"
        assert data["message"] == "hello"
        assert data["spec"] == "auth"
        assert data["task_id"] == "1.2"
        assert data["ts"].endswith("Z")

    def test_console_formatter_context_prefix(self) -> None:
        line = ConsoleFormatter().format(_record(spec="auth", task_id="1.2"))
        assert "[auth:1.2] hello" in line

    def test_console_formatter_without_context(self) -> None:
        line = ConsoleFormatter().format(_record())
        assert "[" not in line.split("\033[0m", 1)[1]


class TestLoggers:
    """Tests for logger factories and setup."""

    def test_namespace(self) -> None:
        assert get_logger("parser").name == "spec_workflow.parser"

    def test_spec_logger_carries_extra(self) -> None:
        adapter = get_spec_logger("auth", "3")
        assert adapter.extra == {"spec": "auth", "task_id": "3"}

    def test_setup_logging_writes_json_file(self, tmp_path: Path) -> None:
        setup_logging(level="debug", log_dir=tmp_path, console_output=False)

        get_spec_logger("auth").info("written")
        for handler in logging.getLogger("spec_workflow").handlers:
            handler.flush()

        lines = (tmp_path / "spec-workflow.log").read_text().splitlines()
        entry = json.loads(lines[-1])
        assert entry["message"] == "written"
        assert entry["spec"] == "auth"

    def test_unknown_level_defaults_to_warning(self) -> None:
        setup_logging(level="nonsense", console_output=False, json_output=False)
        assert logging.getLogger("spec_workflow").level == logging.WARNING
