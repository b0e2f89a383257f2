"""Spec workflow logging with colored console output and JSON log files."""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import MutableMapping
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

ROOT_LOGGER = "spec_workflow"

# Record attributes copied into JSON log lines when present
EXTRA_FIELDS = ("spec", "task_id", "path")


class JsonFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON-formatted log string
        """
        log_data = {
            "ts": datetime.now(UTC).isoformat().replace("+00:00", "Z"),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key in EXTRA_FIELDS:
            if hasattr(record, key):
                log_data[key] = str(getattr(record, key))

        return json.dumps(log_data)


class ConsoleFormatter(logging.Formatter):
    """Colored console formatter for human-readable output."""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, "")
        timestamp = datetime.now().strftime("%H:%M:%S")

        context_parts = []
        if hasattr(record, "spec"):
            context_parts.append(str(record.spec))
        if hasattr(record, "task_id"):
            context_parts.append(str(record.task_id))

        context = f"[{':'.join(context_parts)}] " if context_parts else ""

        return f"{color}{timestamp} {record.levelname:8s}{self.RESET} {context}{record.getMessage()}"


def get_logger(name: str) -> logging.Logger:
    """Get a logger inside the spec_workflow namespace.

    Args:
        name: Logger name (typically module name)

    Returns:
        Logger instance
    """
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def setup_logging(
    level: str = "warning",
    log_dir: str | Path | None = None,
    json_output: bool = True,
    console_output: bool = True,
    max_bytes: int = 5 * 1024 * 1024,  # 5MB
    backup_count: int = 3,
) -> None:
    """Set up logging configuration.

    Args:
        level: Log level (debug, info, warning, error)
        log_dir: Directory for JSON log files
        json_output: Whether to output JSON logs to file
        console_output: Whether to output to stderr
        max_bytes: Maximum size of log file before rotation
        backup_count: Number of backup files to keep
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    root_logger = logging.getLogger(ROOT_LOGGER)
    root_logger.setLevel(log_level)
    root_logger.handlers = []

    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(ConsoleFormatter())
        root_logger.addHandler(console_handler)

    if log_dir and json_output:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_path / "spec-workflow.log",
            maxBytes=max_bytes,
            backupCount=backup_count,
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(JsonFormatter())
        root_logger.addHandler(file_handler)

    root_logger.propagate = False


class LoggerAdapter(logging.LoggerAdapter[logging.Logger]):
    """Logger adapter that adds spec/task context to log messages."""

    def process(self, msg: str, kwargs: MutableMapping[str, Any]) -> tuple[str, MutableMapping[str, Any]]:
        extra = kwargs.get("extra", {})
        extra.update(self.extra)
        kwargs["extra"] = extra
        return msg, kwargs


def get_spec_logger(spec: str, task_id: str | None = None) -> LoggerAdapter:
    """Get a logger adapter carrying the spec name (and optionally a task id).

    Args:
        spec: Spec name for context
        task_id: Optional task id

    Returns:
        LoggerAdapter with spec context
    """
    extra: dict[str, Any] = {"spec": spec}
    if task_id is not None:
        extra["task_id"] = task_id
    return LoggerAdapter(get_logger("spec"), extra)


# Initialize default logging on import
setup_logging(console_output=True, json_output=False)
