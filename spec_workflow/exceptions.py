"""Spec workflow exception hierarchy."""

from pathlib import Path
from typing import Any


class SpecWorkflowError(Exception):
    """Base exception for all spec workflow errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ConfigurationError(SpecWorkflowError):
    """Invalid or unreadable spec-config.json."""

    pass


class SetupError(SpecWorkflowError):
    """Installing the workflow into a project failed."""

    pass


class TasksFileNotFoundError(SpecWorkflowError):
    """No tasks.md exists for the requested spec."""

    def __init__(self, path: str | Path) -> None:
        super().__init__(f"tasks.md not found at {path}")
        self.path = Path(path)


class CommandGenerationError(SpecWorkflowError):
    """A task command file could not be written."""

    def __init__(
        self,
        message: str,
        task_id: str | None = None,
        path: str | Path | None = None,
    ) -> None:
        details: dict[str, Any] = {}
        if task_id is not None:
            details["task_id"] = task_id
        super().__init__(message, details)
        self.task_id = task_id
        self.path = Path(path) if path is not None else None
