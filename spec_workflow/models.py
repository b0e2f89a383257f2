"""Task records parsed from a spec's tasks.md."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Task:
    """One checklist item from a tasks document.

    Attributes:
        id: Hierarchical task number, e.g. "1" or "2.3"
        description: Text following the id on the task line
        completed: True when the line carries an ``[x]`` checkbox
        details: Free-text lines nested under the task
        leverage: Reusable code or assets named by a leverage annotation
        requirements: Requirement references from a requirements annotation
    """

    id: str
    description: str
    completed: bool = False
    details: tuple[str, ...] = field(default_factory=tuple)
    leverage: str | None = None
    requirements: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "description": self.description,
            "completed": self.completed,
        }
        if self.details:
            data["details"] = list(self.details)
        if self.leverage is not None:
            data["leverage"] = self.leverage
        if self.requirements:
            data["requirements"] = list(self.requirements)
        return data
