"""Parse a spec's tasks.md checklist into Task records.

The scan is a single forward pass over the document lines. A task line looks
like ``- [ ] 2.1 Create the login form``; indented or bulleted lines that
follow it belong to that task, either as free-text details or, when they carry
a recognized annotation such as ``_Leverage: src/auth.ts_``, as structured
fields. Numbered lines indented under a task are steps of that task, not new
tasks, unless they carry a checkbox.

Malformed input never raises. Code fences are not special-cased, so task-like
lines inside fenced blocks are picked up like any other line.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass, field

from spec_workflow.logging import get_logger
from spec_workflow.models import Task

logger = get_logger("task_parser")

# Matches: [indent][bullet ][[x] ]<id>[.] <description>
# Groups: bullet, check, id, dot, description
TASK_PATTERN = re.compile(
    r"^\s*(?P<bullet>[-*+]\s+)?"
    r"(?:\[(?P<check>[^\]]?)\]\s*)?"
    r"(?P<id>\d+(?:[.-]\d+)*)(?P<dot>\.)?"
    r"\s+(?P<description>\S.*?)\s*$"
)

BULLET_PATTERN = re.compile(r"^\s*[-*+]\s+(?P<text>.*?)\s*$")

COMPLETED_MARKS = frozenset({"x", "X"})


def _single_value(payload: str) -> list[str]:
    payload = payload.strip()
    return [payload] if payload else []


def _separated_values(payload: str) -> list[str]:
    return [token.strip() for token in re.split(r"[,;]", payload) if token.strip()]


def _annotation_pattern(label: str) -> re.Pattern[str]:
    # Emphasis (_ or *) around the marker is optional. A closing run is only
    # stripped from the end when it mirrors the opening one and was not
    # already closed before the payload, so globs like src/** survive.
    return re.compile(
        rf"^(?P<emph>[_*]{{0,2}})\s*{label}\s*(?P<label_closed>(?P=emph))?\s*:"
        rf"\s*(?P<colon_closed>(?P=emph))?\s*(?P<payload>.*?)\s*"
        r"(?(label_closed)|(?(colon_closed)|(?P=emph)))$",
        re.IGNORECASE,
    )


@dataclass(frozen=True)
class Annotation:
    """A recognized detail-line marker routed into a Task field.

    Attributes:
        name: Task field the payload populates
        pattern: Regex with a ``payload`` group, matched against the detail text
        split: Turns one payload into zero or more values
        combine: Turns every collected value into the field's final value
    """

    name: str
    pattern: re.Pattern[str]
    split: Callable[[str], list[str]]
    combine: Callable[[list[str]], object]


ANNOTATIONS: tuple[Annotation, ...] = (
    Annotation(
        name="leverage",
        pattern=_annotation_pattern("leverage"),
        split=_single_value,
        combine=lambda values: ", ".join(values) if values else None,
    ),
    Annotation(
        name="requirements",
        pattern=_annotation_pattern("requirements?"),
        split=_separated_values,
        combine=tuple,
    ),
)


@dataclass
class _TaskBuilder:
    """Mutable accumulator for the task currently being scanned."""

    id: str
    description: str
    completed: bool
    indent: int = 0
    details: list[str] = field(default_factory=list)
    annotations: dict[str, list[str]] = field(default_factory=dict)

    def add_detail(self, text: str) -> None:
        for annotation in ANNOTATIONS:
            match = annotation.pattern.match(text)
            if match:
                values = self.annotations.setdefault(annotation.name, [])
                values.extend(annotation.split(match.group("payload")))
                return
        self.details.append(text)

    def build(self) -> Task:
        fields = {a.name: a.combine(self.annotations.get(a.name, [])) for a in ANNOTATIONS}
        return Task(
            id=self.id,
            description=self.description,
            completed=self.completed,
            details=tuple(self.details),
            **fields,
        )


def match_task_line(line: str) -> re.Match[str] | None:
    """Return the task-line match for ``line``, or None.

    A bare number followed by text is only a task when it is bulleted,
    checkboxed or written as an ordered-list item (``3. ...``), so prose like
    "2024 was busy" is not mistaken for a task.
    """
    match = TASK_PATTERN.match(line)
    if not match:
        return None
    if match.group("bullet") is None and match.group("check") is None and match.group("dot") is None:
        return None
    return match


def _indent(line: str) -> int:
    return len(line) - len(line.lstrip())


def _is_sub_step(match: re.Match[str], line: str, current: _TaskBuilder | None) -> bool:
    """Numbered lines nested under a task are steps of it unless checkboxed."""
    return current is not None and match.group("check") is None and _indent(line) > current.indent


def _detail_text(line: str) -> str | None:
    """Return the detail text carried by ``line``, or None for top-level prose."""
    bullet = BULLET_PATTERN.match(line)
    if bullet:
        return bullet.group("text")
    if line[:1].isspace():
        return line.strip()
    return None


def parse_tasks_from_markdown(content: str) -> list[Task]:
    """Parse markdown text into an ordered list of tasks.

    Args:
        content: Full text of a tasks document

    Returns:
        Tasks in document order; empty when no task lines are present
    """
    builders: list[_TaskBuilder] = []
    current: _TaskBuilder | None = None

    for line in content.splitlines():
        if not line.strip():
            continue

        match = match_task_line(line)
        if match and not _is_sub_step(match, line, current):
            current = _TaskBuilder(
                id=match.group("id"),
                description=match.group("description"),
                completed=match.group("check") in COMPLETED_MARKS,
                indent=_indent(line),
            )
            builders.append(current)
            continue

        if current is None:
            continue

        text = _detail_text(line)
        if text:
            current.add_detail(text)

    tasks = [b.build() for b in builders]

    seen: set[str] = set()
    for task in tasks:
        if task.id in seen:
            logger.warning("Duplicate task id %s; its command file will be overwritten", task.id)
        seen.add(task.id)

    logger.debug("Parsed %d tasks", len(tasks))
    return tasks
