"""Regenerate a spec's task commands from its tasks.md."""

from __future__ import annotations

from pathlib import Path

from spec_workflow.constants import CLAUDE_DIR, COMMANDS_DIR, SPECS_DIR, TASKS_FILE
from spec_workflow.exceptions import TasksFileNotFoundError
from spec_workflow.logging import get_spec_logger
from spec_workflow.models import Task
from spec_workflow.reporter import NullReporter, Reporter
from spec_workflow.task_generator import generate_task_command
from spec_workflow.task_parser import parse_tasks_from_markdown


def tasks_file_path(project_path: str | Path, spec_name: str) -> Path:
    return Path(project_path) / CLAUDE_DIR / SPECS_DIR / spec_name / TASKS_FILE


def spec_commands_dir(project_path: str | Path, spec_name: str) -> Path:
    return Path(project_path) / CLAUDE_DIR / COMMANDS_DIR / spec_name


def generate_spec_task_commands(
    project_path: str | Path,
    spec_name: str,
    reporter: Reporter | None = None,
) -> list[Task]:
    """Parse a spec's tasks.md and write one command file per task.

    Stops at the first file that cannot be written; files written before it
    are left in place.

    Args:
        project_path: Project root containing .claude/
        spec_name: Spec whose tasks.md is read
        reporter: Receives start/succeed/fail events for the batch

    Returns:
        Parsed tasks, in document order

    Raises:
        TasksFileNotFoundError: If the spec has no tasks.md
        CommandGenerationError: If a command file cannot be written
    """
    reporter = reporter or NullReporter()
    log = get_spec_logger(spec_name)
    tasks_file = tasks_file_path(project_path, spec_name)

    reporter.start(f"Generating commands for spec: {spec_name}")

    if not tasks_file.is_file():
        reporter.fail(f"tasks.md not found at {tasks_file}")
        raise TasksFileNotFoundError(tasks_file)

    tasks = parse_tasks_from_markdown(tasks_file.read_text(encoding="utf-8"))
    commands_dir = spec_commands_dir(project_path, spec_name)

    try:
        for task in tasks:
            generate_task_command(commands_dir, spec_name, task)
    except Exception:
        reporter.fail("Command generation failed")
        raise

    log.info("Generated %d task commands in %s", len(tasks), commands_dir)
    reporter.succeed(f"Generated {len(tasks)} task commands for spec: {spec_name}")
    return tasks
