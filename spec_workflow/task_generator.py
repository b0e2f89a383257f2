"""Generate per-task slash command files from parsed tasks."""

from __future__ import annotations

from pathlib import Path

from spec_workflow.constants import CLAUDE_DIR, COMMAND_EXTENSION, SPECS_DIR, TASK_COMMAND_SEPARATOR, TASKS_FILE
from spec_workflow.exceptions import CommandGenerationError
from spec_workflow.logging import get_spec_logger
from spec_workflow.models import Task

INSTRUCTIONS_TEMPLATE = """\
## Usage
```
/{command}
```

## Instructions
Execute task {task_id} of the {spec} specification.

1. Load the specification context before writing any code:
   - `{spec_dir}/requirements.md`
   - `{spec_dir}/design.md`
   - `{spec_dir}/tasks.md`
2. Implement ONLY task {task_id}. Do not start other tasks.
3. Reuse the code named under Leverage and satisfy the referenced requirements.
4. Follow the implementation guidelines of the `/spec-execute` command.

## Completing the Task
When the implementation is done and verified, mark the task complete in
`{spec_dir}/{tasks_file}` by changing its checkbox from `- [ ]` to `- [x]`:

```
- [x] {task_id}. {description}
```

Then stop and wait for the user to review the work.

## Next Steps
- Review the implementation with the user
- Run the tests if applicable
- Continue with the next task using `/{spec}{separator}<next-id>`
- Check overall progress with `/spec-status {spec}`
"""


def task_command_name(spec_name: str, task_id: str) -> str:
    """Return the slash command name for a task, e.g. ``auth-task-3.2``."""
    return f"{spec_name}{TASK_COMMAND_SEPARATOR}{task_id}"


def task_command_filename(spec_name: str, task_id: str) -> str:
    """Return the command file name for a task, e.g. ``auth-task-3.2.md``."""
    return f"{task_command_name(spec_name, task_id)}{COMMAND_EXTENSION}"


def render_task_command(spec_name: str, task: Task) -> str:
    """Render the command file content for one task.

    The output depends only on ``spec_name`` and ``task``.

    Args:
        spec_name: Spec the task belongs to
        task: Parsed task

    Returns:
        Markdown content of the command file
    """
    lines = [
        f"# {spec_name} - Task {task.id}",
        "",
        task.description,
    ]
    if task.leverage:
        lines.append(f"**Leverage:** {task.leverage}")
    if task.requirements:
        lines.append(f"**Requirements:** {', '.join(task.requirements)}")
    lines.extend(f"- {detail}" for detail in task.details)
    lines.append("")

    instructions = INSTRUCTIONS_TEMPLATE.format(
        command=task_command_name(spec_name, task.id),
        spec=spec_name,
        spec_dir=f"{CLAUDE_DIR}/{SPECS_DIR}/{spec_name}",
        tasks_file=TASKS_FILE,
        task_id=task.id,
        description=task.description,
        separator=TASK_COMMAND_SEPARATOR,
    )
    return "\n".join(lines) + "\n" + instructions


def generate_task_command(commands_dir: str | Path, spec_name: str, task: Task) -> Path:
    """Write the command file for one task, overwriting any previous version.

    Args:
        commands_dir: Directory receiving the file; created when missing
        spec_name: Spec the task belongs to
        task: Parsed task

    Returns:
        Path of the written file

    Raises:
        ValueError: If spec_name is empty
        CommandGenerationError: If the directory or file cannot be written
    """
    if not spec_name:
        raise ValueError("spec_name must not be empty")

    commands_dir = Path(commands_dir)
    path = commands_dir / task_command_filename(spec_name, task.id)
    content = render_task_command(spec_name, task)

    try:
        commands_dir.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)
    except OSError as e:
        raise CommandGenerationError(
            f"Cannot write command file {path}: {e}",
            task_id=task.id,
            path=path,
        ) from e

    get_spec_logger(spec_name, task.id).debug("Wrote %s", path, extra={"path": str(path)})
    return path
