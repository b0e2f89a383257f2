"""Claude Code spec workflow setup.

Installs the spec-driven development workflow into a project and generates
per-task slash commands from a spec's tasks.md.
"""

__version__ = "1.2.5"

from spec_workflow.exceptions import (
    CommandGenerationError,
    ConfigurationError,
    SetupError,
    SpecWorkflowError,
    TasksFileNotFoundError,
)
from spec_workflow.models import Task
from spec_workflow.task_generator import (
    generate_task_command,
    render_task_command,
    task_command_filename,
    task_command_name,
)
from spec_workflow.task_parser import parse_tasks_from_markdown

__all__ = [
    "__version__",
    "Task",
    "parse_tasks_from_markdown",
    "generate_task_command",
    "render_task_command",
    "task_command_filename",
    "task_command_name",
    # Errors
    "SpecWorkflowError",
    "CommandGenerationError",
    "ConfigurationError",
    "SetupError",
    "TasksFileNotFoundError",
]
