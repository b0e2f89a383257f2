"""Spec workflow constants."""

from enum import Enum

CLAUDE_DIR = ".claude"
COMMANDS_DIR = "commands"
SPECS_DIR = "specs"
TEMPLATES_DIR = "templates"

CONFIG_FILE = "spec-config.json"
CLAUDE_MD = "CLAUDE.md"
TASKS_FILE = "tasks.md"

CONFIG_VERSION = "1.0.0"

# Generated task commands: {spec}-task-{id}.md
TASK_COMMAND_SEPARATOR = "-task-"
COMMAND_EXTENSION = ".md"

CLAUDE_MD_MARKER_START = "<!-- SPEC_WORKFLOW_START -->"
CLAUDE_MD_MARKER_END = "<!-- SPEC_WORKFLOW_END -->"

CLAUDE_CHECK_TIMEOUT_SECONDS = 10


class LogLevel(Enum):
    """Log levels accepted on the command line."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
