"""claude-spec-setup CLI commands."""

from spec_workflow.commands.generate_task_commands import generate_task_commands
from spec_workflow.commands.setup_cmd import run_setup, setup
from spec_workflow.commands.test_cmd import test_cmd

__all__ = [
    "generate_task_commands",
    "run_setup",
    "setup",
    "test_cmd",
]
