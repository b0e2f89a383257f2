"""claude-spec-setup command-line interface."""

import click

from spec_workflow import __version__
from spec_workflow.commands import generate_task_commands, run_setup, setup, test_cmd
from spec_workflow.constants import LogLevel
from spec_workflow.logging import setup_logging


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="claude-spec-setup")
@click.option("--project", "-p", default=".", type=click.Path(file_okay=False), help="Project directory")
@click.option("--force", "-f", is_flag=True, help="Force overwrite existing files")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation prompts")
@click.option(
    "--log-level",
    type=click.Choice([level.value for level in LogLevel]),
    default=LogLevel.WARNING.value,
    envvar="SPEC_WORKFLOW_LOG_LEVEL",
    show_default=True,
    help="Diagnostic log level (stderr)",
)
@click.option(
    "--log-dir",
    type=click.Path(file_okay=False),
    envvar="SPEC_WORKFLOW_LOG_DIR",
    help="Also write JSON logs to spec-workflow.log in this directory",
)
@click.pass_context
def cli(ctx: click.Context, project: str, force: bool, yes: bool, log_level: str, log_dir: str | None) -> None:
    """Set up Claude Code Spec Workflow in your project.

    Without a sub-command, installs the workflow into --project. The
    --project, --force and --yes options also apply to sub-commands that do
    not set them.
    """
    setup_logging(level=log_level, log_dir=log_dir, json_output=log_dir is not None)

    ctx.ensure_object(dict)
    ctx.obj["project"] = project
    ctx.obj["force"] = force
    ctx.obj["yes"] = yes

    if ctx.invoked_subcommand is None:
        run_setup(project, force, yes)


cli.add_command(setup)
cli.add_command(test_cmd, name="test")
cli.add_command(generate_task_commands)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
