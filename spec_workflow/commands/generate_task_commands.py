"""claude-spec-setup generate-task-commands command."""

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from spec_workflow.reporter import ConsoleReporter
from spec_workflow.task_commands import generate_spec_task_commands
from spec_workflow.task_generator import task_command_name

console = Console()


@click.command("generate-task-commands")
@click.argument("spec_name")
@click.option("--project", "-p", default=None, type=click.Path(file_okay=False), help="Project directory")
@click.pass_context
def generate_task_commands(ctx: click.Context, spec_name: str, project: str | None) -> None:
    """Generate individual task commands for a spec.

    Reads .claude/specs/SPEC_NAME/tasks.md and writes one command per task
    to .claude/commands/SPEC_NAME/.

    Examples:

        claude-spec-setup generate-task-commands user-auth

        claude-spec-setup generate-task-commands user-auth --project ../my-app
    """
    project = project or (ctx.obj or {}).get("project", ".")
    console.print("[cyan]🔧 Generating task commands...[/cyan]")

    try:
        tasks = generate_spec_task_commands(Path(project), spec_name, ConsoleReporter(console))
    except Exception as e:  # noqa: BLE001 — CLI top-level catch-all; reports and exits non-zero
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1) from e

    console.print("\n[green]Generated commands:[/green]")
    for task in tasks:
        console.print(f"  [dim]/{task_command_name(spec_name, task.id)} - {escape(task.description)}[/dim]")

    console.print(
        "\n[bold yellow]RESTART REQUIRED: You must restart Claude Code "
        "for the new commands to be visible[/bold yellow]\n"
    )
    console.print("[bold cyan]Instructions for the agent:[/bold cyan]")
    console.print("[dim]Tell the user they must exit Claude Code and restart it using:[/dim]")
    console.print('- Run "claude --continue" to continue this conversation with new commands')
    console.print('- Or run "claude" to start a fresh session')
    console.print("[dim]The restart is absolutely necessary for the new task commands to appear.[/dim]")

    if tasks:
        console.print("\n[blue]After restart, you can use commands like:[/blue]")
        for task in tasks[:2]:
            console.print(f"  [dim]/{task_command_name(spec_name, task.id)}[/dim]")
        console.print("  [dim]etc.[/dim]")
