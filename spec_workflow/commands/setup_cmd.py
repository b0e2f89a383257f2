"""claude-spec-setup setup command - install the spec workflow into a project."""

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from spec_workflow.installer import SpecWorkflowSetup
from spec_workflow.logging import get_logger
from spec_workflow.project import detect_project_type, validate_claude_code
from spec_workflow.reporter import ConsoleReporter

console = Console()
logger = get_logger("setup")

PLAN_ITEMS = [
    "📁 .claude/ directory structure",
    "📝 Slash commands for the spec workflow",
    "🤖 Auto-generated task commands",
    "📋 Document templates",
    "⚙️  Configuration file",
    "📖 CLAUDE.md with workflow instructions",
]


def run_setup(project: str, force: bool, yes: bool) -> None:
    """Interactive setup flow shared by the root command and ``setup``."""
    console.print("\n[bold cyan]🚀 Claude Code Spec Workflow Setup[/bold cyan]")
    console.print("[dim]Automated spec-driven development workflow[/dim]\n")

    reporter = ConsoleReporter(console)
    project_path = Path(project)

    try:
        reporter.start("Analyzing project...")
        project_types = detect_project_type(project_path)
        reporter.succeed(f"Project analyzed: {project_path}")

        if project_types:
            reporter.info(f"[blue]📊 Detected project type(s): {', '.join(project_types)}[/blue]")

        if validate_claude_code():
            console.print("[green]✓[/green] Claude Code is available")
        else:
            reporter.warn("Claude Code not found. Please install Claude Code first.")
            console.print("[dim]   Visit: https://docs.anthropic.com/claude-code[/dim]")

        setup = SpecWorkflowSetup(project_path)

        if setup.claude_directory_exists() and not force and not yes:
            if not click.confirm(".claude directory already exists. Overwrite?", default=False):
                console.print("[yellow]Setup cancelled.[/yellow]")
                return

        if not yes:
            console.print("\n[cyan]This will create:[/cyan]")
            for item in PLAN_ITEMS:
                console.print(f"  [dim]{item}[/dim]")
            console.print()
            if not click.confirm("Proceed with setup?", default=True):
                console.print("[yellow]Setup cancelled.[/yellow]")
                return

        created = setup.run_setup(reporter)
        logger.info("Setup wrote %d paths under %s", len(created), project_path)

        show_summary(setup)

    except click.exceptions.Abort:
        raise
    except Exception as e:  # noqa: BLE001 — CLI top-level catch-all; reports and exits non-zero
        reporter.fail("Setup failed")
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1) from e


def show_summary(setup: SpecWorkflowSetup) -> None:
    """Print the installed commands and next steps."""
    console.print("\n[bold green]✅ Spec Workflow installed successfully![/bold green]\n")

    table = Table(title="Available commands", show_header=False)
    table.add_column("Command", style="cyan")
    table.add_column("Description")
    for command in setup.manifest.commands:
        table.add_row(command.usage, command.description)
    table.add_row("/{spec-name}-task-{id}", "Auto-generated task commands")
    console.print(table)

    console.print("\n[yellow]Next steps:[/yellow]")
    console.print("  1. Run: [cyan]claude[/cyan]")
    console.print("  2. Try: [cyan]/spec-create my-feature[/cyan]")
    console.print("\n[blue]📖 For help, see the README or run /spec-list[/blue]")


@click.command("setup")
@click.option("--project", "-p", default=None, type=click.Path(file_okay=False), help="Project directory")
@click.option("--force", "-f", is_flag=True, help="Force overwrite existing files")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation prompts")
@click.pass_context
def setup(ctx: click.Context, project: str | None, force: bool, yes: bool) -> None:
    """Set up the spec workflow in a project.

    Examples:

        claude-spec-setup setup

        claude-spec-setup setup --project ../my-app --yes
    """
    parent = ctx.obj or {}
    run_setup(
        project or parent.get("project", "."),
        force or parent.get("force", False),
        yes or parent.get("yes", False),
    )
