"""Maintenance task commands for LogSweep CLI."""

import typer
from rich.table import Table

from logsweep.cli._common import EXIT_CANCELLED, console
from logsweep.config import ConfigLoader
from logsweep.cli.helpers import error_exit, load_config_or_exit, print_sweep_result, run_with_progress
from logsweep.cli.options import ConfigOpt, ForceOpt
from logsweep.core.errors import EnumerationError
from logsweep.core.models import SweepResult
from logsweep.core.tasks import TaskRegistry, build_default_registry


def _load_registry(config) -> TaskRegistry:
    """Build the task registry from config, exiting cleanly on bad values.

    Tasks read their settings lazily, so the config is validated up front.
    """
    cfg = load_config_or_exit(config, console)
    errors = ConfigLoader.validate(cfg)
    if errors:
        console.print(f"[red]Configuration has {len(errors)} error(s):[/red]")
        for error in errors:
            console.print(f"  • {error}")
        raise typer.Exit(1)
    try:
        return build_default_registry(cfg)
    except ValueError as e:
        error_exit(console, str(e))


def create_tasks_app() -> typer.Typer:
    """Create and return the tasks sub-app with all commands registered."""

    tasks_app = typer.Typer(
        name="tasks",
        help="List and run maintenance tasks.",
        no_args_is_help=True,
    )

    @tasks_app.command("list")
    def tasks_list(
        show_all: bool = typer.Option(
            False, "--all", "-a",
            help="Include hidden tasks",
        ),
        config: ConfigOpt = None,
    ):
        """
        Show registered maintenance tasks and their schedule hints.
        """
        registry = _load_registry(config)

        table = Table(title="Maintenance Tasks")
        table.add_column("Key", style="cyan", no_wrap=True)
        table.add_column("Name", style="white")
        table.add_column("Category", style="dim", no_wrap=True)
        table.add_column("Schedule", style="yellow")
        table.add_column("Enabled")
        table.add_column("Description", style="dim")

        for task in registry.tasks(include_hidden=show_all):
            schedule = ", ".join(t.describe() for t in task.default_triggers())
            enabled = "[green]✓[/green]" if task.is_enabled else "[red]✗[/red]"
            name = f"{task.name} [dim](hidden)[/dim]" if task.is_hidden else task.name
            table.add_row(task.key, name, task.category, schedule, enabled, task.description)

        console.print(table)

    @tasks_app.command("run")
    def tasks_run(
        key: str = typer.Argument(..., help="Task key (see 'logsweep tasks list')"),
        force: ForceOpt = False,
        config: ConfigOpt = None,
    ):
        """
        Run a maintenance task once, as the scheduler would.

        Disabled tasks are refused unless --force is given.
        """
        registry = _load_registry(config)

        task = registry.get(key)
        if task is None:
            known = ", ".join(t.key for t in registry)
            error_exit(console, f"Unknown task: {key}. Known tasks: {known}")

        if not task.is_enabled and not force:
            error_exit(console, f"Task {task.key} is disabled (use --force to run it anyway)")

        console.print(f"[blue]{task.name}[/blue] [dim]({task.key})[/dim]")
        console.print(f"[dim]{task.description}[/dim]")

        try:
            result = run_with_progress(console, f"{task.name}...", task.execute)
        except (EnumerationError, ValueError) as e:
            error_exit(console, str(e))

        if isinstance(result, SweepResult):
            print_sweep_result(console, result)
            if result.cancelled:
                raise typer.Exit(EXIT_CANCELLED)

    return tasks_app
