"""Sweep command for LogSweep CLI."""

from pathlib import Path

import typer

from logsweep.cli._common import EXIT_CANCELLED, console
from logsweep.cli.helpers import (
    error_exit,
    load_config_or_exit,
    print_sweep_result,
    resolve_bool,
    run_with_progress,
)
from logsweep.cli.options import (
    ConfigOpt,
    DaysOpt,
    DirectoryArg,
    DryRunOpt,
    ExtOpt,
    ForceOpt,
    RecursiveOpt,
    WorkersOpt,
)
from logsweep.core.errors import EnumerationError
from logsweep.core.models import RetentionPolicy
from logsweep.core.sweeper import LogRetentionSweeper


def register_sweep(app: typer.Typer) -> None:
    """Register the sweep command with the Typer app."""

    @app.command()
    def sweep(
        directory: DirectoryArg = None,
        days: DaysOpt = None,
        ext: ExtOpt = None,
        recursive: RecursiveOpt = None,
        dry_run: DryRunOpt = None,
        workers: WorkersOpt = None,
        force: ForceOpt = False,
        config: ConfigOpt = None,
    ):
        """
        Delete log files older than the retention window.

        Settings come from the config file; options override them.

        Examples:
            logsweep sweep                          # Use configured directory and retention
            logsweep sweep /var/log/app --days 7    # Sweep a directory, 7-day retention
            logsweep sweep logs -e .txt -e .old     # Sweep several extensions
            logsweep sweep --dry-run                # Preview what would be deleted
        """
        cfg = load_config_or_exit(config, console)

        use_dry_run = resolve_bool(dry_run, cfg.sweep.dry_run_default)
        use_recursive = resolve_bool(recursive, cfg.retention.recursive)

        try:
            policy = RetentionPolicy.create(
                retention_days=cfg.retention.days if days is None else days,
                directory_path=directory or Path(cfg.retention.log_directory),
                file_extensions=ext or cfg.retention.extensions,
                recursive=use_recursive,
            )
            sweeper = LogRetentionSweeper(
                dry_run=use_dry_run,
                max_workers=workers or cfg.sweep.max_workers,
            )
        except ValueError as e:
            error_exit(console, str(e))

        try:
            candidates = sweeper.find_candidates(policy)
        except EnumerationError as e:
            error_exit(console, str(e))

        mode_text = "[yellow]DRY RUN[/yellow]" if use_dry_run else "[red]LIVE DELETE[/red]"
        console.print()
        console.print(f"[blue]Log directory:[/blue] {policy.directory_path}")
        console.print(
            f"Retention: {policy.retention_days} days | "
            f"Extensions: {', '.join(sorted(policy.file_extensions))} | "
            f"Recursive: {'yes' if policy.recursive else 'no'}"
        )
        console.print(f"Mode: {mode_text}")
        console.print(f"Files eligible for deletion: {len(candidates)}")
        console.print()

        if not candidates:
            console.print(f"[green]No log files older than {policy.retention_days} days.[/green]")
            raise typer.Exit(0)

        if not use_dry_run and not force:
            confirm = typer.confirm(f"Delete {len(candidates)} log files?", default=False)
            if not confirm:
                console.print("Aborted.")
                raise typer.Exit(0)

        try:
            result = run_with_progress(
                console,
                "Deleting old logs...",
                lambda progress, token: sweeper.run(policy, progress, token),
            )
        except EnumerationError as e:
            error_exit(console, str(e))

        print_sweep_result(console, result)

        if result.cancelled:
            raise typer.Exit(EXIT_CANCELLED)
