"""CLI helper functions for LogSweep.

This module provides shared utilities to reduce code duplication across CLI commands.
"""

import signal
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator, Optional

import typer
from rich.console import Console
from rich.progress import BarColumn, Progress, SpinnerColumn, TaskProgressColumn, TextColumn

from logsweep.config import ConfigError, ConfigLoader, LogSweepConfig
from logsweep.core.cancellation import CancellationToken
from logsweep.cli._common import cli_state
from logsweep.core.models import SweepResult
from logsweep.utils.formatting import format_bytes, format_duration
from logsweep.utils.logging import setup_logging


def error_exit(console: Console, message: str, code: int = 1) -> None:
    """Print an error message and exit.

    Args:
        console: Rich console for output
        message: Error message to display
        code: Exit code (default: 1)

    Raises:
        typer.Exit: Always raises with the given code
    """
    console.print(f"[red]Error:[/red] {message}")
    raise typer.Exit(code)


def resolve_bool(cli_value: Optional[bool], config_value: bool) -> bool:
    """Resolve boolean value: CLI overrides config if explicitly set.

    Args:
        cli_value: Value from CLI (None if not provided)
        config_value: Default value from config

    Returns:
        CLI value if provided, otherwise config value
    """
    return config_value if cli_value is None else cli_value


def load_config_or_exit(config_path: Optional[Path], console: Console) -> LogSweepConfig:
    """Load configuration, turning ConfigError into a clean CLI exit.

    Logging is reconfigured from the loaded file's ``logging`` section.
    """
    try:
        cfg = ConfigLoader.load(config_path)
    except ConfigError as e:
        error_exit(console, str(e))
    configure_logging(cfg)
    return cfg


def configure_logging(cfg: LogSweepConfig) -> None:
    """Apply a config's logging section; --verbose forces DEBUG."""
    log_cfg = cfg.logging
    setup_logging(
        level="DEBUG" if cli_state["verbose"] else log_cfg.level,
        log_file=Path(log_cfg.file_path) if log_cfg.log_to_file else None,
        use_colors=log_cfg.color_output,
    )


@contextmanager
def cancel_on_interrupt(token: CancellationToken) -> Iterator[CancellationToken]:
    """Raise ``token`` on Ctrl-C instead of unwinding with KeyboardInterrupt.

    Only installs the handler on the main thread, where Python delivers
    signals.
    """
    if threading.current_thread() is not threading.main_thread():
        yield token
        return

    def _handler(signum, frame):
        token.cancel()

    previous = signal.signal(signal.SIGINT, _handler)
    try:
        yield token
    finally:
        signal.signal(signal.SIGINT, previous)


def run_with_progress(
    console: Console,
    description: str,
    action: Callable[[Callable[[float], None], CancellationToken], SweepResult],
) -> SweepResult:
    """Run a sweep-shaped action under a Rich progress bar.

    Args:
        console: Rich console for output
        description: Label for the progress bar
        action: Called with (progress_callback, cancellation_token)

    Returns:
        Whatever ``action`` returns
    """
    token = CancellationToken()
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        console=console,
    ) as progress, cancel_on_interrupt(token):
        task = progress.add_task(description, total=100)

        def update_progress(percent: float) -> None:
            progress.update(task, completed=percent)

        return action(update_progress, token)


def print_sweep_result(console: Console, result: SweepResult) -> None:
    """Print the summary of a finished (or cancelled) sweep."""
    console.print()
    if result.cancelled:
        console.print("[bold yellow]Sweep cancelled.[/bold yellow]")
        console.print(f"  Processed: {result.processed} of {result.total_candidates} files")
        console.print(f"  Left untouched: {result.remaining}")
    elif result.dry_run:
        console.print("[bold yellow]Dry Run Results:[/bold yellow]")
    else:
        console.print("[bold green]Sweep Complete![/bold green]")

    if result.dry_run:
        console.print(f"  Would delete: {result.deleted} files")
        console.print(f"  Would free: {format_bytes(result.bytes_freed)}")
    else:
        console.print(f"  Deleted: {result.deleted} files")
        console.print(f"  Freed: {format_bytes(result.bytes_freed)}")
    if result.skipped:
        console.print(f"  [dim]Already gone: {result.skipped}[/dim]")
    if result.failed:
        console.print(f"  [red]Failed: {result.failed}[/red]")
        for path, error in result.failed_paths[:5]:
            console.print(f"    • {path.name}: {error}")
        if result.failed > 5:
            console.print(f"    ... and {result.failed - 5} more")
    console.print(f"  [dim]Took {format_duration(result.duration_seconds)}[/dim]")
