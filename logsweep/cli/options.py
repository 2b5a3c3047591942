"""Shared CLI option definitions."""

from pathlib import Path
from typing import Annotated, Optional

import typer

from logsweep.cli._common import _default_cfg, bool_show_default, value_show_default

DirectoryArg = Annotated[
    Optional[Path],
    typer.Argument(
        help="Log directory to sweep",
        show_default=value_show_default(_default_cfg.retention.log_directory),
    ),
]
DaysOpt = Annotated[
    Optional[int],
    typer.Option(
        "--days", "-d",
        min=0,
        help="Retention in days; older files are deleted",
        show_default=value_show_default(_default_cfg.retention.days),
    ),
]
ExtOpt = Annotated[
    Optional[list[str]],
    typer.Option(
        "--ext", "-e",
        help="File extension to sweep (repeatable)",
        show_default=value_show_default(", ".join(_default_cfg.retention.extensions)),
    ),
]
RecursiveOpt = Annotated[
    Optional[bool],
    typer.Option(
        "--recursive/--no-recursive",
        help="Sweep subfolders",
        show_default=bool_show_default(_default_cfg.retention.recursive, "recursive", "no-recursive"),
    ),
]
DryRunOpt = Annotated[
    Optional[bool],
    typer.Option(
        "--dry-run/--no-dry-run",
        help="Simulate without deleting",
        show_default=bool_show_default(_default_cfg.sweep.dry_run_default, "dry-run", "no-dry-run"),
    ),
]
WorkersOpt = Annotated[
    Optional[int],
    typer.Option(
        "--workers", "-w",
        min=1,
        help="Deletion threads",
        show_default=value_show_default(_default_cfg.sweep.max_workers),
    ),
]
ForceOpt = Annotated[
    bool,
    typer.Option("--force", "-f", help="Skip confirmation prompt"),
]
ConfigOpt = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="Config file path"),
]
