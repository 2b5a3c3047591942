"""Version command for LogSweep CLI."""

import typer

from logsweep import __version__
from logsweep.cli._common import console


def register_version(app: typer.Typer) -> None:
    """Register the version command with the Typer app."""

    @app.command()
    def version():
        """Show LogSweep version."""
        console.print(f"LogSweep v{__version__}")
