"""Main CLI application for LogSweep.

This module serves as the orchestrator that registers all CLI commands.
Individual commands are implemented in separate modules.
"""

import typer

from logsweep.cli._common import _default_cfg, cli_state
from logsweep.cli.helpers import configure_logging

from logsweep.cli.sweep_cmd import register_sweep
from logsweep.cli.version_cmd import register_version
from logsweep.cli.config_cmd import create_config_app
from logsweep.cli.tasks_cmd import create_tasks_app


app = typer.Typer(
    name="logsweep",
    help="LogSweep — delete log files past their retention window.",
    add_completion=False,
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
):
    """LogSweep — delete log files past their retention window."""
    cli_state["verbose"] = verbose
    configure_logging(_default_cfg)


# Register top-level commands
register_sweep(app)
register_version(app)

# Add sub-apps
app.add_typer(create_tasks_app(), name="tasks")
app.add_typer(create_config_app(), name="config")


if __name__ == "__main__":
    app()
