"""Config commands for LogSweep CLI."""

from dataclasses import asdict
from pathlib import Path
from typing import Optional

import typer
import yaml

from logsweep.config import ConfigLoader
from logsweep.config.templates import get_config_template
from logsweep.cli._common import console
from logsweep.cli.helpers import load_config_or_exit
from logsweep.cli.options import ConfigOpt


def create_config_app() -> typer.Typer:
    """Create and return the config sub-app with all commands registered."""

    config_app = typer.Typer(
        name="config",
        help="Configuration management commands.",
        no_args_is_help=True,
    )

    @config_app.command("init")
    def config_init(
        output: Path = typer.Option(
            Path("logsweep.yaml"),
            "--output", "-o",
            help="Output file path",
        ),
        full: bool = typer.Option(
            False,
            "--full",
            help="Generate full config with all options (default: minimal)",
        ),
        force: bool = typer.Option(
            False,
            "--force", "-f",
            help="Overwrite existing config file",
        ),
    ):
        """
        Initialize a new configuration file.

        Creates a logsweep.yaml file in the current directory (or specified path).
        Use --full to generate a complete config with all options documented.
        """
        output = output.resolve()

        if output.exists() and not force:
            console.print(f"[yellow]Config file already exists:[/yellow] {output}")
            console.print("Use --force to overwrite.")
            raise typer.Exit(1)

        template = get_config_template(full=full)

        try:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(template, encoding="utf-8")
        except OSError as e:
            console.print(f"[red]Error writing config file:[/red] {e}")
            raise typer.Exit(1)

        console.print(f"[green]Created config file:[/green] {output}")
        if full:
            console.print("[dim]Full configuration with all options documented.[/dim]")
        else:
            console.print("[dim]Minimal configuration. Edit to customize.[/dim]")

        console.print()
        console.print("Next steps:")
        console.print(f"  1. Edit {output.name} to point at your log directory")
        console.print("  2. Run: logsweep sweep --dry-run")

    @config_app.command("show")
    def config_show(
        config: ConfigOpt = None,
        section: Optional[str] = typer.Option(
            None,
            "--section", "-s",
            help="Show only specific section (e.g., 'retention', 'schedule')",
        ),
    ):
        """
        Show current configuration.

        Displays the effective configuration from config file merged with defaults.
        """
        cfg = load_config_or_exit(config, console)
        config_dict = asdict(cfg)

        if section:
            if section not in config_dict:
                console.print(f"[red]Unknown section:[/red] {section}")
                console.print(f"Available sections: {', '.join(config_dict.keys())}")
                raise typer.Exit(1)
            config_dict = {section: config_dict[section]}

        console.print("[bold]LogSweep Configuration[/bold]")
        console.print()

        source = config or ConfigLoader.find_config_file()
        if source:
            console.print(f"[dim]Source: {source}[/dim]")
        else:
            console.print("[dim]Source: built-in defaults[/dim]")
        console.print()

        yaml_output = yaml.safe_dump(config_dict, default_flow_style=False, sort_keys=False)
        console.print(yaml_output, markup=False, highlight=False)

    @config_app.command("path")
    def config_path():
        """
        Show where LogSweep looks for config files.
        """
        console.print("[bold]Config file search paths:[/bold]")
        console.print()

        found = False
        for i, search_path in enumerate(ConfigLoader.DEFAULT_CONFIG_PATHS, 1):
            exists = search_path.exists()
            if exists and not found:
                status = "[green]✓ ACTIVE[/green]"
                found = True
            elif exists:
                status = "[yellow]exists (not used)[/yellow]"
            else:
                status = "[dim]not found[/dim]"

            console.print(f"  {i}. {search_path} {status}")

        if not found:
            console.print()
            console.print("[dim]No config file found. Using built-in defaults.[/dim]")
            console.print("Run 'logsweep config init' to create one.")

    @config_app.command("validate")
    def config_validate(
        config: ConfigOpt = None,
    ):
        """
        Check the configuration for invalid values.
        """
        cfg = load_config_or_exit(config, console)
        errors = ConfigLoader.validate(cfg)

        if errors:
            console.print(f"[red]Configuration has {len(errors)} error(s):[/red]")
            for error in errors:
                console.print(f"  • {error}")
            raise typer.Exit(1)

        console.print("[green]✓ Configuration is valid.[/green]")

    return config_app
