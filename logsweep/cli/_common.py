"""Shared state and utilities for CLI commands.

This module centralizes common CLI dependencies for the command modules
(sweep_cmd, tasks_cmd, config_cmd, ...).
"""

from rich.console import Console

from logsweep.config import ConfigError, ConfigLoader, LogSweepConfig


# Initialize console (shared across all commands)
console = Console()

# Load config at module level so --help can show the effective defaults.
# A broken config file is reported when a command loads it, not at import.
try:
    _default_cfg = ConfigLoader.load(None)
except ConfigError:
    _default_cfg = LogSweepConfig()
_has_config_file = ConfigLoader.find_config_file() is not None
_cfg_note = " via config" if _has_config_file else ""


def bool_show_default(value: bool, true_word: str, false_word: str) -> str:
    """Generate show_default string for boolean flags.

    Args:
        value: The boolean value to display
        true_word: Word to show when value is True (e.g., "recursive")
        false_word: Word to show when value is False (e.g., "no-recursive")

    Returns:
        String like "recursive via config" or "no-recursive"
    """
    return f"{true_word if value else false_word}{_cfg_note}"


def value_show_default(value) -> str:
    """show_default string for a plain config-backed value."""
    return f"{value}{_cfg_note}"


# Exit code for a sweep stopped by Ctrl-C (128 + SIGINT)
EXIT_CANCELLED = 130

# Flags set by the top-level callback, read by commands
cli_state = {"verbose": False}
