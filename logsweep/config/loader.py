"""Configuration loading and validation for LogSweep."""

import logging
from pathlib import Path
from typing import Any, Optional

import yaml

from logsweep.config.schema import (
    LoggingConfig,
    LogSweepConfig,
    RetentionConfig,
    ScheduleConfig,
    SweepConfig,
)

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Configuration error."""

    pass


class ConfigLoader:
    """Loads configuration from YAML files."""

    DEFAULT_CONFIG_PATHS = [
        Path("logsweep.yaml"),
        Path("logsweep.yml"),
        Path(".logsweep/config.yaml"),
        Path(".logsweep/config.yml"),
    ]

    @classmethod
    def find_config_file(cls) -> Optional[Path]:
        """Return the first default config path that exists, if any."""
        for default_path in cls.DEFAULT_CONFIG_PATHS:
            if default_path.exists():
                return default_path
        return None

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> LogSweepConfig:
        """
        Load configuration.

        Priority:
        1. Explicit config_path argument
        2. Default config paths (first found)
        3. Built-in defaults

        Args:
            config_path: Optional explicit path to config file

        Returns:
            LogSweepConfig object

        Raises:
            ConfigError: If config file cannot be read or parsed
        """
        config_dict: dict[str, Any] = {}

        if config_path:
            if not config_path.exists():
                raise ConfigError(f"Config file not found: {config_path}")
            config_dict = cls._load_yaml(config_path)
        else:
            default_path = cls.find_config_file()
            if default_path:
                logger.info(f"Loading config from {default_path}")
                config_dict = cls._load_yaml(default_path)

        return cls._build_config(config_dict)

    @classmethod
    def _load_yaml(cls, path: Path) -> dict[str, Any]:
        """Load YAML file and return dict."""
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}")
        except OSError as e:
            raise ConfigError(f"Cannot read {path}: {e}")

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"Top level of {path} must be a mapping")
        return data

    @classmethod
    def _build_config(cls, data: dict[str, Any]) -> LogSweepConfig:
        """Build LogSweepConfig from dictionary."""
        try:
            return LogSweepConfig(
                version=str(data.get("version", "1.0")),
                retention=cls._build_retention(data.get("retention") or {}),
                sweep=cls._build_sweep(data.get("sweep") or {}),
                schedule=cls._build_schedule(data.get("schedule") or {}),
                logging=cls._build_logging(data.get("logging") or {}),
            )
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid configuration value: {e}")

    @classmethod
    def _build_retention(cls, data: dict[str, Any]) -> RetentionConfig:
        """Build RetentionConfig from dictionary."""
        config = RetentionConfig()
        if "days" in data:
            config.days = int(data["days"])
        if "log_directory" in data and data["log_directory"]:
            config.log_directory = str(data["log_directory"])
        if "extensions" in data:
            extensions = data["extensions"]
            if isinstance(extensions, str):
                extensions = [extensions]
            config.extensions = [str(ext) for ext in extensions or []]
        if "recursive" in data:
            config.recursive = bool(data["recursive"])
        return config

    @classmethod
    def _build_sweep(cls, data: dict[str, Any]) -> SweepConfig:
        """Build SweepConfig from dictionary."""
        config = SweepConfig()
        if "dry_run_default" in data:
            config.dry_run_default = bool(data["dry_run_default"])
        if "max_workers" in data:
            config.max_workers = int(data["max_workers"])
        return config

    @classmethod
    def _build_schedule(cls, data: dict[str, Any]) -> ScheduleConfig:
        """Build ScheduleConfig from dictionary."""
        config = ScheduleConfig()
        if "interval_hours" in data:
            config.interval_hours = int(data["interval_hours"])
        if "enabled" in data:
            config.enabled = bool(data["enabled"])
        if "hidden" in data:
            config.hidden = bool(data["hidden"])
        if "logged" in data:
            config.logged = bool(data["logged"])
        return config

    @classmethod
    def _build_logging(cls, data: dict[str, Any]) -> LoggingConfig:
        """Build LoggingConfig from dictionary."""
        config = LoggingConfig()
        if "level" in data:
            config.level = str(data["level"])
        if "color_output" in data:
            config.color_output = bool(data["color_output"])
        if "log_to_file" in data:
            config.log_to_file = bool(data["log_to_file"])
        if "file_path" in data:
            config.file_path = str(data["file_path"])
        return config

    @classmethod
    def validate(cls, config: LogSweepConfig) -> list[str]:
        """
        Validate configuration and return list of errors.

        Args:
            config: Configuration to validate

        Returns:
            List of error messages (empty if valid)
        """
        errors: list[str] = []

        if config.retention.days < 0:
            errors.append(f"retention.days must be >= 0, got {config.retention.days}")

        if not config.retention.extensions:
            errors.append("retention.extensions must list at least one extension")
        for ext in config.retention.extensions:
            if not ext.strip(". ") or "/" in ext or "\\" in ext:
                errors.append(f"Invalid extension: {ext!r}")

        if not config.retention.log_directory.strip():
            errors.append("retention.log_directory must not be empty")

        if config.sweep.max_workers < 1:
            errors.append("sweep.max_workers must be at least 1")

        if config.schedule.interval_hours <= 0:
            errors.append("schedule.interval_hours must be positive")

        valid_levels = ["debug", "info", "warning", "error", "critical"]
        if config.logging.level.lower() not in valid_levels:
            errors.append(f"Invalid logging level: {config.logging.level}")

        return errors
