"""Configuration schema definitions for LogSweep."""

from dataclasses import dataclass, field

from logsweep.utils.constants import (
    DEFAULT_INTERVAL_HOURS,
    DEFAULT_LOG_DIRECTORY,
    DEFAULT_LOG_EXTENSIONS,
    DEFAULT_RETENTION_DAYS,
)


@dataclass
class RetentionConfig:
    """Which files are swept and how old they must be."""

    days: int = DEFAULT_RETENTION_DAYS
    log_directory: str = DEFAULT_LOG_DIRECTORY
    extensions: list[str] = field(default_factory=lambda: list(DEFAULT_LOG_EXTENSIONS))
    recursive: bool = True


@dataclass
class SweepConfig:
    """Sweep execution settings."""

    dry_run_default: bool = False
    max_workers: int = 1  # 1 = sequential deletion


@dataclass
class ScheduleConfig:
    """Hints handed to an external scheduler."""

    interval_hours: int = DEFAULT_INTERVAL_HOURS
    enabled: bool = True
    hidden: bool = False
    logged: bool = True


@dataclass
class LoggingConfig:
    """Logging configuration settings."""

    level: str = "info"
    color_output: bool = True
    log_to_file: bool = False
    file_path: str = ".logsweep/logsweep.log"


@dataclass
class LogSweepConfig:
    """Root configuration object for LogSweep."""

    version: str = "1.0"
    retention: RetentionConfig = field(default_factory=RetentionConfig)
    sweep: SweepConfig = field(default_factory=SweepConfig)
    schedule: ScheduleConfig = field(default_factory=ScheduleConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
