"""Configuration management for LogSweep."""

from logsweep.config.loader import ConfigError, ConfigLoader
from logsweep.config.schema import LogSweepConfig

__all__ = ["ConfigError", "ConfigLoader", "LogSweepConfig"]
