"""Unit tests for logsweep.config module."""

from pathlib import Path

import pytest

from logsweep.config.loader import ConfigError, ConfigLoader
from logsweep.config.schema import (
    LoggingConfig,
    LogSweepConfig,
    RetentionConfig,
    ScheduleConfig,
    SweepConfig,
)
from logsweep.config.templates import get_config_template


class TestSchemaDefaults:
    """Tests for the configuration dataclasses."""

    def test_root_defaults(self):
        config = LogSweepConfig()

        assert config.version == "1.0"
        assert config.retention is not None
        assert config.sweep is not None
        assert config.schedule is not None

    def test_retention_defaults(self):
        config = RetentionConfig()

        assert config.days == 3
        assert config.log_directory == "logs"
        assert config.extensions == [".txt"]
        assert config.recursive is True

    def test_extension_lists_are_independent(self):
        first = RetentionConfig()
        second = RetentionConfig()

        first.extensions.append(".old")

        assert second.extensions == [".txt"]

    def test_sweep_and_schedule_defaults(self):
        assert SweepConfig().dry_run_default is False
        assert SweepConfig().max_workers == 1
        schedule = ScheduleConfig()
        assert schedule.interval_hours == 24
        assert (schedule.enabled, schedule.hidden, schedule.logged) == (True, False, True)

    def test_logging_defaults(self):
        config = LoggingConfig()

        assert config.level == "info"
        assert config.color_output is True
        assert config.log_to_file is False


class TestConfigLoader:
    """Tests for ConfigLoader."""

    def test_load_defaults(self):
        config = ConfigLoader.load()

        assert isinstance(config, LogSweepConfig)
        assert config.retention.days == 3

    def test_load_from_yaml(self, tmp_path: Path):
        config_path = tmp_path / "custom.yaml"
        config_path.write_text("""
version: "2.0"
retention:
  days: 14
  log_directory: /var/log/app
  extensions: [".txt", ".old"]
  recursive: false
sweep:
  dry_run_default: true
  max_workers: 4
schedule:
  interval_hours: 12
  hidden: true
logging:
  level: debug
""")

        config = ConfigLoader.load(config_path)

        assert config.version == "2.0"
        assert config.retention.days == 14
        assert config.retention.log_directory == "/var/log/app"
        assert config.retention.extensions == [".txt", ".old"]
        assert config.retention.recursive is False
        assert config.sweep.dry_run_default is True
        assert config.sweep.max_workers == 4
        assert config.schedule.interval_hours == 12
        assert config.schedule.hidden is True
        assert config.schedule.enabled is True
        assert config.logging.level == "debug"

    def test_single_extension_string(self, tmp_path: Path):
        config_path = tmp_path / "c.yaml"
        config_path.write_text("retention:\n  extensions: .log\n")

        config = ConfigLoader.load(config_path)

        assert config.retention.extensions == [".log"]

    def test_partial_config_keeps_defaults(self, tmp_path: Path):
        config_path = tmp_path / "c.yaml"
        config_path.write_text("retention:\n  days: 10\n")

        config = ConfigLoader.load(config_path)

        assert config.retention.days == 10
        assert config.retention.extensions == [".txt"]
        assert config.schedule.interval_hours == 24

    def test_empty_file_gives_defaults(self, tmp_path: Path):
        config_path = tmp_path / "empty.yaml"
        config_path.write_text("")

        assert ConfigLoader.load(config_path) == LogSweepConfig()

    def test_default_path_discovered(self, tmp_path: Path):
        (tmp_path / "logsweep.yaml").write_text("retention:\n  days: 9\n")

        config = ConfigLoader.load()

        assert config.retention.days == 9
        assert ConfigLoader.find_config_file() == Path("logsweep.yaml")

    def test_state_dir_path_discovered(self, tmp_path: Path):
        (tmp_path / ".logsweep").mkdir()
        (tmp_path / ".logsweep" / "config.yaml").write_text("retention:\n  days: 11\n")

        assert ConfigLoader.load().retention.days == 11

    def test_missing_explicit_file(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="not found"):
            ConfigLoader.load(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path: Path):
        config_path = tmp_path / "bad.yaml"
        config_path.write_text("retention: [unclosed\n")

        with pytest.raises(ConfigError, match="Invalid YAML"):
            ConfigLoader.load(config_path)

    def test_non_mapping_top_level(self, tmp_path: Path):
        config_path = tmp_path / "list.yaml"
        config_path.write_text("- a\n- b\n")

        with pytest.raises(ConfigError, match="mapping"):
            ConfigLoader.load(config_path)

    def test_bad_value_type(self, tmp_path: Path):
        config_path = tmp_path / "c.yaml"
        config_path.write_text("retention:\n  days: many\n")

        with pytest.raises(ConfigError, match="Invalid configuration value"):
            ConfigLoader.load(config_path)


class TestValidate:
    """Tests for ConfigLoader.validate."""

    def test_defaults_are_valid(self):
        assert ConfigLoader.validate(LogSweepConfig()) == []

    def test_negative_days(self):
        config = LogSweepConfig(retention=RetentionConfig(days=-1))

        errors = ConfigLoader.validate(config)

        assert any("retention.days" in e for e in errors)

    def test_zero_days_is_valid(self):
        config = LogSweepConfig(retention=RetentionConfig(days=0))

        assert ConfigLoader.validate(config) == []

    def test_empty_extensions(self):
        config = LogSweepConfig(retention=RetentionConfig(extensions=[]))

        assert any("extensions" in e for e in ConfigLoader.validate(config))

    def test_malformed_extension(self):
        config = LogSweepConfig(retention=RetentionConfig(extensions=[".", "a/b"]))

        errors = ConfigLoader.validate(config)

        assert len([e for e in errors if "Invalid extension" in e]) == 2

    def test_workers_interval_and_level(self):
        config = LogSweepConfig(
            sweep=SweepConfig(max_workers=0),
            schedule=ScheduleConfig(interval_hours=0),
            logging=LoggingConfig(level="chatty"),
        )

        errors = ConfigLoader.validate(config)

        assert len(errors) == 3


class TestTemplates:
    @pytest.mark.parametrize("full", [False, True])
    def test_templates_load_and_validate(self, tmp_path: Path, full):
        config_path = tmp_path / "template.yaml"
        config_path.write_text(get_config_template(full=full))

        config = ConfigLoader.load(config_path)

        assert ConfigLoader.validate(config) == []
        assert config.retention.extensions == [".txt"]
