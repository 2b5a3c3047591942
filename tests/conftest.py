"""Pytest configuration and shared fixtures for LogSweep tests."""

import os
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable

import pytest

from logsweep.config.schema import LogSweepConfig, RetentionConfig


DAY = 24 * 60 * 60


# =============================================================================
# Test Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def isolate_working_directory(tmp_path, monkeypatch):
    """Run every test with tmp_path as cwd.

    Keeps config discovery (logsweep.yaml, .logsweep/) away from the
    project directory.
    """
    monkeypatch.chdir(tmp_path)


# =============================================================================
# Path Fixtures
# =============================================================================


@pytest.fixture
def log_dir(tmp_path: Path) -> Path:
    """An empty log directory."""
    path = tmp_path / "logs"
    path.mkdir()
    return path


@pytest.fixture
def make_log(log_dir: Path) -> Callable[..., Path]:
    """Factory creating a log file with a given age.

    Usage: make_log("a.txt", age_days=40) or make_log("x.txt", age_seconds=1)
    """

    def _make(
        name: str,
        age_days: float = 0,
        age_seconds: float = 0,
        content: bytes = b"log line\n",
        directory: Path = None,
    ) -> Path:
        path = (directory or log_dir) / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        mtime = time.time() - age_days * DAY - age_seconds
        os.utime(path, (mtime, mtime))
        return path

    return _make


@pytest.fixture
def scenario_dir(make_log) -> dict[str, Path]:
    """a.txt (40 days), b.txt (10 days), c.log (100 days)."""
    return {
        "a": make_log("a.txt", age_days=40),
        "b": make_log("b.txt", age_days=10),
        "c": make_log("c.log", age_days=100),
    }


# =============================================================================
# Config Fixtures
# =============================================================================


@pytest.fixture
def sweep_config(log_dir: Path) -> LogSweepConfig:
    """Config pointing at log_dir with a 30-day retention."""
    return LogSweepConfig(
        retention=RetentionConfig(days=30, log_directory=str(log_dir)),
    )


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


# =============================================================================
# Progress Fixtures
# =============================================================================


@pytest.fixture
def progress_log() -> list[float]:
    """List that a test passes as ``progress_log.append``."""
    return []
