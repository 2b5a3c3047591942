"""Tests for LogSweep data models."""

from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from logsweep.core.models import (
    FileRecord,
    RetentionPolicy,
    SweepResult,
    SweepStatus,
    normalize_extension,
)


class TestNormalizeExtension:
    @pytest.mark.parametrize(
        "raw, expected",
        [(".txt", ".txt"), ("txt", ".txt"), (".TXT", ".txt"), ("  Log ", ".log")],
    )
    def test_normalizes(self, raw, expected):
        assert normalize_extension(raw) == expected


class TestRetentionPolicy:
    """Tests for RetentionPolicy."""

    def test_negative_days_rejected(self):
        with pytest.raises(ValueError):
            RetentionPolicy(retention_days=-1, directory_path=Path("logs"))

    def test_extensions_normalized(self):
        policy = RetentionPolicy.create(3, "logs", ["TXT", ".Log"])

        assert policy.file_extensions == frozenset({".txt", ".log"})
        assert isinstance(policy.directory_path, Path)

    def test_default_extension_is_txt(self):
        policy = RetentionPolicy(retention_days=3, directory_path=Path("logs"))

        assert policy.file_extensions == frozenset({".txt"})
        assert policy.recursive is True

    def test_cutoff(self):
        now = datetime(2024, 6, 1, tzinfo=timezone.utc)
        policy = RetentionPolicy.create(30, "logs", [".txt"])

        assert policy.cutoff(now) == datetime(2024, 5, 2, tzinfo=timezone.utc)

    def test_zero_days_cutoff_is_now(self):
        now = datetime(2024, 6, 1, tzinfo=timezone.utc)
        policy = RetentionPolicy.create(0, "logs", [".txt"])

        assert policy.cutoff(now) == now


class TestFileRecord:
    def test_age(self):
        record = FileRecord(
            path=Path("a.txt"),
            last_modified_utc=datetime.now(timezone.utc) - timedelta(days=2),
        )

        assert timedelta(days=2) <= record.age < timedelta(days=2, minutes=1)


class TestSweepResult:
    def test_defaults(self):
        result = SweepResult()

        assert result.status == SweepStatus.COMPLETED
        assert result.cancelled is False
        assert result.processed == 0
        assert result.remaining == 0

    def test_processed_and_remaining(self):
        result = SweepResult(
            status=SweepStatus.CANCELLED,
            total_candidates=10,
            deleted=4,
            failed=1,
            skipped=1,
        )

        assert result.cancelled is True
        assert result.processed == 6
        assert result.remaining == 4
