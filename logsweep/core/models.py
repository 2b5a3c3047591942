"""Data models for LogSweep."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum
from pathlib import Path
from typing import Iterable, Optional


def normalize_extension(ext: str) -> str:
    """Return ``ext`` lower-cased with exactly one leading dot."""
    ext = ext.strip().lower()
    if not ext.startswith("."):
        ext = "." + ext
    return ext


class SweepStatus(Enum):
    """Outcome of a sweep."""

    COMPLETED = "completed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class RetentionPolicy:
    """What to sweep and how old a file must be to go."""

    retention_days: int
    directory_path: Path
    file_extensions: frozenset[str] = frozenset({".txt"})
    recursive: bool = True

    def __post_init__(self):
        if self.retention_days < 0:
            raise ValueError(f"retention_days must be >= 0, got {self.retention_days}")
        object.__setattr__(self, "directory_path", Path(self.directory_path))
        object.__setattr__(
            self,
            "file_extensions",
            frozenset(normalize_extension(ext) for ext in self.file_extensions),
        )

    @classmethod
    def create(
        cls,
        retention_days: int,
        directory_path: Path,
        file_extensions: Iterable[str],
        recursive: bool = True,
    ) -> "RetentionPolicy":
        """Build a policy from any iterable of extensions."""
        return cls(
            retention_days=retention_days,
            directory_path=Path(directory_path),
            file_extensions=frozenset(file_extensions),
            recursive=recursive,
        )

    def cutoff(self, now: datetime) -> datetime:
        """Timestamp below which files qualify for deletion."""
        return now - timedelta(days=self.retention_days)


@dataclass(frozen=True)
class FileRecord:
    """A file seen during enumeration."""

    path: Path
    last_modified_utc: datetime
    size_bytes: int = 0

    @property
    def age(self) -> timedelta:
        """Age relative to the current UTC time."""
        return datetime.now(timezone.utc) - self.last_modified_utc


@dataclass
class SweepResult:
    """Result of a retention sweep."""

    status: SweepStatus = SweepStatus.COMPLETED
    cutoff: Optional[datetime] = None
    dry_run: bool = False

    total_candidates: int = 0
    deleted: int = 0
    failed: int = 0
    skipped: int = 0
    bytes_freed: int = 0

    deleted_paths: list[Path] = field(default_factory=list)
    failed_paths: list[tuple[Path, str]] = field(default_factory=list)
    skipped_paths: list[Path] = field(default_factory=list)

    duration_seconds: float = 0.0

    @property
    def cancelled(self) -> bool:
        return self.status is SweepStatus.CANCELLED

    @property
    def processed(self) -> int:
        """Candidates acted on, successfully or not."""
        return self.deleted + self.failed + self.skipped

    @property
    def remaining(self) -> int:
        """Candidates left untouched because the sweep was cancelled."""
        return self.total_candidates - self.processed
