"""Core modules for LogSweep."""

from logsweep.core.cancellation import CancellationToken
from logsweep.core.errors import EnumerationError, LogSweepError
from logsweep.core.models import FileRecord, RetentionPolicy, SweepResult, SweepStatus
from logsweep.core.sweeper import LogRetentionSweeper

__all__ = [
    "CancellationToken",
    "EnumerationError",
    "FileRecord",
    "LogRetentionSweeper",
    "LogSweepError",
    "RetentionPolicy",
    "SweepResult",
    "SweepStatus",
]
