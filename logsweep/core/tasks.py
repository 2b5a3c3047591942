"""Maintenance tasks exposed to an external scheduler.

A scheduler only sees the ``ScheduledTask`` interface: identity metadata,
default triggers and ``execute``. It never needs the concrete class.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from pathlib import Path
from typing import Any, Iterator, Optional

from logsweep.config.schema import LogSweepConfig
from logsweep.core.cancellation import CancellationToken
from logsweep.core.models import RetentionPolicy
from logsweep.core.progress import ProgressCallback
from logsweep.core.sweeper import LogRetentionSweeper
from logsweep.utils.constants import MAINTENANCE_CATEGORY

logger = logging.getLogger(__name__)


class TriggerType(Enum):
    """Kinds of schedule a task can ask for."""

    INTERVAL = "interval"
    STARTUP = "startup"


@dataclass(frozen=True)
class TaskTrigger:
    """A scheduling recommendation; enforcing it is the scheduler's job."""

    type: TriggerType
    interval: Optional[timedelta] = None

    @classmethod
    def every(cls, hours: float) -> "TaskTrigger":
        return cls(type=TriggerType.INTERVAL, interval=timedelta(hours=hours))

    def describe(self) -> str:
        if self.type is TriggerType.INTERVAL and self.interval is not None:
            hours = self.interval.total_seconds() / 3600
            return f"every {hours:g}h"
        return self.type.value


class ScheduledTask(ABC):
    """Interface implemented by every maintenance task."""

    @property
    @abstractmethod
    def key(self) -> str:
        """Stable identifier."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description."""

    @property
    @abstractmethod
    def category(self) -> str:
        """Grouping label shown to operators."""

    @property
    def is_enabled(self) -> bool:
        return True

    @property
    def is_hidden(self) -> bool:
        return False

    @property
    def is_logged(self) -> bool:
        return True

    @abstractmethod
    def default_triggers(self) -> list[TaskTrigger]:
        """When the task should run unless an operator says otherwise."""

    @abstractmethod
    def execute(
        self,
        progress: Optional[ProgressCallback] = None,
        cancellation: Optional[CancellationToken] = None,
    ) -> Any:
        """Run the task once."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} key={self.key!r}>"


class DeleteLogFileTask(ScheduledTask):
    """Deletes log files older than the configured retention."""

    key = "CleanLogFiles"
    name = "Log file cleanup"
    category = MAINTENANCE_CATEGORY

    def __init__(
        self,
        config: LogSweepConfig,
        sweeper: Optional[LogRetentionSweeper] = None,
    ):
        self.config = config
        self.sweeper = sweeper or LogRetentionSweeper(
            dry_run=config.sweep.dry_run_default,
            max_workers=config.sweep.max_workers,
        )

    @property
    def description(self) -> str:
        return f"Deletes log files that are more than {self.config.retention.days} days old."

    @property
    def is_enabled(self) -> bool:
        return self.config.schedule.enabled

    @property
    def is_hidden(self) -> bool:
        return self.config.schedule.hidden

    @property
    def is_logged(self) -> bool:
        return self.config.schedule.logged

    def default_triggers(self) -> list[TaskTrigger]:
        return [TaskTrigger.every(self.config.schedule.interval_hours)]

    def build_policy(self) -> RetentionPolicy:
        retention = self.config.retention
        return RetentionPolicy.create(
            retention_days=retention.days,
            directory_path=Path(retention.log_directory),
            file_extensions=retention.extensions,
            recursive=retention.recursive,
        )

    def execute(self, progress=None, cancellation=None):
        if self.is_logged:
            logger.info(f"Running task {self.key}: {self.description}")
        return self.sweeper.run(self.build_policy(), progress, cancellation)


class TaskRegistry:
    """Keeps maintenance tasks by key, in registration order."""

    def __init__(self):
        self._tasks: dict[str, ScheduledTask] = {}

    def register(self, task: ScheduledTask) -> None:
        if task.key in self._tasks:
            raise ValueError(f"Task already registered: {task.key}")
        self._tasks[task.key] = task

    def get(self, key: str) -> Optional[ScheduledTask]:
        """Look up a task by key (case-insensitive)."""
        if key in self._tasks:
            return self._tasks[key]
        for task_key, task in self._tasks.items():
            if task_key.lower() == key.lower():
                return task
        return None

    def tasks(self, include_hidden: bool = False) -> list[ScheduledTask]:
        return [t for t in self._tasks.values() if include_hidden or not t.is_hidden]

    def __iter__(self) -> Iterator[ScheduledTask]:
        return iter(self._tasks.values())

    def __len__(self) -> int:
        return len(self._tasks)


def build_default_registry(config: LogSweepConfig) -> TaskRegistry:
    """Registry holding every built-in maintenance task."""
    registry = TaskRegistry()
    registry.register(DeleteLogFileTask(config))
    return registry
