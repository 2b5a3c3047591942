"""Log retention sweeper.

Deletes files older than a retention window from a log directory. The sweep
is best-effort: a file that cannot be deleted is recorded and skipped, and
the next scheduled run will try it again.
"""

import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from typing import Callable, Optional

from logsweep.core.cancellation import CancellationToken
from logsweep.core.filesystem import LocalFileSystem
from logsweep.core.models import FileRecord, RetentionPolicy, SweepResult, SweepStatus
from logsweep.core.progress import ProgressCallback, ProgressReporter

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class LogRetentionSweeper:
    """Deletes log files older than a retention policy allows."""

    def __init__(
        self,
        filesystem: Optional[LocalFileSystem] = None,
        dry_run: bool = False,
        max_workers: int = 1,
        clock: Callable[[], datetime] = utc_now,
    ):
        """
        Initialize the sweeper.

        Args:
            filesystem: Filesystem collaborator (defaults to the local disk)
            dry_run: If True, report what would be deleted without deleting
            max_workers: Number of deletion threads; 1 deletes sequentially
            clock: Returns the current time as an aware UTC datetime
        """
        if max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {max_workers}")
        self.filesystem = filesystem or LocalFileSystem()
        self.dry_run = dry_run
        self.max_workers = max_workers
        self.clock = clock
        self._result_lock = threading.Lock()

    def find_candidates(
        self,
        policy: RetentionPolicy,
        cutoff: Optional[datetime] = None,
    ) -> list[FileRecord]:
        """
        List files the policy makes eligible for deletion.

        Args:
            policy: Retention policy
            cutoff: Override for the cutoff (defaults to now - retention)

        Returns:
            Matching files last modified strictly before the cutoff

        Raises:
            EnumerationError: If the directory cannot be listed
        """
        if cutoff is None:
            cutoff = policy.cutoff(self.clock())
        files = self.filesystem.list_files(
            policy.directory_path,
            policy.file_extensions,
            policy.recursive,
        )
        return [f for f in files if f.last_modified_utc < cutoff]

    def run(
        self,
        policy: RetentionPolicy,
        progress: Optional[ProgressCallback] = None,
        cancellation: Optional[CancellationToken] = None,
    ) -> SweepResult:
        """
        Run one sweep.

        Progress is reported as 100 * processed / total before each file and
        as 100 once every candidate has been handled. A cancelled sweep stops
        at the next file boundary and returns with status CANCELLED; files
        already deleted stay deleted.

        Args:
            policy: Retention policy to apply
            progress: Optional callback receiving percentages in [0, 100]
            cancellation: Optional token checked before each file

        Returns:
            SweepResult with counts and details

        Raises:
            EnumerationError: If the directory cannot be listed
        """
        reporter = ProgressReporter(progress)
        token = cancellation or CancellationToken()
        start_time = time.monotonic()

        cutoff = policy.cutoff(self.clock())
        result = SweepResult(cutoff=cutoff, dry_run=self.dry_run)

        logger.info(
            f"Sweeping {policy.directory_path} for {', '.join(sorted(policy.file_extensions))} "
            f"files modified before {cutoff:%Y-%m-%d %H:%M:%S} UTC"
        )

        candidates = self.find_candidates(policy, cutoff)
        result.total_candidates = len(candidates)

        if self.max_workers > 1 and len(candidates) > 1:
            completed = self._run_parallel(candidates, reporter, token, result)
        else:
            completed = self._run_sequential(candidates, reporter, token, result)

        if completed:
            reporter.complete()
        else:
            result.status = SweepStatus.CANCELLED
            logger.info(
                f"Sweep cancelled after {result.processed} of {result.total_candidates} files"
            )

        result.duration_seconds = time.monotonic() - start_time
        verb = "Would delete" if self.dry_run else "Deleted"
        logger.info(
            f"{verb} {result.deleted} of {result.total_candidates} files, "
            f"{result.failed} failed, {result.skipped} already gone "
            f"in {result.duration_seconds:.2f}s"
        )
        return result

    def _run_sequential(
        self,
        candidates: list[FileRecord],
        reporter: ProgressReporter,
        token: CancellationToken,
        result: SweepResult,
    ) -> bool:
        """Delete candidates in order. Returns False if cancelled."""
        total = len(candidates)
        for index, record in enumerate(candidates):
            reporter.report(100.0 * index / total)
            if token.is_cancelled:
                return False
            self._delete_one(record, result)
        return True

    def _run_parallel(
        self,
        candidates: list[FileRecord],
        reporter: ProgressReporter,
        token: CancellationToken,
        result: SweepResult,
    ) -> bool:
        """Delete candidates on a thread pool. Returns False if cancelled."""
        claimer = _Claimer(candidates, reporter, token)

        def worker() -> None:
            while True:
                record = claimer.next()
                if record is None:
                    return
                self._delete_one(record, result)

        workers = min(self.max_workers, len(candidates))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="logsweep") as pool:
            futures = [pool.submit(worker) for _ in range(workers)]
            for future in futures:
                future.result()

        return not claimer.cancelled

    def _delete_one(self, record: FileRecord, result: SweepResult) -> None:
        """Delete (or simulate deleting) one file and record the outcome."""
        path = record.path

        if self.dry_run:
            logger.debug(f"Would delete: {path}")
            with self._result_lock:
                result.deleted += 1
                result.bytes_freed += record.size_bytes
                result.deleted_paths.append(path)
            return

        try:
            removed = self.filesystem.delete(path)
        except OSError as e:
            logger.warning(f"Failed to delete {path}: {e}")
            with self._result_lock:
                result.failed += 1
                result.failed_paths.append((path, str(e)))
            return

        with self._result_lock:
            if removed:
                result.deleted += 1
                result.bytes_freed += record.size_bytes
                result.deleted_paths.append(path)
            else:
                result.skipped += 1
                result.skipped_paths.append(path)

        if removed:
            logger.info(f"Deleted: {path}")
        else:
            logger.debug(f"Already gone: {path}")


class _Claimer:
    """Hands out candidates to worker threads in enumeration order.

    Progress is reported and cancellation checked while the claim lock is
    held, so reports are monotonic and no file is claimed after the token
    has been observed.
    """

    def __init__(
        self,
        candidates: list[FileRecord],
        reporter: ProgressReporter,
        token: CancellationToken,
    ):
        self._candidates = candidates
        self._reporter = reporter
        self._token = token
        self._lock = threading.Lock()
        self._index = 0
        self.cancelled = False

    def next(self) -> Optional[FileRecord]:
        with self._lock:
            total = len(self._candidates)
            if self.cancelled or self._index >= total:
                return None
            self._reporter.report(100.0 * self._index / total)
            if self._token.is_cancelled:
                self.cancelled = True
                return None
            record = self._candidates[self._index]
            self._index += 1
            return record
