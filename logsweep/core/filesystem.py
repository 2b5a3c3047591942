"""Filesystem access used by the sweeper.

The sweeper only needs three operations: list candidate files, read a
file's last-modified time and delete a file. ``LocalFileSystem`` provides
them on top of ``os.scandir``; tests can substitute any object with the
same methods.
"""

import logging
import os
from collections import deque
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, Iterator

from logsweep.core.errors import EnumerationError
from logsweep.core.models import FileRecord, normalize_extension

logger = logging.getLogger(__name__)


class LocalFileSystem:
    """Filesystem operations against the local disk."""

    def list_files(
        self,
        directory: Path,
        extensions: Iterable[str],
        recursive: bool = True,
    ) -> list[FileRecord]:
        """
        List files under a directory whose extension matches.

        A directory that does not exist yields an empty list. Unreadable
        subdirectories are logged and skipped; only a failure to read the
        top-level directory is fatal.

        Args:
            directory: Directory to enumerate
            extensions: Extensions to keep (case-insensitive, dot optional)
            recursive: Whether to descend into subdirectories

        Returns:
            FileRecord for each matching file, in enumeration order

        Raises:
            EnumerationError: If the directory cannot be listed at all
        """
        directory = Path(directory)
        wanted = {normalize_extension(ext) for ext in extensions}

        if not directory.exists():
            logger.debug(f"Log directory does not exist: {directory}")
            return []

        if not directory.is_dir():
            raise EnumerationError(directory, "not a directory")

        records = []
        for path in self._iter_files(directory, recursive):
            if path.suffix.lower() not in wanted:
                continue
            try:
                stat = path.stat()
            except FileNotFoundError:
                # Removed between listing and stat
                continue
            except OSError as e:
                logger.warning(f"Cannot stat {path}: {e}")
                continue
            records.append(
                FileRecord(
                    path=path,
                    last_modified_utc=datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
                    size_bytes=stat.st_size,
                )
            )
        return records

    def _iter_files(self, root: Path, recursive: bool) -> Iterator[Path]:
        """Yield regular files under ``root``.

        Symlinks are never followed: linked directories are not entered and
        linked files are not yielded, so a file is always aged by its own mtime.
        """
        pending = deque([root])
        while pending:
            current = pending.popleft()
            try:
                with os.scandir(current) as entries:
                    children = sorted(entries, key=lambda e: e.name)
            except OSError as e:
                if current == root:
                    raise EnumerationError(root, e.strerror or str(e)) from e
                logger.warning(f"Skipping unreadable directory {current}: {e}")
                continue

            for entry in children:
                try:
                    if entry.is_dir(follow_symlinks=False):
                        if recursive:
                            pending.append(Path(entry.path))
                    elif entry.is_file(follow_symlinks=False):
                        yield Path(entry.path)
                except OSError as e:
                    logger.warning(f"Skipping {entry.path}: {e}")

    def last_modified_utc(self, path: Path) -> datetime:
        """Last write time of ``path`` as an aware UTC datetime."""
        return datetime.fromtimestamp(Path(path).stat().st_mtime, tz=timezone.utc)

    def delete(self, path: Path) -> bool:
        """
        Delete a file.

        Returns:
            True if the file was removed, False if it was already gone

        Raises:
            OSError: If the file exists but could not be removed
        """
        try:
            Path(path).unlink()
        except FileNotFoundError:
            return False
        return True
