"""Rotating file writer"""

from __future__ import annotations

import os
import threading
import time
from datetime import datetime, timedelta
from pathlib import Path
from typing import Callable, Dict, Optional, Tuple, Union

from leveled_logger.core.log_entry import LogEntry

LATEST_NAME = "latest.log"
ARCHIVE_TEMPLATE = "output-{date}.log"

_directory_locks: Dict[str, threading.Lock] = {}
_directory_locks_guard = threading.Lock()

# Creation time and inode of each latest.log seen in this process, keyed by path
_creation_times: Dict[str, Tuple[float, int]] = {}


def directory_lock(directory: Path) -> threading.Lock:
    """Lock shared by every writer appending into ``directory``."""
    key = os.path.abspath(directory)
    with _directory_locks_guard:
        lock = _directory_locks.get(key)
        if lock is None:
            lock = _directory_locks[key] = threading.Lock()
        return lock


class RotatingFileWriter:
    """
    Append log lines to ``latest.log`` with age-based rotation.

    Once ``latest.log`` is at least ``max_age`` old it is renamed to
    ``output-YYYY-MM-DD.log`` (its creation date) and a fresh file is
    started. Archive names are not deduplicated; a second rotation on
    the same day follows ``os.rename`` semantics.

    Thread Safety:
        The check-rotate-append sequence holds a per-directory lock.
    """

    def __init__(
        self,
        formatter=None,
        max_age: timedelta = timedelta(days=1),
        encoding: str = "utf-8",
        clock: Callable[[], float] = time.time,
    ):
        """
        Initialize rotating file writer.

        Args:
            formatter: Log formatter used by write() (default: entry's __str__)
            max_age: Age at which latest.log is archived
            encoding: File encoding (default: 'utf-8')
            clock: Returns the current time as a POSIX timestamp
        """
        self.formatter = formatter
        self.max_age = max_age
        self.encoding = encoding
        self.clock = clock

    def write(self, entry: LogEntry, directory: Union[str, os.PathLike]):
        """Format a log entry and append it into ``directory``."""
        if self.formatter:
            msg = self.formatter.format(entry)
        else:
            msg = str(entry)
        self.append(directory, msg)

    def append(self, directory: Union[str, os.PathLike], line: str) -> Path:
        """
        Append one line to ``directory/latest.log``, rotating first if due.

        Args:
            directory: Log directory; created if missing (parents are not)
            line: Text to append, without trailing newline

        Returns:
            Path of the file the line was written to

        Raises:
            OSError: If the directory cannot be created, or the rotation
                rename or the write fails
        """
        directory = Path(directory)
        with directory_lock(directory):
            directory.mkdir(exist_ok=True)

            output = directory / LATEST_NAME
            try:
                stat = os.stat(output)
            except OSError:
                stat = None

            if stat is not None:
                created = self.creation_time(output, stat)
                if self.clock() - created >= self.max_age.total_seconds():
                    self._rotate(output, created)

            self._append_line(output, line)
            return output

    def creation_time(self, path: Path, stat: Optional[os.stat_result] = None) -> float:
        """
        Best known creation time of ``path`` as a POSIX timestamp.

        Uses the file system birth time where the platform reports one.
        Otherwise uses the time a writer in this process created the file,
        or, for a file first seen here, its modification time at that
        moment. The recorded value stays fixed while later appends move
        the modification time forward.
        """
        if stat is None:
            stat = os.stat(path)
        birthtime = getattr(stat, "st_birthtime", None)
        if birthtime:
            return birthtime

        key = os.path.abspath(path)
        known = _creation_times.get(key)
        # Only trust the record while it still describes the same file
        if known is not None and known[1] == stat.st_ino:
            return known[0]
        _creation_times[key] = (stat.st_mtime, stat.st_ino)
        return stat.st_mtime

    def archive_name(self, created: float) -> str:
        """Archive file name for a file created at ``created``."""
        date = datetime.fromtimestamp(created).strftime("%Y-%m-%d")
        return ARCHIVE_TEMPLATE.format(date=date)

    def _rotate(self, output: Path, created: float):
        output.rename(output.with_name(self.archive_name(created)))
        _creation_times.pop(os.path.abspath(output), None)

    def _append_line(self, output: Path, line: str):
        is_new = not output.exists()
        with open(output, "a", encoding=self.encoding) as f:
            f.write(line + "\n")
        if is_new:
            _creation_times[os.path.abspath(output)] = (self.clock(), os.stat(output).st_ino)
