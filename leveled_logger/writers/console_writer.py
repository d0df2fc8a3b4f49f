"""Console writer with ANSI colors"""

import sys
from leveled_logger.core.log_entry import LogEntry
from leveled_logger.core.log_level import LogLevel

# Levels routed to the error stream
STDERR_LEVELS = frozenset({LogLevel.WARNING, LogLevel.ERROR})


class ConsoleWriter:
    """Write logs to stdout, or stderr for warnings and errors."""

    def __init__(self, formatter, stdout=None, stderr=None):
        """
        Initialize console writer.

        Args:
            formatter: Log formatter producing the console line
            stdout: Output stream (default: sys.stdout at write time)
            stderr: Error stream (default: sys.stderr at write time)
        """
        self.formatter = formatter
        self._stdout = stdout
        self._stderr = stderr

    def stream_for(self, entry: LogEntry):
        """Pick the stream an entry is written to."""
        if entry.level in STDERR_LEVELS:
            return self._stderr or sys.stderr
        return self._stdout or sys.stdout

    def write(self, entry: LogEntry):
        """Write log entry to console."""
        stream = self.stream_for(entry)
        stream.write(self.formatter.format(entry) + "\n")
        stream.flush()
