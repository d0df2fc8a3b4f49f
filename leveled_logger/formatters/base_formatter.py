"""
Base formatter interface
"""

from abc import ABC, abstractmethod
from leveled_logger.core.log_entry import LogEntry


class BaseFormatter(ABC):
    """
    Abstract base class for log formatters.

    Formatters turn a LogEntry into the single line that a writer emits.
    """

    @abstractmethod
    def format(self, entry: LogEntry) -> str:
        """
        Format a log entry into a string.

        Args:
            entry: The log entry to format

        Returns:
            Formatted line, without trailing newline
        """
        pass
