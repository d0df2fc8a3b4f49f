"""
Log level enumeration

Levels, their fixed-width tags and console colors
"""

from enum import IntEnum
from typing import Dict


class LogLevel(IntEnum):
    """
    Log level enumeration.

    Ranks ascend in declaration order, so levels compare directly
    against the configured threshold.
    """

    DEBUG = 0
    INFO = 1
    SUCCESS = 2
    WARNING = 3
    ERROR = 4
    NOTICE = 5

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive)

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        name = level_str.strip().upper()
        if name in cls.__members__:
            return cls[name]
        raise ValueError(f"Invalid log level: {level_str}")

    @property
    def tag(self) -> str:
        """Plain fixed-width tag, used in log files."""
        return LEVEL_TAGS[self]

    @property
    def color_code(self) -> str:
        """
        Get ANSI color code for this level.

        Returns:
            ANSI escape sequence
        """
        return LEVEL_COLORS.get(self, RESET_CODE)

    @property
    def colored_tag(self) -> str:
        """Tag wrapped in this level's color, used on the console."""
        return f"{self.color_code}{self.tag}{RESET_CODE}"


RESET_CODE = "\033[0m"

# Every tag is 7 characters wide so console columns line up
LEVEL_TAGS: Dict[LogLevel, str] = {
    LogLevel.DEBUG: " debug ",
    LogLevel.INFO: " info  ",
    LogLevel.SUCCESS: "success",
    LogLevel.WARNING: "warning",
    LogLevel.ERROR: " error ",
    LogLevel.NOTICE: "notice ",
}

LEVEL_COLORS: Dict[LogLevel, str] = {
    LogLevel.DEBUG: "\033[90m",     # Gray
    LogLevel.INFO: "\033[34m",      # Blue
    LogLevel.SUCCESS: "\033[92m",   # Bright green
    LogLevel.WARNING: "\033[93m",   # Bright yellow
    LogLevel.ERROR: "\033[91m",     # Bright red
    LogLevel.NOTICE: "\033[101m",   # Bright red background
}
