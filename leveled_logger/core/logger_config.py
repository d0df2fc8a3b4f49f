"""
Logger configuration management

Each Logger owns exactly one LoggerConfig.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from leveled_logger.core.log_level import LogLevel

DEFAULT_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_LOG_FORMAT = "{time} [{level}] {content}"


def default_log_path() -> Path:
    """Default log directory: ``logs`` under the working directory."""
    return Path.cwd() / "logs"


@dataclass
class LoggerConfig:
    """
    Logger configuration.

    Fields may be changed at any time; the next logging call picks
    up the new values.
    """

    # Output settings
    path: Union[str, os.PathLike] = field(default_factory=default_log_path)
    write_file: bool = True

    # Filtering
    level: LogLevel = LogLevel.INFO

    # Format settings
    time_format: str = DEFAULT_TIME_FORMAT
    log_format: str = DEFAULT_LOG_FORMAT

    # Stack index of the user call site, counted from Logger._log
    caller_depth: int = 2

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.caller_depth < 0:
            raise ValueError("caller_depth cannot be negative")

        if isinstance(self.path, str):
            self.path = Path(self.path)
        if isinstance(self.level, str):
            self.level = LogLevel.from_string(self.level)

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "LoggerConfig":
        """Create configuration for debugging."""
        return cls(
            level=LogLevel.DEBUG,
            log_format="{time} [{level}] {fileName}:{lineNumber} {functionName} - {content}",
        )

    @classmethod
    def console_config(cls) -> "LoggerConfig":
        """Create configuration that only prints to the console."""
        return cls(write_file=False)
