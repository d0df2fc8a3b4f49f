"""Logger builder pattern"""

import os
from typing import Optional, Union

from leveled_logger.core.caller import CallerResolver
from leveled_logger.core.log_level import LogLevel
from leveled_logger.core.logger import Logger
from leveled_logger.core.logger_config import LoggerConfig


class LoggerBuilder:
    """Builder pattern for logger construction."""

    def __init__(self):
        self._config = LoggerConfig()
        self._caller_resolver: Optional[CallerResolver] = None

    def with_path(self, path: Union[str, os.PathLike]) -> "LoggerBuilder":
        """Set log directory."""
        self._config.path = path
        return self

    def with_write_file(self, enabled: bool = True) -> "LoggerBuilder":
        """Enable/disable writing to ``latest.log``."""
        self._config.write_file = enabled
        return self

    def with_level(self, level: LogLevel) -> "LoggerBuilder":
        """Set minimum log level."""
        self._config.level = level
        return self

    def with_time_format(self, time_format: str) -> "LoggerBuilder":
        """Set strftime format for the {time} token."""
        self._config.time_format = time_format
        return self

    def with_log_format(self, log_format: str) -> "LoggerBuilder":
        """
        Set line format.

        Example:
            logger = (LoggerBuilder()
                .with_log_format("{time} [{level}] {fileName}:{lineNumber} {content}")
                .build())
        """
        self._config.log_format = log_format
        return self

    def with_caller_depth(self, depth: int) -> "LoggerBuilder":
        """
        Set the stack index of the user call site.

        Wrappers around the logger add one frame per level of indirection.

        Args:
            depth: Index counted from the logger's internal logging routine
                (default 2)

        Returns:
            Self for method chaining
        """
        self._config.caller_depth = depth
        return self

    def with_caller_resolver(self, resolver: CallerResolver) -> "LoggerBuilder":
        """Use a custom caller resolver."""
        self._caller_resolver = resolver
        return self

    def build(self) -> Logger:
        """Build and return configured logger."""
        config = LoggerConfig(
            path=self._config.path,
            write_file=self._config.write_file,
            level=self._config.level,
            time_format=self._config.time_format,
            log_format=self._config.log_format,
            caller_depth=self._config.caller_depth,
        )

        return Logger._create(config, caller_resolver=self._caller_resolver)
