"""
Main Logger class - synchronous leveled logger

Each logging call writes a colored line to the console and, when
enabled, a plain line to ``<path>/latest.log``.
"""

from __future__ import annotations
from typing import Any, Optional

from leveled_logger.core.caller import CallerResolver, StackCallerResolver
from leveled_logger.core.log_entry import LogEntry, render_content
from leveled_logger.core.log_level import LogLevel
from leveled_logger.core.logger_config import LoggerConfig
from leveled_logger.formatters.template_formatter import TemplateFormatter, uses_location
from leveled_logger.writers.console_writer import ConsoleWriter
from leveled_logger.writers.rotating_file_writer import RotatingFileWriter

_CREATE_KEY = object()


class Logger:
    """
    Leveled logger.

    Instances are created with ``Logger.create_instance()``; each one owns
    its configuration. All output happens synchronously on the calling
    thread, and file system errors propagate to the caller.
    """

    def __init__(
        self,
        config: Optional[LoggerConfig] = None,
        *,
        caller_resolver: Optional[CallerResolver] = None,
        _key: object = None,
    ):
        if _key is not _CREATE_KEY:
            raise TypeError("Logger instances are created with Logger.create_instance()")

        self._config = config or LoggerConfig.default()
        self._caller_resolver = caller_resolver or StackCallerResolver()
        self._console_writer = ConsoleWriter(
            TemplateFormatter(self._config, colored=True)
        )
        self._file_writer = RotatingFileWriter(
            TemplateFormatter(self._config, colored=False)
        )

    @classmethod
    def create_instance(cls) -> "Logger":
        """Create a new, independently configured logger."""
        return cls._create()

    @classmethod
    def _create(
        cls,
        config: Optional[LoggerConfig] = None,
        caller_resolver: Optional[CallerResolver] = None,
    ) -> "Logger":
        return cls(config, caller_resolver=caller_resolver, _key=_CREATE_KEY)

    # Configuration

    @property
    def config(self) -> LoggerConfig:
        """Configuration owned by this logger."""
        return self._config

    @property
    def path(self):
        """Log directory."""
        return self._config.path

    @path.setter
    def path(self, value):
        self._config.path = value

    @property
    def write_file(self) -> bool:
        """Whether logs are also appended to ``<path>/latest.log``."""
        return self._config.write_file

    @write_file.setter
    def write_file(self, value: bool):
        self._config.write_file = value

    @property
    def level(self) -> LogLevel:
        """Minimum level that produces output."""
        return self._config.level

    @level.setter
    def level(self, value: LogLevel):
        if isinstance(value, str):
            value = LogLevel.from_string(value)
        self._config.level = value

    @property
    def time_format(self) -> str:
        """
        strftime format used for the ``{time}`` token.
        """
        return self._config.time_format

    @time_format.setter
    def time_format(self, value: str):
        self._config.time_format = value

    @property
    def log_format(self) -> str:
        """
        Line format. Supported tokens are
        {time}, {level}, {content}, {fileName}, {lineNumber},
        {functionName} and {columnNumber}.
        """
        return self._config.log_format

    @log_format.setter
    def log_format(self, value: str):
        self._config.log_format = value

    @property
    def caller_depth(self) -> int:
        """Stack index of the user call site, counted from the logging routine."""
        return self._config.caller_depth

    @caller_depth.setter
    def caller_depth(self, value: int):
        self._config.caller_depth = value

    @property
    def caller_resolver(self) -> CallerResolver:
        return self._caller_resolver

    @caller_resolver.setter
    def caller_resolver(self, value: CallerResolver):
        self._caller_resolver = value

    # Logging

    def debug(self, *args: Any) -> None:
        """Log debug message."""
        self._log(LogLevel.DEBUG, args)

    def info(self, *args: Any) -> None:
        """Log info message."""
        self._log(LogLevel.INFO, args)

    def success(self, *args: Any) -> None:
        """Log success message."""
        self._log(LogLevel.SUCCESS, args)

    def warning(self, *args: Any) -> None:
        """Log warning message."""
        self._log(LogLevel.WARNING, args)

    def error(self, *args: Any) -> None:
        """Log error message."""
        self._log(LogLevel.ERROR, args)

    def notice(self, *args: Any) -> None:
        """Log notice message."""
        self._log(LogLevel.NOTICE, args)

    def _log(self, level: LogLevel, args: tuple) -> None:
        """Log a message. Must be called directly by a per-level method."""
        if level < self._config.level:
            return

        caller = None
        if uses_location(self._config.log_format):
            # Frame 0 is this method, 1 the per-level method, 2 the user call site
            depth = self._config.caller_depth
            frames = self._caller_resolver.resolve(limit=depth + 1)
            if len(frames) > depth:
                caller = frames[depth]

        entry = LogEntry(level=level, content=render_content(args), caller=caller)

        if self._config.write_file:
            self._file_writer.write(entry, self._config.path)

        self._console_writer.write(entry)


def create_logger() -> Logger:
    """Create a new logger with default configuration."""
    return Logger.create_instance()
