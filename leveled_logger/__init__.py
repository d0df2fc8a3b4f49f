"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Leveled Logger - leveled console and rotating file logging with caller
location tags
"""

__version__ = "1.0.0"

from leveled_logger.core.logger import Logger, create_logger
from leveled_logger.core.logger_builder import LoggerBuilder
from leveled_logger.core.log_entry import LogEntry
from leveled_logger.core.log_level import LogLevel, LEVEL_TAGS, LEVEL_COLORS
from leveled_logger.core.logger_config import LoggerConfig
from leveled_logger.core.caller import CallerFrame, CallerResolver, StackCallerResolver

# Import submodules (not all classes by default)
from leveled_logger import formatters
from leveled_logger import writers

__all__ = [
    "Logger",
    "create_logger",
    "LoggerBuilder",
    "LogEntry",
    "LogLevel",
    "LEVEL_TAGS",
    "LEVEL_COLORS",
    "LoggerConfig",
    "CallerFrame",
    "CallerResolver",
    "StackCallerResolver",
    "formatters",
    "writers",
]
