"""
Core module for logger system

This module contains the fundamental classes:
- Logger: Main logger class
- LoggerBuilder: Builder pattern for logger construction
- LogEntry: Log entry data structure
- LogLevel: Log level enumeration
- LoggerConfig: Configuration management
- CallerFrame, CallerResolver: Call stack inspection
"""

from leveled_logger.core.logger import Logger, create_logger
from leveled_logger.core.logger_builder import LoggerBuilder
from leveled_logger.core.log_entry import LogEntry
from leveled_logger.core.log_level import LogLevel
from leveled_logger.core.logger_config import LoggerConfig
from leveled_logger.core.caller import CallerFrame, CallerResolver, StackCallerResolver

__all__ = [
    "Logger",
    "create_logger",
    "LoggerBuilder",
    "LogEntry",
    "LogLevel",
    "LoggerConfig",
    "CallerFrame",
    "CallerResolver",
    "StackCallerResolver",
]
