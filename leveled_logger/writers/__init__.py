"""Writers module - Log output handlers"""

from leveled_logger.writers.console_writer import ConsoleWriter
from leveled_logger.writers.rotating_file_writer import RotatingFileWriter

__all__ = ["ConsoleWriter", "RotatingFileWriter"]
