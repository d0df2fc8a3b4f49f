"""
Log formatters module

Provides the formatter used for console and file lines.
"""

from leveled_logger.formatters.base_formatter import BaseFormatter
from leveled_logger.formatters.template_formatter import TemplateFormatter

__all__ = [
    "BaseFormatter",
    "TemplateFormatter",
]
