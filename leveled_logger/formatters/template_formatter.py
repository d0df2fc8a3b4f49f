"""
Template formatter

Fills ``{token}`` placeholders of the configured line format
"""

import re
from typing import Dict

from leveled_logger.core.log_entry import LogEntry
from leveled_logger.core.logger_config import LoggerConfig
from leveled_logger.formatters.base_formatter import BaseFormatter

TOKEN_PATTERN = re.compile(r"\{(\w+)\}")

LOCATION_TOKENS = ("fileName", "lineNumber", "functionName", "columnNumber")


def uses_location(template: str) -> bool:
    """Check whether a line format asks for caller location."""
    return any(name in LOCATION_TOKENS for name in TOKEN_PATTERN.findall(template))


class TemplateFormatter(BaseFormatter):
    """
    Format log entries using the logger's line format.

    Supported tokens:
    - {time}: Timestamp rendered with the configured time format
    - {level}: Fixed-width level tag (colored when ``colored`` is set)
    - {content}: Rendered log arguments
    - {fileName}, {lineNumber}, {functionName}, {columnNumber}:
      Caller location, when the entry carries one

    Substitution is a single pass over the template, so substituted
    text is never scanned again. Unknown tokens are left as they are.
    """

    def __init__(self, config: LoggerConfig, colored: bool = False):
        """
        Initialize template formatter.

        Args:
            config: Live logger configuration; templates are read on every call
            colored: Use the ANSI colored level tag
        """
        self.config = config
        self.colored = colored

    def format(self, entry: LogEntry) -> str:
        values = self._values(entry)

        def substitute(match: re.Match) -> str:
            return values.get(match.group(1), match.group(0))

        return TOKEN_PATTERN.sub(substitute, self.config.log_format)

    def _values(self, entry: LogEntry) -> Dict[str, str]:
        values = {
            "time": entry.timestamp.strftime(self.config.time_format),
            "level": entry.level.colored_tag if self.colored else entry.level.tag,
            "content": entry.content,
        }

        caller = entry.caller
        if caller is not None:
            values.update({
                "fileName": str(caller.file_name),
                "lineNumber": str(caller.line_number),
                "functionName": str(caller.function_name),
                "columnNumber": "?" if caller.column_number is None else str(caller.column_number),
            })
        return values

    def __repr__(self) -> str:
        """String representation."""
        return f"TemplateFormatter(template='{self.config.log_format}', colored={self.colored})"
