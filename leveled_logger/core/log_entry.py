"""
Log entry data structure

One LogEntry is built per logging call and dropped after it is written.
"""

from dataclasses import dataclass, field
from datetime import datetime
from pprint import pformat
from typing import Any, Iterable, Optional

from leveled_logger.core.caller import CallerFrame
from leveled_logger.core.log_level import LogLevel

PRIMITIVE_TYPES = (str, int, float, bool, type(None))


def render_value(value: Any) -> str:
    """
    Render a single logging argument.

    Primitives use their natural string form; structured values get a
    readable key/value dump.
    """
    if isinstance(value, PRIMITIVE_TYPES):
        return str(value)
    return pformat(value)


def render_content(args: Iterable[Any]) -> str:
    """Render all logging arguments joined by single spaces."""
    return " ".join(render_value(arg) for arg in args)


@dataclass
class LogEntry:
    """
    Log entry data structure.

    Contains all information about a single log message.
    """

    level: LogLevel
    content: str
    timestamp: datetime = field(default_factory=datetime.now)
    caller: Optional[CallerFrame] = None

    def __post_init__(self):
        """Validate log entry after initialization."""
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        if not isinstance(self.content, str):
            self.content = str(self.content)

    def __str__(self) -> str:
        """String representation."""
        return (
            f"[{self.timestamp.strftime('%Y-%m-%d %H:%M:%S')}] "
            f"[{self.level.tag}] "
            f"{self.content}"
        )
