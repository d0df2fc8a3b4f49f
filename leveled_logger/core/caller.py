"""
Caller location resolution

Walks the interpreter call stack to find where a log call came from.
"""

from __future__ import annotations

import inspect
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class CallerFrame:
    """Source location of a single call stack frame."""

    file_name: str
    line_number: int
    function_name: str
    column_number: Optional[int] = None


class CallerResolver(ABC):
    """
    Abstract base class for call stack inspection.

    Implementations return frames innermost first. Index 0 is the
    frame that called ``resolve``.
    """

    @abstractmethod
    def resolve(self, limit: Optional[int] = None) -> List[CallerFrame]:
        """
        Describe the current call stack.

        Args:
            limit: Maximum number of frames to return (None for all)

        Returns:
            Frames from innermost to outermost
        """
        pass


class StackCallerResolver(CallerResolver):
    """Resolve caller frames from the live interpreter stack."""

    def resolve(self, limit: Optional[int] = None) -> List[CallerFrame]:
        frames: List[CallerFrame] = []
        try:
            frame = sys._getframe(1)
        except ValueError:
            return frames

        while frame is not None and (limit is None or len(frames) < limit):
            frames.append(self._describe(frame))
            frame = frame.f_back
        return frames

    @staticmethod
    def _describe(frame) -> CallerFrame:
        code = frame.f_code
        column = None
        # Position info exists on 3.11+ only
        positions = getattr(inspect.getframeinfo(frame, context=0), "positions", None)
        if positions is not None and positions.col_offset is not None:
            column = positions.col_offset + 1
        return CallerFrame(
            file_name=code.co_filename,
            line_number=frame.f_lineno,
            function_name=code.co_name,
            column_number=column,
        )
