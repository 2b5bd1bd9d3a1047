# graphgrow/render/surface.py
"""
Surface - the drawable the loop renders into.

Any object with these five methods works. RecordingSurface keeps every
call in a CommandList instead of touching the GPU.
"""

from __future__ import annotations
from typing import Optional, Protocol, Tuple, Type

from ..core.errors import SurfaceError
from .commands import (
    CommandList, CmdClear, CmdDrawLine, CmdDrawCircle, CmdPresent,
    Point, RGBA,
)


class Surface(Protocol):

    def clear(self, color: RGBA) -> None: ...

    def draw_line(self, p1: Point, p2: Point, color: RGBA) -> None: ...

    def draw_circle(self, center: Point, radius: float, color: RGBA) -> None: ...

    def present(self) -> None: ...

    def output_size(self) -> Tuple[int, int]: ...


class RecordingSurface:
    """
    Surface that records calls.

    fail_on names a command class; the matching call raises SurfaceError
    once the surface has seen fail_after earlier calls of that kind.
    """

    def __init__(
        self,
        width: int = 400,
        height: int = 400,
        fail_on: Optional[Type] = None,
        fail_after: int = 0,
    ):
        self.width = width
        self.height = height
        self.commands = CommandList()
        self.present_count = 0
        self._fail_on = fail_on
        self._fail_after = fail_after
        self._seen = 0

    def _record(self, cmd):
        if self._fail_on is not None and isinstance(cmd, self._fail_on):
            if self._seen >= self._fail_after:
                raise SurfaceError(f"{type(cmd).__name__} failed: surface lost")
            self._seen += 1
        self.commands.add(cmd)

    def clear(self, color: RGBA):
        self._record(CmdClear(tuple(color)))

    def draw_line(self, p1: Point, p2: Point, color: RGBA):
        self._record(CmdDrawLine(tuple(p1), tuple(p2), tuple(color)))

    def draw_circle(self, center: Point, radius: float, color: RGBA):
        self._record(CmdDrawCircle(tuple(center), float(radius), tuple(color)))

    def present(self):
        self._record(CmdPresent())
        self.present_count += 1

    def output_size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def reset(self):
        self.commands.clear()
        self.present_count = 0
