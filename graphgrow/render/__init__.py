"""
Rendering: draw commands, surfaces and GL geometry.
"""

from .commands import (
    CommandList, Command,
    CmdClear, CmdDrawLine, CmdDrawCircle, CmdPresent,
    Point, RGBA,
)
from .surface import Surface, RecordingSurface

__all__ = [
    'CommandList', 'Command',
    'CmdClear', 'CmdDrawLine', 'CmdDrawCircle', 'CmdPresent',
    'Point', 'RGBA',
    'Surface', 'RecordingSurface',
]
