"""
Command List System

Pure-data record of surface calls. CommandLists contain NO GL objects,
only tuples and floats, so they can be compared, replayed and inspected
in tests.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Tuple, Union


Point = Tuple[float, float]
RGBA = Tuple[float, float, float, float]


# =============================================================================
# Commands
# =============================================================================

@dataclass(frozen=True)
class CmdClear:
    """Fill the whole surface with one colour."""
    color: RGBA


@dataclass(frozen=True)
class CmdDrawLine:
    """Straight line between two points."""
    p1: Point
    p2: Point
    color: RGBA


@dataclass(frozen=True)
class CmdDrawCircle:
    """Circle outline of fixed radius."""
    center: Point
    radius: float
    color: RGBA


@dataclass(frozen=True)
class CmdPresent:
    """Show everything drawn so far."""


Command = Union[
    CmdClear,
    CmdDrawLine,
    CmdDrawCircle,
    CmdPresent,
]


# =============================================================================
# Command List
# =============================================================================

@dataclass
class CommandList:
    """
    An ordered list of surface commands.

    Safe to:
    - Compare for equality (idempotent redraws)
    - Inspect for debugging
    """
    commands: List[Command] = field(default_factory=list)

    def add(self, cmd: Command):
        """Append a command to the list."""
        self.commands.append(cmd)

    def extend(self, cmds: List[Command]):
        """Append multiple commands."""
        self.commands.extend(cmds)

    def clear(self):
        self.commands.clear()

    def __len__(self) -> int:
        return len(self.commands)

    def __iter__(self):
        return iter(self.commands)

    def __getitem__(self, index):
        return self.commands[index]

    # Debug/stats helpers

    def get_stats(self) -> Dict[str, int]:
        """Get command count by type."""
        stats: Dict[str, int] = {}
        for cmd in self.commands:
            name = type(cmd).__name__
            stats[name] = stats.get(name, 0) + 1
        return stats

    def get_draw_count(self) -> int:
        """Count draw commands."""
        return sum(1 for c in self.commands if isinstance(c, (CmdDrawLine, CmdDrawCircle)))

