# graphgrow/input/events.py
"""
Input events and classification.

The window host produces these. The loop only ever sees the EventKind
returned by classify().
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Union

KEY_ESCAPE = "escape"
KEY_ENTER = "enter"
KEY_RETURN = "return"

# Names that mean the same physical key
_KEY_ALIASES = {
    KEY_RETURN: KEY_ENTER,
    "esc": KEY_ESCAPE,
}


def normalize_key(key: str) -> str:
    k = key.strip().lower()
    return _KEY_ALIASES.get(k, k)


class EventKind(Enum):
    QUIT = auto()
    CONFIRM = auto()
    OTHER = auto()


@dataclass(frozen=True)
class QuitEvent:
    """Window close request."""


@dataclass(frozen=True)
class KeyDownEvent:
    key: str


@dataclass(frozen=True)
class OtherEvent:
    """Anything the loop does not react to (mouse, key up, resize...)."""
    name: str = ""


InputEvent = Union[QuitEvent, KeyDownEvent, OtherEvent]


def classify(event: InputEvent, confirm_key: str = KEY_ENTER) -> EventKind:
    """Map a raw event to what the loop should do with it."""
    if isinstance(event, QuitEvent):
        return EventKind.QUIT
    if isinstance(event, KeyDownEvent):
        key = normalize_key(event.key)
        if key == KEY_ESCAPE:
            return EventKind.QUIT
        if key == normalize_key(confirm_key):
            return EventKind.CONFIRM
    return EventKind.OTHER
