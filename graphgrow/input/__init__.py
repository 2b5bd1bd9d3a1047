"""
Input events, classification and the pending-event queue.
"""

from .events import (
    EventKind, QuitEvent, KeyDownEvent, OtherEvent, InputEvent,
    classify, normalize_key,
    KEY_ESCAPE, KEY_ENTER, KEY_RETURN,
)
from .queue import EventQueue

__all__ = [
    'EventKind', 'QuitEvent', 'KeyDownEvent', 'OtherEvent', 'InputEvent',
    'classify', 'normalize_key',
    'KEY_ESCAPE', 'KEY_ENTER', 'KEY_RETURN',
    'EventQueue',
]
