"""
EventQueue - non-blocking input source.

Window callbacks push, the loop drains once per tick.
"""

from __future__ import annotations
from collections import deque
from typing import Deque, List

from .events import InputEvent, KeyDownEvent, QuitEvent, OtherEvent


class EventQueue:

    def __init__(self):
        self._pending: Deque[InputEvent] = deque()

    def push(self, event: InputEvent):
        self._pending.append(event)

    def push_key(self, key: str):
        self.push(KeyDownEvent(key))

    def push_quit(self):
        self.push(QuitEvent())

    def push_other(self, name: str = ""):
        self.push(OtherEvent(name))

    def drain(self) -> List[InputEvent]:
        """Return every pending event in arrival order and empty the queue."""
        events = list(self._pending)
        self._pending.clear()
        return events

    def __len__(self) -> int:
        return len(self._pending)
