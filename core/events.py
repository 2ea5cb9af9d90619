"""
core/events.py — Deferred gameplay events for Fatty Bird.

The tracks never mutate each other or the stats directly while they are
being updated. Instead they push an Event, and game.py drains the queue
once per frame after every update has run:

    queue = EventQueue()
    queue.push(Event.SPAWN_PIPE)
    queue.push(Event.UPDATE_SCORE)

    for event in queue.drain():   # SPAWN_PIPE, then UPDATE_SCORE
        dispatch(event)

Events carry no payload. Handlers re-derive what to do from the current
track state at drain time, and must not push new events while draining.
"""

from __future__ import annotations

from collections import deque
from enum import Enum, auto
from typing import Iterator


class Event(Enum):
    """Things the simulation asks game.py to do at the drain point."""
    SPAWN_PIPE   = auto()
    SPAWN_COIN   = auto()
    DESPAWN_PIPE = auto()
    DESPAWN_COIN = auto()
    UPDATE_SCORE = auto()


class EventQueue:
    """First-in, first-out queue of Events for a single frame.

    Attributes:
        _events: Pending events, oldest on the left.
    """

    def __init__(self) -> None:
        self._events: deque[Event] = deque()

    def push(self, event: Event) -> None:
        """Queue an event behind everything already pushed this frame."""
        self._events.append(event)

    def extend(self, events) -> None:
        """Queue several events, preserving their order."""
        for event in events:
            self.push(event)

    def drain(self) -> Iterator[Event]:
        """Yield every queued event in push order, emptying the queue.

        The generator pops one event at a time, so each event is handed
        to its handler before the next one leaves the queue. Running it to
        completion always leaves the queue empty.
        """
        while self._events:
            yield self._events.popleft()

    def __len__(self) -> int:
        return len(self._events)

    def __bool__(self) -> bool:
        return bool(self._events)
