"""
core/pipes.py — Pipe obstacles for Fatty Bird.

A PipePair is one top pipe hanging from the ceiling and one bottom pipe
standing below it, separated by FREE_SPACE pixels of open air. PipeTrack
keeps the pairs in spawn order, which is also the order they leave the
screen on the left.

Only the oldest pair matters to the simulation:
    - the bird collides against it (bird.py reads PipeTrack.active)
    - it alone decides when to spawn the next pair and when to despawn

Lifecycle of one pair:
    1. spawned at x = screen_w, off the right edge
    2. scrolls left at SCROLL_SPEED
    3. at x <= PIPE_SPAWN_X, with no other pair in flight, it asks for the
       next pair, a coin, and a score point
    4. at x <= PIPE_DESPAWN_X it asks to be removed

The "no other pair in flight" check is a plain len() == 1 test. It keeps
exactly one pair ahead of the bird only because the scroll speed, spawn
x and screen width happen to line up; a smaller screen or faster scroll
would break it.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

from core.errors import EmptyTrackError
from core.events import Event, EventQueue
from settings import (
    SCREEN_W, SCREEN_H,
    SCROLL_SPEED, FREE_SPACE,
    PIPE_MIN_HEIGHT, PIPE_MAX_HEIGHT,
    PIPE_SPAWN_X, PIPE_DESPAWN_X,
)
from utils.log import get_logger

logger = get_logger("pipes")

_GRID = 256


@dataclass
class Pipe:
    """One half of a pair. y is the top edge, height extends downward."""
    x: float
    y: float
    height: float


@dataclass
class PipePair:
    """A top and bottom pipe sharing the same horizontal position."""
    top: Pipe
    bottom: Pipe

    @classmethod
    def at(cls, x: float, top_height: float, screen_h: float = SCREEN_H) -> PipePair:
        """Build a pair whose gap starts at top_height and is FREE_SPACE tall."""
        return cls(
            top=Pipe(x=x, y=0.0, height=top_height),
            bottom=Pipe(x=x, y=top_height + FREE_SPACE, height=screen_h),
        )

    @property
    def x(self) -> float:
        return self.top.x

    def shift(self, dx: float) -> None:
        self.top.x += dx
        self.bottom.x += dx


class PipeTrack:
    """Ordered pipe pairs, oldest first.

    Attributes:
        pairs:     Pairs in spawn order. Never empty while the game is playing.
        screen_w:  New pairs appear at this x.
        screen_h:  Height given to bottom pipes.
        _rng:      Random source for gap heights. Inject a seeded
                   random.Random for reproducible runs.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        screen_w: float = SCREEN_W,
        screen_h: float = SCREEN_H,
    ) -> None:
        """Create a track holding one freshly spawned pair."""
        self._rng = rng or random.Random()
        self.screen_w = screen_w
        self.screen_h = screen_h
        self.pairs: list[PipePair] = []
        self.spawn()

    @property
    def active(self) -> PipePair:
        """The oldest pair — the only one the bird can hit."""
        return self.pairs[0]

    def __len__(self) -> int:
        return len(self.pairs)

    def reset(self) -> None:
        """Drop every pair and start over with a single new one."""
        self.pairs.clear()
        self.spawn()

    # ── Per-frame ─────────────────────────────────────────────────────────────

    def advance(self, dt: float) -> None:
        """Scroll every pair left by SCROLL_SPEED * dt."""
        dx = -SCROLL_SPEED * dt
        for pair in self.pairs:
            pair.shift(dx)

    def check_lifecycle(self) -> list[Event]:
        """Return the events the oldest pair's position calls for.

        Returns:
            [DESPAWN_PIPE] once the oldest pair is past PIPE_DESPAWN_X, and
            [SPAWN_PIPE, SPAWN_COIN, UPDATE_SCORE] once it is past
            PIPE_SPAWN_X while it is the only pair. Both can apply at once.
        """
        events: list[Event] = []
        oldest = self.active

        if oldest.x <= PIPE_DESPAWN_X:
            events.append(Event.DESPAWN_PIPE)

        if oldest.x <= PIPE_SPAWN_X and len(self.pairs) == 1:
            events.extend((Event.SPAWN_PIPE, Event.SPAWN_COIN, Event.UPDATE_SCORE))

        return events

    def update(self, dt: float, queue: EventQueue) -> None:
        """Advance the pairs, then queue whatever lifecycle events fall due."""
        self.advance(dt)
        queue.extend(self.check_lifecycle())

    # ── Event handlers ────────────────────────────────────────────────────────

    def spawn(self) -> PipePair:
        """Append a pair at the right edge with a random gap height."""
        top_height = self._rng.uniform(PIPE_MIN_HEIGHT, PIPE_MAX_HEIGHT)
        # Snap to 1/256 px so top_height + FREE_SPACE - top_height is exact
        top_height = math.floor(top_height * _GRID) / _GRID
        top_height = min(top_height, PIPE_MAX_HEIGHT - 1 / _GRID)
        pair = PipePair.at(self.screen_w, top_height, self.screen_h)
        self.pairs.append(pair)
        logger.debug("pipe spawned (gap at %.1f, %d in track)", top_height, len(self.pairs))
        return pair

    def despawn(self) -> PipePair:
        """Remove and return the oldest pair.

        Raises:
            EmptyTrackError: If there is nothing to remove.
        """
        if not self.pairs:
            raise EmptyTrackError("despawn() on an empty PipeTrack")
        logger.debug("pipe despawned")
        return self.pairs.pop(0)

    def spawn_gap(self) -> float:
        """Distance from the oldest pair to the newest one.

        Read while draining SPAWN_COIN, right after SPAWN_PIPE has appended
        the new pair, so it measures the lane the coin should land in.
        """
        return self.pairs[-1].x - self.pairs[0].x
