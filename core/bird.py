"""
core/bird.py — The player's bird for Fatty Bird.

The bird never moves horizontally. Each frame it:
    1. checks whether it is inside the active pipe gate
    2. checks whether it has left the screen
    3. applies a jump if Space was freshly pressed
    4. falls under gravity

A crash is reported as a return value (GameState.GAME_OVER) rather than
by touching any shared state; game.py owns the state and applies it.

The gate check is an approximation of a box-vs-gate test: the bird is
only considered level with the pair while the pair's x sits inside
[GATE_BAND_MIN, GATE_BAND_MAX]. Gameplay is tuned around that band, so
it is kept as-is rather than replaced by a real intersection test.
"""

from __future__ import annotations

from typing import Optional

from core.controls import InputSnapshot
from core.pipes import PipePair
from core.state import GameState
from settings import (
    SCREEN_H,
    BIRD_X, GRAVITY, JUMP_STRENGTH, BOUNDS_MARGIN,
    GATE_BAND_MIN, GATE_BAND_MAX, GATE_TOP_SLACK, GATE_BOTTOM_SLACK,
)


class Bird:
    """Player physics state.

    Attributes:
        x:            Fixed horizontal position.
        y:            Vertical position, growing downward.
        velocity:     Vertical speed in px/s, negative is up.
        jump_latched: True while Space is held after a jump, so holding the
                      key does not re-trigger the jump every frame.
    """

    def __init__(self, y: float | None = None, screen_h: float = SCREEN_H) -> None:
        self.screen_h = screen_h
        self.x: float = BIRD_X
        self.y: float = screen_h / 2 if y is None else y
        self.velocity: float = 0.0
        self.jump_latched: bool = False

    def hits_gate(self, pair: PipePair) -> bool:
        """Return True if the bird is outside the gap of a pair level with it."""
        outside_gap = (
            self.y <= pair.top.height - GATE_TOP_SLACK
            or self.y >= pair.bottom.y - GATE_BOTTOM_SLACK
        )
        level_with_bird = GATE_BAND_MIN <= pair.bottom.x <= GATE_BAND_MAX
        return outside_gap and level_with_bird

    def out_of_bounds(self) -> bool:
        return self.y >= self.screen_h + BOUNDS_MARGIN or self.y <= -BOUNDS_MARGIN

    def update(
        self,
        active_pair: PipePair,
        dt: float,
        controls: InputSnapshot,
    ) -> Optional[GameState]:
        """Advance the bird by one frame.

        Args:
            active_pair: The oldest pair in the PipeTrack.
            dt:          Seconds since the previous frame.
            controls:    This frame's input snapshot.

        Returns:
            GameState.GAME_OVER if the bird crashed this frame, else None.
        """
        transition = None

        if self.hits_gate(active_pair):
            transition = GameState.GAME_OVER

        if self.out_of_bounds():
            # Park the bird so it isn't drawn somewhere off-screen
            self.velocity = 0.0
            self.y = self.screen_h / 2
            transition = GameState.GAME_OVER

        if controls.jump_held and not self.jump_latched:
            self.velocity = -JUMP_STRENGTH
            self.jump_latched = True

        if controls.jump_released and self.jump_latched:
            self.jump_latched = False

        self.velocity += GRAVITY * dt
        self.y += self.velocity * dt

        return transition
