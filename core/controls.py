"""
core/controls.py — Per-frame input snapshot for Fatty Bird.

main.py feeds every pygame event of a frame into an InputCollector and
takes one InputSnapshot out of it before calling Game.update(). Game
logic never touches pygame.event directly, which keeps bird.py and
game.py testable with hand-built snapshots.

What the snapshot carries:
    jump_held     — Space is currently down (level, not edge)
    jump_released — Space went up during this frame
    click         — left button released this frame, at this position
    touches       — every live finger with its phase, decoration only

Touch phases follow the usual mobile vocabulary. pygame only reports
down/motion/up, so "stationary" is synthesised for fingers that sent
nothing this frame and "cancelled" for fingers alive when the window
loses focus.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

import pygame

from settings import SCREEN_W, SCREEN_H

Point = tuple[float, float]


class TouchPhase(Enum):
    STARTED    = "started"
    MOVED      = "moved"
    STATIONARY = "stationary"
    ENDED      = "ended"
    CANCELLED  = "cancelled"


@dataclass(frozen=True)
class TouchPoint:
    finger_id: int
    x: float
    y: float
    phase: TouchPhase


@dataclass
class InputSnapshot:
    jump_held: bool = False
    jump_released: bool = False
    click: Optional[Point] = None
    touches: list[TouchPoint] = field(default_factory=list)

    def clicked(self, rect: pygame.Rect) -> bool:
        """Return True if the left button was released inside rect this frame."""
        if self.click is None:
            return False
        x, y = self.click
        return rect.collidepoint(int(x), int(y))


class InputCollector:
    """Turns a stream of pygame events into one InputSnapshot per frame.

    Attributes:
        to_game:  Maps a window pixel position to game coordinates
                  (Scaler.to_game in main.py). Identity by default.
        _jump_held: Space state carried across frames.
        _fingers: Live fingers keyed by id → last game-space position.
    """

    JUMP_KEY = pygame.K_SPACE

    def __init__(self, to_game: Callable[[int, int], Point] | None = None) -> None:
        self.to_game = to_game or (lambda x, y: (x, y))
        self._jump_held: bool = False
        self._fingers: dict[int, Point] = {}
        self._frame = InputSnapshot()
        self._touched: set[int] = set()

    def feed(self, event: pygame.event.Event) -> None:
        """Fold a single pygame event into the current frame."""
        frame = self._frame

        if event.type == pygame.KEYDOWN and event.key == self.JUMP_KEY:
            self._jump_held = True

        elif event.type == pygame.KEYUP and event.key == self.JUMP_KEY:
            self._jump_held = False
            frame.jump_released = True

        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            frame.click = self.to_game(*event.pos)

        elif event.type in (pygame.FINGERDOWN, pygame.FINGERMOTION, pygame.FINGERUP):
            self._feed_finger(event)

        elif event.type == pygame.WINDOWFOCUSLOST:
            for fid, (x, y) in self._fingers.items():
                frame.touches.append(TouchPoint(fid, x, y, TouchPhase.CANCELLED))
            self._touched.update(self._fingers)
            self._fingers.clear()

    def _feed_finger(self, event: pygame.event.Event) -> None:
        # Finger coordinates arrive normalised to [0, 1] of the window
        x, y = event.x * SCREEN_W, event.y * SCREEN_H
        fid = event.finger_id

        if event.type == pygame.FINGERDOWN:
            phase = TouchPhase.STARTED
            self._fingers[fid] = (x, y)
        elif event.type == pygame.FINGERMOTION:
            phase = TouchPhase.MOVED
            self._fingers[fid] = (x, y)
        else:
            phase = TouchPhase.ENDED
            self._fingers.pop(fid, None)

        self._frame.touches.append(TouchPoint(fid, x, y, phase))
        self._touched.add(fid)

    def snapshot(self) -> InputSnapshot:
        """Close the current frame and return what happened during it."""
        frame = self._frame
        frame.jump_held = self._jump_held
        for fid, (x, y) in self._fingers.items():
            if fid not in self._touched:
                frame.touches.append(TouchPoint(fid, x, y, TouchPhase.STATIONARY))

        self._frame = InputSnapshot()
        self._touched = set()
        return frame
