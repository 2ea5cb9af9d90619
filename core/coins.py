"""
core/coins.py — Collectible coins for Fatty Bird.

One coin is placed each time a new pipe pair spawns, somewhere in the
open lane behind that pair. Coins scroll with the pipes.

Only the oldest coin is ever "armed" (eligible for pickup). Once it is
collected the track disarms, and no coin can be collected again until
the next spawn re-arms it. A coin that scrolls off the left edge while
armed is despawned as missed.

The pickup itself bumps stats.coins_collected immediately, inside
check_collision(). Only the removal of the coin is deferred to the
event queue.
"""

from __future__ import annotations

import random
from dataclasses import dataclass

from core.errors import EmptyTrackError
from core.events import Event, EventQueue
from settings import (
    SCREEN_W, SCREEN_H,
    SCROLL_SPEED,
    COIN_MARGIN, COIN_BOX, COIN_PAD, COIN_DESPAWN_X,
    COIN_LEAD_MIN, COIN_LEAD_SLACK, COIN_OPENING_GAP,
)
from utils.log import get_logger

logger = get_logger("coins")


@dataclass
class Coin:
    x: float
    y: float

    def contains(self, px: float, py: float) -> bool:
        """Return True if (px, py) falls inside this coin's pickup box.

        The box is COIN_BOX wide and tall, with its top-left corner COIN_PAD
        up and left of the coin. Left/top edges are inclusive, right/bottom
        edges exclusive.
        """
        left = self.x - COIN_PAD
        top  = self.y - COIN_PAD
        return left <= px < left + COIN_BOX and top <= py < top + COIN_BOX


class CoinTrack:
    """Ordered coins, oldest first, plus the armed flag for the oldest.

    Attributes:
        coins:    Coins in spawn order.
        armed:    True while the oldest coin can still be collected.
        screen_w: Right edge used to place new coins.
        screen_h: Vertical range for new coins is [COIN_MARGIN, screen_h - COIN_MARGIN).
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        screen_w: float = SCREEN_W,
        screen_h: float = SCREEN_H,
    ) -> None:
        """Create a track holding one armed opening coin."""
        self._rng = rng or random.Random()
        self.screen_w = screen_w
        self.screen_h = screen_h
        self.coins: list[Coin] = []
        self.armed: bool = True
        self.spawn(COIN_OPENING_GAP)

    def __len__(self) -> int:
        return len(self.coins)

    # ── Per-frame ─────────────────────────────────────────────────────────────

    def advance(self, dt: float) -> None:
        """Scroll every coin left by SCROLL_SPEED * dt."""
        dx = SCROLL_SPEED * dt
        for coin in self.coins:
            coin.x -= dx

    def check_collision(self, bird_x: float, bird_y: float, stats) -> list[Event]:
        """Test the oldest coin against the bird's position.

        Args:
            bird_x: Bird x in game coordinates.
            bird_y: Bird y in game coordinates.
            stats:  Stats whose coins_collected is bumped on pickup.

        Returns:
            [DESPAWN_COIN] if the coin was missed or collected, else [].
            Always [] when the track is empty or disarmed.
        """
        if not self.coins or not self.armed:
            return []

        coin = self.coins[0]

        if coin.x < COIN_DESPAWN_X:
            return [Event.DESPAWN_COIN]

        if coin.contains(bird_x, bird_y):
            stats.coins_collected += 1
            self.armed = False
            logger.debug("coin collected (%d total)", stats.coins_collected)
            return [Event.DESPAWN_COIN]

        return []

    def update(self, dt: float, bird_x: float, bird_y: float, stats, queue: EventQueue) -> None:
        """Advance the coins, then queue a despawn if the oldest is done."""
        self.advance(dt)
        queue.extend(self.check_collision(bird_x, bird_y, stats))

    # ── Event handlers ────────────────────────────────────────────────────────

    def spawn(self, gap: float) -> Coin:
        """Append a coin in the lane behind the newest pipe pair and re-arm.

        Args:
            gap: Distance between the two most recent pipe spawn points
                 (PipeTrack.spawn_gap()). The coin's x is drawn from
                 screen_w + gap - U(COIN_LEAD_MIN, gap - COIN_LEAD_SLACK);
                 the bounds may arrive in either order.
        """
        lead = self._rng.uniform(COIN_LEAD_MIN, gap - COIN_LEAD_SLACK)
        y = self._rng.uniform(COIN_MARGIN, self.screen_h - COIN_MARGIN)
        coin = Coin(x=self.screen_w + gap - lead, y=y)
        self.coins.append(coin)
        self.armed = True
        logger.debug("coin spawned at (%.1f, %.1f) for gap %.1f", coin.x, coin.y, gap)
        return coin

    def despawn(self) -> Coin:
        """Remove and return the oldest coin.

        Raises:
            EmptyTrackError: If there is nothing to remove.
        """
        if not self.coins:
            raise EmptyTrackError("despawn() on an empty CoinTrack")
        return self.coins.pop(0)
