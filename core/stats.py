"""
core/stats.py — Score counters for Fatty Bird.

Stats is a small data container with two transitions:

    stats = Stats(store, high_score=store.load())
    stats.record_pass()   # +1 score, saves a new high score immediately
    stats.reset()         # new run: score back to 0

coins_collected is bumped directly by CoinTrack.check_collision() and
survives reset(), as does high_score.
"""

from __future__ import annotations

from core.high_score import HighScoreStore
from utils.log import get_logger

logger = get_logger("stats")


class Stats:
    """Score, high score and coin counters for the whole session.

    Attributes:
        score:           Pipes cleared in the current run.
        high_score:      Best score seen, mirrored to the store.
        coins_collected: Coins picked up since the game was launched.
        _store:          Anything with a save(int) method.
    """

    def __init__(self, store: HighScoreStore, high_score: int = 0) -> None:
        self._store = store
        self.score:           int = 0
        self.high_score:      int = high_score
        self.coins_collected: int = 0

    def record_pass(self) -> None:
        """Count one cleared obstacle and persist a new high score if beaten.

        Raises:
            HighScoreError: Propagated from the store when the write fails.
                            high_score is left unchanged in that case.
        """
        self.score += 1
        if self.score > self.high_score:
            self._store.save(self.score)
            self.high_score = self.score
            logger.info("new high score: %d", self.high_score)

    def reset(self) -> None:
        """Start a new run. high_score and coins_collected are kept."""
        self.score = 0
