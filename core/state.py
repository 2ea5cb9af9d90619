"""
core/state.py — Top-level game state for Fatty Bird.

Transitions (applied only by game.py):
    START_MENU → PLAYING   : player clicks PLAY
    PLAYING    → GAME_OVER : Bird.update() reports a crash
    GAME_OVER  → PLAYING   : player clicks PLAY AGAIN
    PLAYING   ↔ PAUSED     : player clicks the pause button
"""

from enum import Enum, auto


class GameState(Enum):
    """Top-level state machine states."""
    START_MENU = auto()
    PLAYING    = auto()
    PAUSED     = auto()
    GAME_OVER  = auto()
