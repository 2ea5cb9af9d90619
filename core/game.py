"""
core/game.py — Central game state machine for Fatty Bird.

Game owns the top-level GameState and every simulation subsystem:
    - Bird       (physics, crash detection)
    - PipeTrack  (obstacles)
    - CoinTrack  (collectibles)
    - Stats      (score, high score, coins)
    - EventQueue (deferred mutations)

States:
    START_MENU — title screen, background scrolling, PLAY button
    PLAYING    — simulation running
    PAUSED     — simulation frozen, bird still drawn
    GAME_OVER  — run ended, PLAY AGAIN button

One frame of update():
    1. pause button (PLAYING ↔ PAUSED only)
    2. per-state logic; in PLAYING: bird → pipes → coins
    3. drain the event queue

Nothing is mutated across subsystems during step 2. The tracks only push
events; the drain in step 3 is the single place where pipes and coins are
spawned or removed and where the score moves. By the time render() runs,
the state it reads is consistent.

game.py does NOT call pygame.display.flip() or manage the window.
That is main.py's responsibility.
"""

from __future__ import annotations

import random

import pygame

from core.bird import Bird
from core.coins import CoinTrack
from core.controls import InputSnapshot
from core.events import Event, EventQueue
from core.pipes import PipeTrack
from core.state import GameState
from core.stats import Stats
from renderer import ui, world
from settings import (
    SCREEN_W, SCREEN_H,
    BG_SCROLL_SPEED, BIRD_FRAMES, BIRD_FRAME_TIME,
    BUTTON_W, BUTTON_H, PLAY_BTN_DY, RETRY_BTN_DY,
    PAUSE_BTN_SIZE, PAUSE_BTN_MARGIN,
)
from utils.log import get_logger

logger = get_logger("game")


def _centered_button(dy: float) -> pygame.Rect:
    return pygame.Rect(
        SCREEN_W // 2 - BUTTON_W // 2,
        int(SCREEN_H / 2 + dy),
        BUTTON_W,
        BUTTON_H,
    )


PLAY_BUTTON  = _centered_button(PLAY_BTN_DY)
RETRY_BUTTON = _centered_button(RETRY_BTN_DY)
PAUSE_BUTTON = pygame.Rect(
    SCREEN_W - PAUSE_BTN_SIZE - PAUSE_BTN_MARGIN,
    PAUSE_BTN_MARGIN,
    PAUSE_BTN_SIZE,
    PAUSE_BTN_SIZE,
)


class Game:
    """Orchestrates all game subsystems via a state machine.

    Attributes:
        state:       Current GameState. The only authoritative copy.
        bird:        The player.
        pipes:       PipeTrack; never empty while PLAYING.
        coins:       CoinTrack.
        stats:       Stats, persisted through its store.
        events:      EventQueue drained once per update().
        bg_offset:   Background scroll, in (-SCREEN_W, 0].
        bird_frame:  Index into the bird sprite strip.
        _frame_timer: Seconds since bird_frame last advanced.
        _touches:    Last frame's touch points, kept for render().
    """

    def __init__(self, stats: Stats, rng: random.Random | None = None) -> None:
        """Set up a game sitting on the start menu.

        Args:
            stats: Stats wired to the high score store.
            rng:   Random source shared by both tracks. Pass a seeded
                   random.Random for a reproducible run.
        """
        rng = rng or random.Random()
        self.state:  GameState  = GameState.START_MENU
        self.bird:   Bird       = Bird()
        self.pipes:  PipeTrack  = PipeTrack(rng)
        self.coins:  CoinTrack  = CoinTrack(rng)
        self.stats:  Stats      = stats
        self.events: EventQueue = EventQueue()

        self.bg_offset:    float = 0.0
        self.bird_frame:   int   = 0
        self._frame_timer: float = 0.0
        self._touches:     list  = []

    # ── State transitions ─────────────────────────────────────────────────────

    def _set_state(self, state: GameState) -> None:
        if state != self.state:
            logger.info("%s -> %s", self.state.name, state.name)
        self.state = state

    def start_run(self) -> None:
        """Begin a fresh run: new bird, one pipe pair, score back to 0."""
        if self.state == GameState.GAME_OVER and len(self.coins):
            self.coins.despawn()
        self.bird = Bird()
        self.pipes.reset()
        self.stats.reset()
        self._set_state(GameState.PLAYING)

    def toggle_pause(self) -> None:
        """Flip between PLAYING and PAUSED. Ignored in any other state."""
        if self.state == GameState.PLAYING:
            self._set_state(GameState.PAUSED)
        elif self.state == GameState.PAUSED:
            self._set_state(GameState.PLAYING)

    # ── Per-frame update ──────────────────────────────────────────────────────

    def update(self, dt: float, controls: InputSnapshot) -> None:
        """Advance game logic by one frame.

        Args:
            dt:       Seconds since the previous frame.
            controls: This frame's input, click positions already in game
                      coordinates.

        Raises:
            HighScoreError: If a new high score could not be saved.
        """
        self._touches = controls.touches

        if controls.clicked(PAUSE_BUTTON):
            self.toggle_pause()

        if self.state == GameState.START_MENU:
            self._scroll_background(dt)
            if controls.clicked(PLAY_BUTTON):
                self.start_run()

        elif self.state == GameState.PLAYING:
            self._scroll_background(dt)
            self._animate_bird(dt)
            self._step_simulation(dt, controls)

        elif self.state == GameState.GAME_OVER:
            if controls.clicked(RETRY_BUTTON):
                self.start_run()

        # PAUSED: nothing moves

        self._drain_events()

    def _step_simulation(self, dt: float, controls: InputSnapshot) -> None:
        transition = self.bird.update(self.pipes.active, dt, controls)
        if transition is not None:
            self._set_state(transition)
            logger.info("crashed with score %d", self.stats.score)

        self.pipes.update(dt, self.events)
        self.coins.update(dt, self.bird.x, self.bird.y, self.stats, self.events)

    def _drain_events(self) -> None:
        for event in self.events.drain():
            if event is Event.SPAWN_PIPE:
                self.pipes.spawn()
            elif event is Event.SPAWN_COIN:
                self.coins.spawn(self.pipes.spawn_gap())
            elif event is Event.DESPAWN_PIPE:
                self.pipes.despawn()
            elif event is Event.DESPAWN_COIN:
                self.coins.despawn()
            elif event is Event.UPDATE_SCORE:
                self.stats.record_pass()

    def _scroll_background(self, dt: float) -> None:
        self.bg_offset -= BG_SCROLL_SPEED * dt
        if -self.bg_offset > SCREEN_W:
            self.bg_offset = 0.0

    def _animate_bird(self, dt: float) -> None:
        self._frame_timer += dt
        if self._frame_timer >= BIRD_FRAME_TIME:
            self.bird_frame = (self.bird_frame + 1) % BIRD_FRAMES
            self._frame_timer = 0.0

    # ── Rendering ─────────────────────────────────────────────────────────────

    def render(self, surface: pygame.Surface, assets) -> None:
        """Draw the current state onto the game surface.

        Args:
            surface: Native SCREEN_W x SCREEN_H surface.
            assets:  Loaded Assets.
        """
        world.draw_background(surface, assets["background"], self.bg_offset)
        world.draw_pipes(surface, assets["pipe"], self.pipes.pairs)
        world.draw_coins(surface, assets["coin"], self.coins.coins)

        surface.blit(assets["pause"], PAUSE_BUTTON.topleft)
        ui.draw_hud(surface, self.stats)

        if self.state == GameState.START_MENU:
            ui.draw_start_menu(surface, PLAY_BUTTON)

        elif self.state == GameState.PLAYING:
            world.draw_bird(surface, assets["bird"], self.bird, self.bird_frame)

        elif self.state == GameState.PAUSED:
            world.draw_bird(surface, assets["bird"], self.bird, self.bird_frame)
            ui.draw_paused(surface)

        elif self.state == GameState.GAME_OVER:
            ui.draw_game_over(surface, RETRY_BUTTON)

        ui.draw_touches(surface, self._touches)
