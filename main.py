"""
main.py — Entry point and frame loop for Fatty Bird.

Responsibilities:
    - Initialise logging and pygame, create the window
    - Load every texture up front (a missing sprite aborts here)
    - Read the high score once
    - Run the loop: collect input → update → render → flip → yield

Architecture note:
    main.py is intentionally thin. It owns the pygame lifecycle, the
    window and the clock. All game logic lives in core/game.py.

pygbag compatibility:
    The loop is an async function driven by asyncio.run(). The single
    await per frame is the only suspension point; pygbag uses it to hand
    control back to the browser.

Exit codes:
    0 — window closed
    1 — a texture could not be loaded, or a high score could not be saved

Usage (local):
    python generate_assets.py   # once, writes assets/
    python main.py

Environment:
    FATTYBIRD_HIGH_SCORE_FILE, FATTYBIRD_ASSETS_DIR, FATTYBIRD_LOG_LEVEL
"""

import asyncio
import sys

import pygame

from core.assets import Assets
from core.controls import InputCollector
from core.errors import FattyBirdError
from core.game import Game
from core.high_score import HighScoreStore
from core.stats import Stats
from settings import (
    SCREEN_W, SCREEN_H, FPS, TITLE, COLOR, MAX_FRAME_TIME,
    HIGH_SCORE_FILE, LOG_LEVEL,
)
from utils.log import get_logger, setup_logging
from utils.scaler import Scaler

logger = get_logger("main")


async def run() -> None:
    """Async main loop — compatible with both CPython and pygbag WASM.

    Raises:
        FattyBirdError: On a fatal asset or high score failure.
    """
    pygame.init()

    # ── Window setup ──────────────────────────────────────────────────────────
    window = pygame.display.set_mode((SCREEN_W, SCREEN_H), pygame.RESIZABLE)
    pygame.display.set_caption(TITLE)

    # All game rendering targets this native-resolution surface
    game_surface = pygame.Surface((SCREEN_W, SCREEN_H))
    scaler = Scaler(SCREEN_W, SCREEN_H)

    # ── Subsystems ────────────────────────────────────────────────────────────
    assets = Assets()
    assets.load_all()

    store = HighScoreStore(HIGH_SCORE_FILE)
    stats = Stats(store, high_score=store.load())
    game  = Game(stats)
    controls = InputCollector(scaler.to_game)
    clock = pygame.Clock()

    logger.info("started, high score %d", stats.high_score)

    # ── Main loop ─────────────────────────────────────────────────────────────
    running = True
    while running:
        dt = clock.tick(FPS) / 1000.0
        dt = min(dt, MAX_FRAME_TIME)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                scaler.update(event.w, event.h)
            else:
                controls.feed(event)

        game.update(dt, controls.snapshot())

        game_surface.fill(COLOR["sky"])
        game.render(game_surface, assets)
        scaler.blit(window, game_surface)
        pygame.display.flip()

        await asyncio.sleep(0)


def main() -> int:
    setup_logging(LOG_LEVEL)
    try:
        asyncio.run(run())
    except FattyBirdError as e:
        logger.critical("%s", e)
        return 1
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
