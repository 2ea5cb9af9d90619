"""
generate_assets.py — Placeholder sprite generator for Fatty Bird.

Renders every texture listed in settings.ASSET_FILES using pygame vector
graphics and writes them to settings.ASSETS_DIR. Run once before the
first launch, or whenever you want to reset to the stock look.

Sprites:
    bg4.png            — sky gradient with rolling hills, 600x300 (stretched in game)
    mario_pipe_cut.png — green pipe, mouth at the top, 100x600
    pigeon.png         — 7-frame wing-flap strip, 7 x 60x44
    pause_icon.png     — two bars on a rounded square, 50x50
    coin2.png          — gold coin, 40x40

Usage:
    python generate_assets.py
    → assets/*.png
"""

import math
import os
import sys

import pygame

# ── Add project root to path so we can import from the game ──────────────────
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from settings import ASSETS_DIR, ASSET_FILES, BIRD_FRAMES, PIPE_WIDTH, SCREEN_H
from utils.log import get_logger, setup_logging

logger = get_logger("generate_assets")

PIPE_GREEN      = (60, 170, 60)
PIPE_GREEN_DARK = (30, 110, 30)
BIRD_BODY       = (150, 150, 165)
BIRD_WING       = (110, 110, 125)
GOLD            = (245, 200, 40)
GOLD_DARK       = (200, 150, 20)


def make_background() -> pygame.Surface:
    """Vertical sky gradient with two layers of sine-wave hills."""
    w, h = 600, 300
    surface = pygame.Surface((w, h))
    for y in range(h):
        t = y / (h - 1)
        color = (int(110 + 80 * t), int(180 + 50 * t), 245)
        pygame.draw.line(surface, color, (0, y), (w, y))

    # The hills repeat an integer number of times so the two copies tile
    for amp, base, shade, waves in ((18, 230, (90, 170, 90), 3), (12, 260, (70, 140, 70), 5)):
        points = [(0, h)]
        for x in range(0, w + 1, 4):
            points.append((x, base - amp * math.sin(2 * math.pi * waves * x / w)))
        points.append((w, h))
        pygame.draw.polygon(surface, shade, points)
    return surface


def make_pipe() -> pygame.Surface:
    """Pipe body with a wider lip at the top; tall enough for any bottom pipe."""
    w, h = int(PIPE_WIDTH), SCREEN_H
    surface = pygame.Surface((w, h), pygame.SRCALPHA)
    pygame.draw.rect(surface, PIPE_GREEN, (8, 0, w - 16, h))
    pygame.draw.rect(surface, PIPE_GREEN_DARK, (w - 24, 0, 16, h))
    pygame.draw.rect(surface, PIPE_GREEN, (0, 0, w, 36))
    pygame.draw.rect(surface, PIPE_GREEN_DARK, (0, 0, w, 36), 3)
    return surface


def make_bird_strip() -> pygame.Surface:
    """Seven frames of a round grey bird; the wing sweeps through one beat."""
    fw, fh = 60, 44
    surface = pygame.Surface((fw * BIRD_FRAMES, fh), pygame.SRCALPHA)
    for i in range(BIRD_FRAMES):
        ox = i * fw
        pygame.draw.ellipse(surface, BIRD_BODY, (ox + 6, 8, 46, 32))
        pygame.draw.circle(surface, (255, 255, 255), (ox + 42, 18), 6)
        pygame.draw.circle(surface, (0, 0, 0), (ox + 44, 18), 3)
        pygame.draw.polygon(surface, (240, 150, 40),
                            [(ox + 50, 22), (ox + 59, 25), (ox + 50, 28)])

        lift = int(10 * math.sin(2 * math.pi * i / BIRD_FRAMES))
        pygame.draw.polygon(surface, BIRD_WING,
                            [(ox + 16, 24), (ox + 34, 24), (ox + 22, 24 - lift)])
    return surface


def make_pause_icon() -> pygame.Surface:
    surface = pygame.Surface((50, 50), pygame.SRCALPHA)
    pygame.draw.rect(surface, (255, 255, 255, 200), (0, 0, 50, 50), border_radius=10)
    pygame.draw.rect(surface, (40, 40, 40), (14, 12, 8, 26))
    pygame.draw.rect(surface, (40, 40, 40), (28, 12, 8, 26))
    return surface


def make_coin() -> pygame.Surface:
    surface = pygame.Surface((40, 40), pygame.SRCALPHA)
    pygame.draw.circle(surface, GOLD_DARK, (20, 20), 20)
    pygame.draw.circle(surface, GOLD, (20, 20), 16)
    pygame.draw.rect(surface, GOLD_DARK, (17, 10, 6, 20))
    return surface


MAKERS = {
    "background": make_background,
    "pipe":       make_pipe,
    "bird":       make_bird_strip,
    "pause":      make_pause_icon,
    "coin":       make_coin,
}


def main() -> None:
    """Render and save every sprite."""
    setup_logging("info")
    pygame.init()
    os.makedirs(ASSETS_DIR, exist_ok=True)

    for name, filename in ASSET_FILES.items():
        path = os.path.join(ASSETS_DIR, filename)
        surface = MAKERS[name]()
        pygame.image.save(surface, path)
        logger.info("saved %s (%dx%d)", path, *surface.get_size())

    pygame.quit()


if __name__ == "__main__":
    main()
