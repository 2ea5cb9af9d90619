"""
renderer/world.py — Sprite drawing for the game world in Fatty Bird.

Draws everything that lives in world space: the scrolling background,
the pipes, the coins and the bird. All functions are stateless apart
from a cache of the pre-scaled background, and only read the objects
they are given.

Coordinate system: native 1200x600 game space. Scaler handles the rest.
"""

import pygame

from settings import SCREEN_W, SCREEN_H, PIPE_WIDTH, BIRD_FRAMES

# ── Background cache ──────────────────────────────────────────────────────────
# Scaling a full-screen texture every frame is wasteful; keyed by id() of the
# source surface so a reloaded texture gets rescaled.
_scaled_bg: dict[int, pygame.Surface] = {}


def draw_background(surface: pygame.Surface, texture: pygame.Surface, offset: float) -> None:
    """Draw two side-by-side copies of the background for wraparound scrolling.

    Args:
        surface: Native game surface.
        texture: Background texture, stretched to the screen.
        offset:  Left copy's x, in (-SCREEN_W, 0].
    """
    key = id(texture)
    if key not in _scaled_bg:
        _scaled_bg.clear()
        _scaled_bg[key] = pygame.transform.scale(texture, (SCREEN_W, SCREEN_H + 20))
    bg = _scaled_bg[key]

    surface.blit(bg, (int(offset), 0))
    surface.blit(bg, (int(SCREEN_W - abs(offset)), 0))


def _pipe_slice(texture: pygame.Surface, height: float) -> pygame.Surface:
    """Crop the top-left PIPE_WIDTH x height of the pipe texture."""
    w = min(int(PIPE_WIDTH), texture.get_width())
    h = max(1, min(int(height), texture.get_height()))
    return texture.subsurface(pygame.Rect(0, 0, w, h))


def draw_pipes(surface: pygame.Surface, texture: pygame.Surface, pairs) -> None:
    """Draw every pipe pair. Top pipes are the same texture turned upside down.

    Args:
        surface: Native game surface.
        texture: Pipe texture, mouth at the top.
        pairs:   PipePair sequence from PipeTrack.
    """
    for pair in pairs:
        top = pygame.transform.rotate(_pipe_slice(texture, pair.top.height), 180)
        surface.blit(top, (int(pair.top.x), int(pair.top.y)))

        bottom = _pipe_slice(texture, pair.bottom.height)
        surface.blit(bottom, (int(pair.bottom.x), int(pair.bottom.y)))


def draw_coins(surface: pygame.Surface, texture: pygame.Surface, coins) -> None:
    for coin in coins:
        surface.blit(texture, (int(coin.x), int(coin.y)))


def draw_bird(surface: pygame.Surface, strip: pygame.Surface, bird, frame: int) -> None:
    """Draw one frame of the bird's horizontal sprite strip.

    Args:
        surface: Native game surface.
        strip:   Texture holding BIRD_FRAMES frames side by side.
        bird:    Bird; only x and y are read.
        frame:   Frame index in [0, BIRD_FRAMES).
    """
    frame_w = strip.get_width() // BIRD_FRAMES
    area = pygame.Rect(frame_w * frame, 0, frame_w, strip.get_height())
    surface.blit(strip, (int(bird.x), int(bird.y)), area)
