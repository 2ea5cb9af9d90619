"""
renderer/ui.py — HUD and overlay rendering for Fatty Bird.

Draws all non-world interface elements:
    - HUD (score, high score, coin count)
    - Start menu (title + PLAY button)
    - Game over screen (PLAY AGAIN button)
    - Paused label
    - Touch markers

All functions are stateless — they take explicit data arguments and draw
to the provided surface. Button rects are owned by game.py, which also
does the hit testing; these functions only paint them.

Coordinate system: native 1200x600 game space. Scaler handles the rest.
"""

import pygame

from settings import (
    SCREEN_W, SCREEN_H,
    COLOR, TOUCH_STYLE, TITLE,
    FONT_SIZE_TITLE, FONT_SIZE_LG, FONT_SIZE_MD, FONT_SIZE_BTN, FONT_SIZE_SM,
)

# ── Font cache ────────────────────────────────────────────────────────────────
# Fonts are loaded once and reused. Font(None, ...) is pygame's bundled
# default, so there is nothing to ship.
_fonts: dict[int, pygame.font.Font] = {}


def _font(size: int) -> pygame.font.Font:
    """Return a cached default font at the given size."""
    if size not in _fonts:
        if not pygame.font.get_init():
            pygame.font.init()
        _fonts[size] = pygame.font.Font(None, size)
    return _fonts[size]


def _text(surface: pygame.Surface, text: str, size: int, color, pos: tuple[float, float]) -> None:
    surface.blit(_font(size).render(text, True, color), (int(pos[0]), int(pos[1])))


def _centered_label(surface: pygame.Surface, text: str, size: int, color, rect: pygame.Rect) -> None:
    label = _font(size).render(text, True, color)
    surface.blit(label, label.get_rect(center=rect.center))


# ── HUD ───────────────────────────────────────────────────────────────────────

def draw_hud(surface: pygame.Surface, stats) -> None:
    """Draw score and high score top-left, coin count top-right.

    Args:
        surface: Native game surface.
        stats:   Stats; score, high_score and coins_collected are read.
    """
    _text(surface, f"SCORE: {stats.score}", FONT_SIZE_MD, COLOR["text"], (10, 5))
    _text(surface, f"HIGH SCORE: {stats.high_score}", FONT_SIZE_MD, COLOR["text"], (10, 32))
    _text(surface, f"COINS: {stats.coins_collected}", FONT_SIZE_MD, COLOR["text"],
          (SCREEN_W - 200, 82))


# ── Overlays ──────────────────────────────────────────────────────────────────

def draw_start_menu(surface: pygame.Surface, play_button: pygame.Rect) -> None:
    """Draw the title and the PLAY button.

    Args:
        surface:     Native game surface.
        play_button: Where to paint the button.
    """
    title = _font(FONT_SIZE_TITLE).render(TITLE, True, COLOR["title"])
    surface.blit(title, (SCREEN_W // 2 - title.get_width() // 2, SCREEN_H // 2 - 70))

    pygame.draw.rect(surface, COLOR["play_btn"], play_button)
    _centered_label(surface, "PLAY", FONT_SIZE_LG, COLOR["text"], play_button)


def draw_game_over(surface: pygame.Surface, retry_button: pygame.Rect) -> None:
    """Draw the game over banner and the PLAY AGAIN button.

    Args:
        surface:      Native game surface.
        retry_button: Where to paint the button.
    """
    banner = _font(FONT_SIZE_LG).render("GAME OVER", True, COLOR["text"])
    surface.blit(banner, (SCREEN_W // 2 - banner.get_width() // 2, SCREEN_H // 2 - 85))

    pygame.draw.rect(surface, COLOR["retry_btn"], retry_button)
    _centered_label(surface, "Play Again", FONT_SIZE_BTN, COLOR["retry_text"], retry_button)


def draw_paused(surface: pygame.Surface) -> None:
    label = _font(FONT_SIZE_LG).render("PAUSED", True, COLOR["paused"])
    surface.blit(label, (SCREEN_W // 2 - label.get_width() // 2, SCREEN_H // 2 - label.get_height()))


# ── Touch markers ─────────────────────────────────────────────────────────────

def draw_touches(surface: pygame.Surface, touches) -> None:
    """Draw a circle under every finger, colored by phase, plus a hint line.

    Args:
        surface: Native game surface.
        touches: TouchPoint list from this frame's InputSnapshot.
    """
    for touch in touches:
        color, radius = TOUCH_STYLE[touch.phase.value]
        pygame.draw.circle(surface, color, (int(touch.x), int(touch.y)), radius)

    _text(surface, "touch the screen!", FONT_SIZE_SM, COLOR["hint"], (20, SCREEN_H - 25))

