"""
utils/scaler.py — Letterboxing for Fatty Bird.

The game simulates and draws at a fixed 1200x600 (2:1). The window is
resizable, so this module fits that surface into whatever the window is,
with black bars on the long side, and maps pointer positions back:

    scaler = Scaler(window_w, window_h)
    scaler.blit(window, game_surface)           # draw
    game_x, game_y = scaler.to_game(mx, my)     # click → game coordinates

Keeping the game size fixed means button rects, pipe spawn x and the
bird's bounds never depend on the window.
"""

import pygame

from settings import SCREEN_W, SCREEN_H


class Scaler:
    """Maps the native game surface into an arbitrary window.

    Attributes:
        scale:     Uniform scale factor, game px → window px.
        dest_rect: Where the scaled game surface lands in the window.
    """

    def __init__(self, window_w: int, window_h: int) -> None:
        self.update(window_w, window_h)

    def update(self, window_w: int, window_h: int) -> None:
        """Recompute the fit. Call on every VIDEORESIZE."""
        self.scale = min(window_w / SCREEN_W, window_h / SCREEN_H)

        scaled_w = int(SCREEN_W * self.scale)
        scaled_h = int(SCREEN_H * self.scale)
        self.dest_rect = pygame.Rect(
            (window_w - scaled_w) // 2,
            (window_h - scaled_h) // 2,
            scaled_w,
            scaled_h,
        )

    def blit(self, window_surface: pygame.Surface, game_surface: pygame.Surface) -> None:
        """Clear the bars and draw the game surface scaled into the window."""
        window_surface.fill((0, 0, 0))
        if self.dest_rect.size == game_surface.get_size():
            window_surface.blit(game_surface, self.dest_rect.topleft)
            return
        scaled = pygame.transform.scale(game_surface, self.dest_rect.size)
        window_surface.blit(scaled, self.dest_rect.topleft)

    def to_game(self, window_x: int, window_y: int) -> tuple[int, int]:
        """Convert a window pixel position to game coordinates.

        Positions inside the bars come back outside [0, SCREEN_W) x [0, SCREEN_H).
        """
        game_x = (window_x - self.dest_rect.x) / self.scale
        game_y = (window_y - self.dest_rect.y) / self.scale
        return int(game_x), int(game_y)
