"""
core/assets.py — Texture provider for Fatty Bird.

Sprites are looked up by logical name ("bird", "pipe", ...). The mapping
from name to file lives in settings.ASSET_FILES, and the files themselves
in settings.ASSETS_DIR (run generate_assets.py once to create them).

Every texture is loaded up front by load_all(). A missing or broken file
raises AssetError before the first frame is drawn; the assets ship with
the game, so there is nothing sensible to fall back to.

Usage:
    assets = Assets()
    assets.load_all()              # after pygame.display.set_mode()
    bird_strip = assets["bird"]
"""

from __future__ import annotations

import os

import pygame

from core.errors import AssetError
from settings import ASSETS_DIR, ASSET_FILES
from utils.log import get_logger

logger = get_logger("assets")


class Assets:
    """Loaded textures keyed by logical sprite name.

    Attributes:
        directory: Folder the files are read from.
        files:     Logical name → filename.
        _cache:    Logical name → loaded Surface.
    """

    def __init__(self, directory: str = ASSETS_DIR, files: dict[str, str] | None = None) -> None:
        self.directory = directory
        self.files = dict(ASSET_FILES if files is None else files)
        self._cache: dict[str, pygame.Surface] = {}

    def load(self, name: str) -> pygame.Surface:
        """Load (or return the cached) texture for a logical name.

        Raises:
            AssetError: If the name is unknown or the file can't be loaded.
        """
        if name in self._cache:
            return self._cache[name]

        try:
            filename = self.files[name]
        except KeyError:
            raise AssetError(f"unknown sprite {name!r}") from None

        path = os.path.join(self.directory, filename)
        try:
            surface = pygame.image.load(path)
        except (pygame.error, FileNotFoundError) as e:
            raise AssetError(f"couldn't load {name!r} from {path}: {e}") from e

        # convert_alpha() needs a display; headless loads keep the raw format
        if pygame.display.get_surface() is not None:
            surface = surface.convert_alpha()

        self._cache[name] = surface
        logger.debug("loaded %s (%dx%d)", path, *surface.get_size())
        return surface

    def load_all(self) -> None:
        """Load every texture listed in files. Raises AssetError on the first failure."""
        for name in self.files:
            self.load(name)
        logger.info("loaded %d textures from %s", len(self._cache), self.directory)

    def __getitem__(self, name: str) -> pygame.Surface:
        return self.load(name)
