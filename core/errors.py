"""
core/errors.py — Exception types for Fatty Bird.

Only two failures are expected at runtime and both are fatal: a sprite
that cannot be loaded at startup, and a high score that cannot be written.
main.py catches FattyBirdError, logs it and exits. EmptyTrackError marks
a broken spawn/despawn pairing and is never caught.
"""


class FattyBirdError(Exception):
    """Base class for errors main.py knows how to report."""


class AssetError(FattyBirdError):
    """A texture is missing or could not be decoded."""


class HighScoreError(FattyBirdError):
    """The high-score file could not be written."""


class EmptyTrackError(RuntimeError):
    """despawn() was called on a track with nothing in it."""
