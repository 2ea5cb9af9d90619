"""
core/high_score.py — Plain-text high score file for Fatty Bird.

The file holds a single decimal number with no trailing newline:

    $ cat high_score.txt
    51

Reading is forgiving: a missing, unreadable, empty or garbled file means
a high score of 0. Writing is not: a failed write raises HighScoreError
so the player never keeps playing against a record that was not saved.
"""

from __future__ import annotations

import os

from core.errors import HighScoreError
from utils.log import get_logger

logger = get_logger("high_score")


class HighScoreStore:
    """Reads and overwrites the high score file.

    Attributes:
        path: Location of the file. Relative paths resolve against the
              working directory, as the game always has.
    """

    def __init__(self, path: str | os.PathLike) -> None:
        self.path = os.fspath(path)

    def load(self) -> int:
        """Return the stored high score, or 0 if there is no usable one."""
        try:
            with open(self.path, "r", encoding="ascii") as f:
                contents = f.read().strip()
        except FileNotFoundError:
            logger.info("no high score file at %s, starting from 0", self.path)
            return 0
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("could not read %s (%s), starting from 0", self.path, e)
            return 0

        try:
            value = int(contents)
        except ValueError:
            logger.warning("ignoring unparseable high score %r in %s", contents, self.path)
            return 0

        if value < 0:
            logger.warning("ignoring negative high score %d in %s", value, self.path)
            return 0
        return value

    def save(self, value: int) -> None:
        """Overwrite the file with value.

        Raises:
            HighScoreError: If the file cannot be opened or written.
        """
        try:
            with open(self.path, "w", encoding="ascii") as f:
                f.write(str(value))
        except OSError as e:
            raise HighScoreError(f"couldn't write {self.path}: {e}") from e
        logger.debug("wrote high score %d to %s", value, self.path)
