"""
utils/log.py — Logging setup for Fatty Bird.

Every module asks for a child of the "fattybird" logger:

    from utils.log import get_logger
    logger = get_logger("pipes")

main.py calls setup_logging() once before the window opens. Until then
records propagate to the root logger untouched, which keeps pytest's
caplog fixture working.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime

_ROOT = "fattybird"


class HumanFormatter(logging.Formatter):
    """Compact one-line format for terminal display."""

    COLORS = {
        "DEBUG":    "\033[90m",     # grey
        "INFO":     "\033[36m",     # cyan
        "WARNING":  "\033[33m",     # yellow
        "ERROR":    "\033[31m",     # red
        "CRITICAL": "\033[1;31m",   # bold red
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, "")
        ts    = datetime.now().strftime("%H:%M:%S")
        name  = record.name.replace(f"{_ROOT}.", "")
        msg   = record.getMessage()
        line  = f"{color}{ts} [{record.levelname[0]}] {name}: {msg}{self.RESET}"
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def setup_logging(level: str = "info") -> None:
    """Configure the fattybird logger with a stderr handler.

    Args:
        level: Level name, case-insensitive. Unknown names fall back to INFO.
    """
    root = logging.getLogger(_ROOT)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(HumanFormatter())
    root.addHandler(console)


def get_logger(name: str) -> logging.Logger:
    """Return a child logger under the fattybird namespace."""
    return logging.getLogger(f"{_ROOT}.{name}")
