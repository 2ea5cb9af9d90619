"""
settings.py — Global constants for Fatty Bird.

All magic numbers live here. No other module should hardcode colors,
dimensions, physics or timing values. Import what you need with:
    from settings import COLOR, SCREEN_W, ...

The three deployment paths/levels at the bottom can be overridden from
the environment; everything else is fixed at import time.
"""

import os

# ── Screen ────────────────────────────────────────────────────────────────────
SCREEN_W = 1200
SCREEN_H = 600
FPS = 60
TITLE = "Fatty Bird"
MAX_FRAME_TIME = 0.05   # s, per-frame dt ceiling

# ── Colors ────────────────────────────────────────────────────────────────────
COLOR = {
    "sky":        ( 0, 121, 241),   # cleared behind the background texture
    "text":       (255, 255, 255),
    "title":      (253, 249,   0),
    "play_btn":   (255, 161,   0),
    "retry_btn":  (230,  41,  55),
    "retry_text": (  0,   0,   0),
    "paused":     (130, 130, 130),
    "hint":       ( 80,  80,  80),
}

# Touch phase → (fill color, circle radius)
TOUCH_STYLE = {
    "started":    ((  0, 228,  48), 80),
    "stationary": ((255, 255, 255), 60),
    "moved":      ((253, 249,   0), 60),
    "ended":      ((  0, 121, 241), 80),
    "cancelled":  ((  0,   0,   0), 80),
}

# ── World ─────────────────────────────────────────────────────────────────────
SCROLL_SPEED    = 300.0   # px/s, pipes and coins
BG_SCROLL_SPEED = 150.0   # px/s

# ── Bird ──────────────────────────────────────────────────────────────────────
BIRD_X         = 200.0
GRAVITY        = 2000.0   # px/s²
JUMP_STRENGTH  = 700.0    # px/s, applied upward
BOUNDS_MARGIN  = 10.0     # px the bird may leave the screen before crashing

# Gate collision band: the pair's x must sit inside it for a vertical hit
GATE_BAND_MIN  = 100.0
GATE_BAND_MAX  = 230.0
GATE_TOP_SLACK = 5.0
GATE_BOTTOM_SLACK = 15.0

BIRD_FRAMES     = 7
BIRD_FRAME_TIME = 0.1     # s per animation frame

# ── Pipes ─────────────────────────────────────────────────────────────────────
FREE_SPACE        = 150.0   # vertical gap between top and bottom pipe
PIPE_MIN_HEIGHT   = 100.0
PIPE_MAX_HEIGHT   = 300.0
PIPE_WIDTH        = 100.0
PIPE_SPAWN_X      = 100.0   # oldest pair at/left of this → spawn the next
PIPE_DESPAWN_X    = -150.0

# ── Coins ─────────────────────────────────────────────────────────────────────
COIN_MARGIN        = 70.0    # y is drawn from [COIN_MARGIN, SCREEN_H - COIN_MARGIN)
COIN_BOX           = 60.0    # side of the pickup box
COIN_PAD           = 10.0    # box starts this far up/left of the coin
COIN_DESPAWN_X     = -40.0
COIN_LEAD_MIN      = 400.0
COIN_LEAD_SLACK    = 200.0
COIN_OPENING_GAP   = -200.0  # gap used for the coin placed before any spawn

# ── UI Layout ─────────────────────────────────────────────────────────────────
BUTTON_W        = 200
BUTTON_H        = 54
PLAY_BTN_DY     = 61.5    # px below screen centre
RETRY_BTN_DY    = 70.0
PAUSE_BTN_SIZE  = 50
PAUSE_BTN_MARGIN = 25

# ── Fonts ─────────────────────────────────────────────────────────────────────
FONT_SIZE_TITLE = 60
FONT_SIZE_LG    = 50
FONT_SIZE_MD    = 40
FONT_SIZE_BTN   = 35
FONT_SIZE_SM    = 20

# ── Assets ────────────────────────────────────────────────────────────────────
# Logical sprite name → file under ASSETS_DIR
ASSET_FILES = {
    "background": "bg4.png",
    "pipe":       "mario_pipe_cut.png",
    "bird":       "pigeon.png",
    "pause":      "pause_icon.png",
    "coin":       "coin2.png",
}

# ── Environment overrides ─────────────────────────────────────────────────────
_HERE = os.path.dirname(os.path.abspath(__file__))

ASSETS_DIR      = os.environ.get("FATTYBIRD_ASSETS_DIR", os.path.join(_HERE, "assets"))
HIGH_SCORE_FILE = os.environ.get("FATTYBIRD_HIGH_SCORE_FILE", "high_score.txt")
LOG_LEVEL       = os.environ.get("FATTYBIRD_LOG_LEVEL", "info")
