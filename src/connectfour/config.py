# src/connectfour/config.py

from __future__ import annotations

ROWS = 6
COLS = 7
CONNECT_N = 4
CENTER_COL = COLS // 2

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True

# “AI thinking” effect
AI_THINKING_SPINNER = True
AI_THINK_DELAY_SEC = 0.4  # short pause so AI moves aren’t instant

# Session defaults (not persisted)
DEFAULT_MODE = "hva"
DEFAULT_DIFFICULTY = "medium"
DEFAULT_FIRST = "X"
AI_PLAYER = "O"

# League output
RESULTS_DIR = "data/results"
