#!/usr/bin/env python3
"""
config.py
=========
Application-wide configuration constants.

Values can be overridden via environment variables (see :mod:`main`).
This module is an import-safe leaf: it never imports from
other project packages.
"""

# ── Simulation defaults ──────────────────────────────────────────────────────
DEFAULT_SEED = None

# ── Score relay defaults ─────────────────────────────────────────────────────
SCORE_SERVER_URL: str = ""          # empty → in-process high-score board
RELAY_TIMEOUT_S: float = 5.0

# ── Tool server defaults ─────────────────────────────────────────────────────
SCORE_SERVER_HOST: str = "0.0.0.0"
SCORE_SERVER_PORT: int = 3001

# ── UI defaults ──────────────────────────────────────────────────────────────
WINDOW_SCALE: int = 1
TARGET_FPS: int = 60

# ── Logging ──────────────────────────────────────────────────────────────────
LOG_LEVEL: str = "INFO"
LOG_FILE: str = "flappy.log"
WORLD_DEBUG_LOG_FILE: str = "world_debug.log"

# ── Tool names (shared by the server and the HTTP score store) ──────────────
TOOL_PLAY: str = "play-flappy-bird"
TOOL_SUBMIT_SCORE: str = "submit-score"
TOOL_GET_HIGH_SCORE: str = "get-high-score"
