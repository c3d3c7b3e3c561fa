#!/usr/bin/env python3
"""
main.py
=======
Game entry point.

Builds the score relay (HTTP tool server when ``FLAPPY_SCORE_URL`` is set,
in-process board otherwise), seeds the best score, and runs the Pygame
frame loop until the window closes.

Environment overrides
---------------------
``FLAPPY_SCORE_URL``   base URL of the tool server (e.g. ``http://localhost:3001``)
``FLAPPY_FPS``         frame rate, which is also the simulation rate
``FLAPPY_SCALE``       integer window scale factor
``FLAPPY_SEED``        seed for obstacle placement
``FLAPPY_LOG_LEVEL``   root log level name
"""

import logging
import os
from typing import Optional

import config
from logging_setup import parse_level, setup_logging
from relay import BoardScoreStore, HttpScoreStore, ScoreRelay
from sim import BestScore, World
from ui import run_pygame_view


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logging.getLogger("main").warning("ignoring %s=%r (not an integer)", name, raw)
        return default


def build_relay(score_url: str, best: BestScore) -> ScoreRelay:
    """Pick the score store: remote tool server if configured, else in-process."""
    if score_url:
        store = HttpScoreStore(score_url, timeout=config.RELAY_TIMEOUT_S)
    else:
        store = BoardScoreStore()
    return ScoreRelay(store, best=best)


def main() -> None:
    setup_logging(parse_level(os.environ.get("FLAPPY_LOG_LEVEL", config.LOG_LEVEL)))
    log = logging.getLogger("main")

    score_url = os.environ.get("FLAPPY_SCORE_URL", config.SCORE_SERVER_URL).strip()
    fps = _env_int("FLAPPY_FPS", config.TARGET_FPS)
    scale = _env_int("FLAPPY_SCALE", config.WINDOW_SCALE)
    seed = _env_int("FLAPPY_SEED", config.DEFAULT_SEED)

    best = BestScore()
    relay = build_relay(score_url, best)
    world = World(seed=seed, relay=relay, best=best)

    log.info("Starting game (score server: %s)", score_url or "in-process")
    relay.launch()
    try:
        run_pygame_view(world, relay=relay, scale=scale, fps=fps)
    except KeyboardInterrupt:
        log.info("Shutting down...")
    finally:
        relay.close()
        log.info("Final best score %d", world.launch()["bestScore"])


if __name__ == "__main__":
    main()
