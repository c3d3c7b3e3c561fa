#!/usr/bin/env python3
"""
server/board.py
===============
The authoritative high score, held in memory for the lifetime of the
server process.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Dict

log = logging.getLogger(__name__)


class InvalidScoreError(ValueError):
    """Raised for negative, non-integer or boolean score submissions."""


def validate_score(score: Any) -> int:
    """Return *score* unchanged if it is a non-negative ``int``.

    Raises
    ------
    InvalidScoreError
        For anything else, including ``bool`` and integral floats.
    """
    if isinstance(score, bool) or not isinstance(score, int):
        raise InvalidScoreError(f"score must be an integer, got {score!r}")
    if score < 0:
        raise InvalidScoreError(f"score must be non-negative, got {score}")
    return score


class HighScoreBoard:
    """Single best score behind a lock.

    FastAPI runs sync endpoints on a thread pool, so concurrent
    submissions are serialised here.
    """

    def __init__(self, initial: int = 0) -> None:
        self._high_score = validate_score(initial)
        self._lock = threading.Lock()

    def submit(self, score: Any) -> int:
        """Record *score* if it beats the stored best; return the best."""
        score = validate_score(score)
        with self._lock:
            if score > self._high_score:
                log.info("new high score %d (was %d)", score, self._high_score)
                self._high_score = score
            return self._high_score

    def get(self) -> int:
        with self._lock:
            return self._high_score

    def launch(self) -> Dict[str, int]:
        """Payload handed to a freshly launched game session."""
        return {"highScore": self.get()}
