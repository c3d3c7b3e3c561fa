"""
server — High-score tool server
===============================

Modules
-------
board
    :class:`HighScoreBoard` in-memory authoritative best score.
api
    FastAPI application exposing the ``play-flappy-bird``,
    ``submit-score`` and ``get-high-score`` tools.
"""

from .board import HighScoreBoard, InvalidScoreError, validate_score

__all__ = [
    "HighScoreBoard",
    "InvalidScoreError",
    "validate_score",
]
