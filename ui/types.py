"""
ui/types.py
===========
Lightweight aliases and containers used across every UI module.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

ColorRGB = Tuple[int, int, int]
ColorRGBA = Tuple[int, int, int, int]


@dataclass(frozen=True)
class Medal:
    """Award shown on the game-over panel."""
    name: str
    min_score: int
    color: ColorRGB
