"""
ui/helpers.py
=============
Pure utility functions shared across UI modules:
input mapping, medal lookup, text pulsing, alpha-surface drawing and
shadowed text.
"""

from __future__ import annotations

import math
from typing import Optional, Sequence, Tuple

import pygame

from ui.types import Medal

# ── Input mapping ────────────────────────────────────────────────────────────

FLAP_KEYS: Tuple[int, ...] = (pygame.K_SPACE, pygame.K_UP, pygame.K_w)


def is_flap_event(event: pygame.event.Event) -> bool:
    """True for the events that count as a tap: Space / Up / W or any mouse button."""
    if event.type == pygame.MOUSEBUTTONDOWN:
        return True
    return event.type == pygame.KEYDOWN and event.key in FLAP_KEYS


# ── Scoring presentation ─────────────────────────────────────────────────────

def medal_for_score(score: int, medals: Sequence[Medal]) -> Optional[Medal]:
    """Best medal earned by *score*; *medals* must be sorted highest threshold first."""
    for medal in medals:
        if score >= medal.min_score:
            return medal
    return None


def pulse_alpha(frame_count: int, rate: float = 0.1) -> float:
    """Opacity in [0.4, 1.0] oscillating with the tick counter."""
    return math.sin(frame_count * rate) * 0.3 + 0.7


# ── Alpha drawing helpers ────────────────────────────────────────────────────

def draw_alpha_rect(
    target: pygame.Surface,
    color: Tuple[int, ...],
    rect: pygame.Rect,
) -> None:
    """Draw a semi-transparent rectangle (colour tuple with 4 channels)."""
    tmp = pygame.Surface((rect.w, rect.h), pygame.SRCALPHA)
    tmp.fill(color)
    target.blit(tmp, rect.topleft)


# ── Text helper ──────────────────────────────────────────────────────────────

def render_shadowed(
    surface: pygame.Surface,
    font: pygame.font.Font,
    text: str,
    pos: Tuple[int, int],
    color: Tuple[int, ...],
    shadow: Tuple[int, ...] = (0, 0, 0),
    offset: int = 2,
    alpha: float = 1.0,
    anchor: str = "center",
) -> pygame.Rect:
    """Render *text* with a drop shadow, anchored at *pos* ('center', 'midtop' …)."""
    rect = pygame.Rect(0, 0, 0, 0)
    for dx, col in ((offset, shadow), (0, color)):
        img = font.render(text, True, col)
        if alpha < 1.0:
            img.set_alpha(int(max(0.0, alpha) * 255))
        rect = img.get_rect(**{anchor: (pos[0] + dx, pos[1] + dx)})
        surface.blit(img, rect)
    return rect
