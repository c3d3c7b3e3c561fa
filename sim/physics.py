#!/usr/bin/env python3
"""
sim/physics.py
==============
Low-level physics and geometry helpers used by :mod:`sim.world`.

Keeping these in a separate module avoids circular imports and makes unit
testing straightforward.  Screen coordinates are used throughout: *y* grows
downwards, the ceiling is ``y = 0``.
"""

from __future__ import annotations

from typing import Tuple

from sim.flight_policy import FlightPolicy


def integrate(y: float, velocity: float, gravity: float) -> Tuple[float, float]:
    """One semi-implicit Euler step: velocity first, then position.

    Returns
    -------
    tuple of float
        The new ``(y, velocity)``.
    """
    velocity += gravity
    return y + velocity, velocity


def ease_tilt(tilt: float, velocity: float, policy: FlightPolicy) -> float:
    """Tilt of the actor after one Playing tick.

    Rising snaps the nose up proportionally to the speed (clamped at
    ``rise_tilt_min``); falling eases the nose down towards ``max_tilt``.
    """
    if velocity < 0:
        return max(policy.rise_tilt_min, velocity * policy.rise_tilt_factor)
    return min(policy.max_tilt, tilt + policy.fall_tilt_step)


def spans_overlap(a_min: float, a_max: float, b_min: float, b_max: float) -> bool:
    """True when the open intervals ``(a_min, a_max)`` and ``(b_min, b_max)`` intersect."""
    return a_max > b_min and a_min < b_max


def hits_bounds(top: float, bottom: float, ceiling: float, ground: float) -> bool:
    """Closed boundary test: touching the ceiling or the ground counts."""
    return bottom >= ground or top <= ceiling


def outside_gap(top: float, bottom: float, gap_top: float, gap_bottom: float) -> bool:
    """True when a vertical span pokes out of the gap on either side."""
    return top < gap_top or bottom > gap_bottom


def gap_band(policy: FlightPolicy) -> Tuple[float, float]:
    """Range of valid gap centres keeping the whole gap on screen.

    The gap stays ``gap_margin`` away from both the ceiling and the
    ground line.
    """
    half = policy.obstacle_gap / 2
    lo = half + policy.gap_margin
    hi = policy.play_height - half - policy.gap_margin
    return lo, hi
