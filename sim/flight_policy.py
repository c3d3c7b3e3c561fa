#!/usr/bin/env python3
"""
sim/flight_policy.py
====================
Tunable geometry, physics and pacing parameters for the side-scroller.
Every constant lives in the frozen :class:`FlightPolicy` dataclass so that
experiments and tests can swap policies without touching code.

All distances are in canvas pixels and all rates are per tick; the
simulation has no notion of wall-clock time.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class FlightPolicy:
    """Immutable bag of every tunable simulation parameter.

    Groups: canvas, actor, obstacles, spawn envelope, pacing, cosmetics.
    """

    # ── Canvas ────────────────────────────────────────────────────────────
    canvas_width: float = 288.0
    """Width of the visible area."""

    canvas_height: float = 512.0
    """Height of the visible area, ground strip included."""

    ground_height: float = 56.0
    """Height of the ground strip at the bottom of the canvas."""

    # ── Actor ─────────────────────────────────────────────────────────────
    gravity: float = 0.5
    """Velocity added to the actor every tick."""

    flap_impulse: float = -8.0
    """Velocity the actor is set to by a flap (overwrite, not additive)."""

    actor_x: float = 60.0
    """Fixed horizontal position of the actor centre."""

    actor_width: float = 34.0
    actor_height: float = 24.0

    # ── Obstacles ─────────────────────────────────────────────────────────
    obstacle_width: float = 52.0
    obstacle_gap: float = 120.0
    """Vertical size of the opening the actor flies through."""

    obstacle_speed: float = 2.0
    """Leftward scroll per tick."""

    # ── Spawn envelope ────────────────────────────────────────────────────
    spawn_distance: float = 200.0
    """A new obstacle spawns once the newest one is left of ``canvas_width - spawn_distance``."""

    gap_margin: float = 40.0
    """Clearance kept between the gap and the ceiling / ground line."""

    first_spawn_offset: float = 100.0
    """The first obstacle of a run appears this far right of the canvas."""

    spawn_offset: float = 20.0
    """Later obstacles appear this far right of the canvas."""

    despawn_margin: float = 10.0
    """Obstacles are dropped once their trailing edge is this far past the left edge."""

    # ── Pacing ────────────────────────────────────────────────────────────
    restart_delay_ticks: int = 30
    """Input during GameOver is ignored until the tick counter exceeds this."""

    # ── Cosmetics ─────────────────────────────────────────────────────────
    wing_flap_ticks: int = 8
    flash_decay: float = 0.05
    ground_tile: float = 24.0
    title_bob_rate: float = 0.08
    title_bob_amplitude: float = 8.0
    rest_offset: float = 20.0
    """The actor rests this far above the vertical centre of the canvas."""

    # ── Tilt ──────────────────────────────────────────────────────────────
    rise_tilt_factor: float = 0.07
    rise_tilt_min: float = -0.5
    fall_tilt_step: float = 0.04
    death_tilt_step: float = 0.15
    max_tilt: float = math.pi / 2

    @property
    def play_height(self) -> float:
        """Y coordinate of the ground line."""
        return self.canvas_height - self.ground_height

    @property
    def rest_y(self) -> float:
        """Actor centre on the title screen and at the start of a run."""
        return self.canvas_height / 2 - self.rest_offset
