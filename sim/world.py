#!/usr/bin/env python3
"""
sim/world.py
============
Single-actor side-scroller world.

The :class:`World` owns every piece of mutable game state: the phase of
the title / playing / game-over state machine, the actor, the obstacle
sequence and the score.  It is advanced by exactly two entry points,
:meth:`World.advance` (once per frame) and :meth:`World.apply_input`
(once per recognised input event), so tests can drive it by repeated
calls and inspect the result.
"""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Protocol

from sim.best_score import BestScore
from sim.flight_policy import FlightPolicy
from sim.physics import (
    ease_tilt,
    gap_band,
    hits_bounds,
    integrate,
    outside_gap,
    spans_overlap,
)

log = logging.getLogger("world")


class Phase(Enum):
    """State-machine phase; governs which update and input rules apply."""

    TITLE = "title"
    PLAYING = "playing"
    GAME_OVER = "gameover"


class ScoreReporter(Protocol):
    """Anything the world can hand a finished run's score to."""

    def report_score(self, score: int) -> None: ...


class RandomSource(Protocol):
    def uniform(self, a: float, b: float) -> float: ...


@dataclass
class Actor:
    """The player-controlled bird.

    Attributes
    ----------
    y : float
        Vertical centre (screen coordinates, grows downwards).
    velocity : float
        Vertical velocity per tick; negative is upwards.
    tilt : float
        Rotation in radians; positive is nose-down.
    """

    y: float
    velocity: float = 0.0
    tilt: float = 0.0

    def top(self, policy: FlightPolicy) -> float:
        return self.y - policy.actor_height / 2

    def bottom(self, policy: FlightPolicy) -> float:
        return self.y + policy.actor_height / 2

    def as_dict(self) -> dict:
        return {"y": self.y, "velocity": self.velocity, "tilt": self.tilt}


@dataclass
class Obstacle:
    """A pipe pair with a vertical opening centred on *gap_center*.

    ``x`` is the leading (left) edge.  ``scored`` flips to True exactly
    once, when the trailing edge passes the actor's fixed x.
    """

    x: float
    gap_center: float
    scored: bool = False
    serial: int = field(default=0, compare=False)

    def right(self, policy: FlightPolicy) -> float:
        return self.x + policy.obstacle_width

    def gap_top(self, policy: FlightPolicy) -> float:
        return self.gap_center - policy.obstacle_gap / 2

    def gap_bottom(self, policy: FlightPolicy) -> float:
        return self.gap_center + policy.obstacle_gap / 2

    def as_dict(self) -> dict:
        return {
            "serial": self.serial,
            "x": self.x,
            "gap_center": self.gap_center,
            "scored": self.scored,
        }


class World:
    """Title / Playing / GameOver simulation.

    Parameters
    ----------
    policy : FlightPolicy or None
        Tunable constants; uses defaults when *None*.
    seed : int or None
        Seed for the default random source.  Ignored when *rng* is given.
    rng : object or None
        Random source providing ``uniform(a, b)``; inject a deterministic
        one in tests.
    relay : ScoreReporter or None
        Receives the score of every finished run.  Offline when *None*.
    best : BestScore or None
        Shared best-score cache.  When *None* the relay's cache is used if
        it has one, otherwise a private one is created.
    """

    def __init__(
        self,
        policy: Optional[FlightPolicy] = None,
        seed: Optional[int] = None,
        rng: Optional[RandomSource] = None,
        relay: Optional[ScoreReporter] = None,
        best: Optional[BestScore] = None,
    ) -> None:
        self.policy = policy or FlightPolicy()
        self._rng = rng if rng is not None else random.Random(seed)
        self.relay = relay
        if best is None:
            best = getattr(relay, "best", None)
        self.best = best if best is not None else BestScore()

        self.phase = Phase.TITLE
        self.actor = Actor(y=self.policy.rest_y)
        self.obstacles: List[Obstacle] = []
        self.score = 0
        self.frame_count = 0
        self.death_flash = 0.0
        self.ground_offset = 0.0
        self.wing_up = False
        self.spawned_total = 0
        self._wing_timer = 0

    # ── queries ───────────────────────────────────────────────────────────

    @property
    def best_score(self) -> int:
        return self.best.value

    def launch(self) -> Dict[str, int]:
        """Best score at invocation time, used to seed a fresh UI session."""
        return {"bestScore": self.best_score}

    def snapshot(self) -> Dict[str, Any]:
        """JSON-compatible view of the whole world."""
        return {
            "phase": self.phase.value,
            "actor": self.actor.as_dict(),
            "obstacles": [o.as_dict() for o in self.obstacles],
            "score": self.score,
            "best_score": self.best_score,
            "frame_count": self.frame_count,
            "death_flash": self.death_flash,
            "wing_up": self.wing_up,
            "ground_offset": self.ground_offset,
        }

    # ── input ─────────────────────────────────────────────────────────────

    def apply_input(self) -> None:
        """Handle one tap / key press according to the current phase."""
        if self.phase is Phase.TITLE:
            self.start_game()
        elif self.phase is Phase.PLAYING:
            self.flap()
        elif self.phase is Phase.GAME_OVER:
            if self.frame_count > self.policy.restart_delay_ticks:
                self.reset_game()

    def flap(self) -> None:
        self.actor.velocity = self.policy.flap_impulse

    # ── phase transitions ─────────────────────────────────────────────────

    def reset_game(self) -> None:
        """Enter Title: actor back at rest, no obstacles, score zero."""
        self.phase = Phase.TITLE
        self._reset_run()
        self.actor.tilt = 0.0
        log.info("phase -> title (best=%d)", self.best_score)

    def start_game(self) -> None:
        """Enter Playing and put the first obstacle off-screen to the right."""
        self.phase = Phase.PLAYING
        self._reset_run()
        self._spawn_obstacle(self.policy.canvas_width + self.policy.first_spawn_offset)
        log.info("phase -> playing")

    def _reset_run(self) -> None:
        self.actor.y = self.policy.rest_y
        self.actor.velocity = 0.0
        self.score = 0
        self.obstacles = []
        self.frame_count = 0
        self.death_flash = 0.0

    def _die(self) -> None:
        self.phase = Phase.GAME_OVER
        self.death_flash = 1.0
        self.frame_count = 0
        self.best.reconcile(self.score)
        log.info("phase -> gameover score=%d best=%d", self.score, self.best_score)
        if self.relay is not None:
            self.relay.report_score(self.score)

    # ── tick ──────────────────────────────────────────────────────────────

    def advance(self) -> None:
        """Advance the world by one fixed step."""
        self.frame_count += 1
        self._wing_timer += 1
        if self._wing_timer > self.policy.wing_flap_ticks:
            self._wing_timer = 0
            self.wing_up = not self.wing_up

        if self.phase is Phase.TITLE:
            self._advance_title()
        elif self.phase is Phase.GAME_OVER:
            self._advance_game_over()
        else:
            self._advance_playing()

    def _scroll_ground(self) -> None:
        p = self.policy
        self.ground_offset = (self.ground_offset + p.obstacle_speed) % p.ground_tile

    def _advance_title(self) -> None:
        p = self.policy
        self.actor.y = p.rest_y + math.sin(self.frame_count * p.title_bob_rate) * p.title_bob_amplitude
        self._scroll_ground()

    def _advance_game_over(self) -> None:
        p = self.policy
        if self.death_flash > 0:
            self.death_flash = max(0.0, self.death_flash - p.flash_decay)
        if self.actor.bottom(p) < p.play_height:
            self.actor.y, self.actor.velocity = integrate(
                self.actor.y, self.actor.velocity, p.gravity
            )
            self.actor.tilt = min(p.max_tilt, self.actor.tilt + p.death_tilt_step)
            # Come to rest on the ground line rather than sinking through it.
            rest_y = p.play_height - p.actor_height / 2
            if self.actor.y > rest_y:
                self.actor.y = rest_y

    def _advance_playing(self) -> None:
        p = self.policy
        actor = self.actor

        actor.y, actor.velocity = integrate(actor.y, actor.velocity, p.gravity)
        actor.tilt = ease_tilt(actor.tilt, actor.velocity, p)
        self._scroll_ground()

        for obstacle in self.obstacles:
            obstacle.x -= p.obstacle_speed
            if not obstacle.scored and obstacle.right(p) < p.actor_x:
                obstacle.scored = True
                self.score += 1
                log.debug("scored obstacle #%d score=%d", obstacle.serial, self.score)

        self.obstacles = [
            o for o in self.obstacles if o.right(p) > -p.despawn_margin
        ]

        newest = self.obstacles[-1] if self.obstacles else None
        if newest is None or newest.x < p.canvas_width - p.spawn_distance:
            self._spawn_obstacle(p.canvas_width + p.spawn_offset)

        if self._collides():
            self._die()

    def _collides(self) -> bool:
        p = self.policy
        top = self.actor.top(p)
        bottom = self.actor.bottom(p)
        if hits_bounds(top, bottom, 0.0, p.play_height):
            return True

        left = p.actor_x - p.actor_width / 2
        right = p.actor_x + p.actor_width / 2
        for obstacle in self.obstacles:
            if not spans_overlap(left, right, obstacle.x, obstacle.right(p)):
                continue
            if outside_gap(top, bottom, obstacle.gap_top(p), obstacle.gap_bottom(p)):
                return True
        return False

    def _spawn_obstacle(self, x: float) -> Obstacle:
        lo, hi = gap_band(self.policy)
        self.spawned_total += 1
        obstacle = Obstacle(
            x=x,
            gap_center=self._rng.uniform(lo, hi),
            serial=self.spawned_total,
        )
        self.obstacles.append(obstacle)
        log.debug(
            "spawn obstacle #%d x=%.1f gap=%.1f",
            obstacle.serial, obstacle.x, obstacle.gap_center,
        )
        return obstacle
