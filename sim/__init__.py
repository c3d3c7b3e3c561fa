"""
sim — Simulation core
=====================

Modules
-------
world
    :class:`World` state machine, actor / obstacle entities and the tick.
flight_policy
    :class:`FlightPolicy` tunable constants.
physics
    Low-level integration, tilt and collision helpers.
best_score
    :class:`BestScore` monotonic best-score cache.
"""

from .best_score import BestScore
from .flight_policy import FlightPolicy
from .world import Actor, Obstacle, Phase, World

__all__ = [
    "Actor",
    "BestScore",
    "FlightPolicy",
    "Obstacle",
    "Phase",
    "World",
]
