"""
Particle swarm optimization.

``SwarmIterator`` runs one evaluate/update/move step per call on a
``Population``; ``SimpleMover`` implements the default velocity update.
"""

from .iterator import SwarmIterator
from .mover import (
    DEFAULT_COGNITION,
    DEFAULT_INERTIA,
    DEFAULT_SEED,
    DEFAULT_SOCIAL,
    Mover,
    SimpleMover,
    speed,
)
from .particle import Particle, Population, new_population, uniform_points

__all__ = [
    "SwarmIterator",
    "Mover",
    "SimpleMover",
    "speed",
    "Particle",
    "Population",
    "new_population",
    "uniform_points",
    "DEFAULT_COGNITION",
    "DEFAULT_SOCIAL",
    "DEFAULT_INERTIA",
    "DEFAULT_SEED",
]
