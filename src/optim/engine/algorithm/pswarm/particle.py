"""Particle and population state for the particle swarm."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, Sequence

import numpy as np

from optim.foundation.point import Point


@dataclass
class Particle:
    """One candidate solution: current point, velocity and personal best.

    Attributes
    ----------
    id : int
        Stable index within its population.
    point : Point
        Current position. Its value is the last evaluation and goes stale
        after every move.
    vel : np.ndarray
        Velocity, same length as ``point.pos``.
    best : Point
        Personal best; starts at the initial position with value ``+inf``.
    """

    id: int
    point: Point
    vel: np.ndarray
    best: Point | None = None

    def __post_init__(self) -> None:
        self.vel = np.asarray(self.vel, dtype=np.float64).reshape(-1)
        if self.best is None:
            self.best = Point(self.point.pos.copy(), math.inf)

    def update(self, newp: Point) -> None:
        """Record an evaluation of this particle's position."""
        self.point.val = newp.val
        if newp.val < self.best.val or len(self.best) == 0:
            self.best = newp


@dataclass
class Population:
    particles: list[Particle] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.particles)

    def __iter__(self) -> Iterator[Particle]:
        return iter(self.particles)

    def __getitem__(self, i: int) -> Particle:
        return self.particles[i]

    def points(self) -> list[Point]:
        return [p.point for p in self.particles]

    def best(self) -> Point:
        """Lowest-valued personal best across the population."""
        if not self.particles:
            raise ValueError("best() requires a non-empty population.")
        best = self.particles[0].best
        for p in self.particles[1:]:
            if p.best.val < best.val:
                best = p.best
        return best


def new_population(
    points: Sequence[Point],
    vmin,
    vmax,
    rng: np.random.Generator,
) -> Population:
    """
    Build a population from starting points.

    Velocities for each dimension ``i`` are drawn uniformly from
    ``[vmin[i], vmax[i]]`` using ``rng``.
    """
    vmin_arr = np.asarray(vmin, dtype=np.float64).reshape(-1)
    vmax_arr = np.asarray(vmax, dtype=np.float64).reshape(-1)
    particles = []
    for i, p in enumerate(points):
        vel = vmin_arr + (vmax_arr - vmin_arr) * rng.random(vmin_arr.shape[0])
        particles.append(Particle(id=i, point=Point(p.pos.copy(), p.val), vel=vel))
    return Population(particles)


def uniform_points(n: int, lower, upper, rng: np.random.Generator) -> list[Point]:
    """Draw ``n`` unevaluated points uniformly inside ``[lower, upper]``."""
    lower_arr = np.asarray(lower, dtype=np.float64).reshape(-1)
    upper_arr = np.asarray(upper, dtype=np.float64).reshape(-1)
    X = rng.uniform(lower_arr, upper_arr, size=(n, lower_arr.shape[0]))
    return [Point(x) for x in X]


__all__ = ["Particle", "Population", "new_population", "uniform_points"]
