"""Velocity and position update laws for the particle swarm."""

from __future__ import annotations

from typing import Callable, Protocol

import numpy as np

from optim.foundation.point import Point

from .particle import Population

DEFAULT_COGNITION = 0.5
DEFAULT_SOCIAL = 0.5
DEFAULT_INERTIA = 0.9
DEFAULT_SEED = 1


class Mover(Protocol):
    """Protocol for swarm movers; ``move`` mutates velocities and positions in place."""

    def move(self, pop: Population) -> None: ...


def speed(vel: np.ndarray) -> float:
    """Euclidean norm of a velocity vector."""
    return float(np.sqrt(np.dot(vel, vel)))


class SimpleMover:
    """
    Inertia/cognitive/social particle update.

    Parameters
    ----------
    cognition, social : float
        Weights of the two attraction terms. Both pull towards the population's
        global best.
    vmax : float
        Fixed speed cap. ``0`` derives a per-particle cap of 1.5x the speed
        before the update; that cap is never enforced since it cannot be
        exceeded.
    inertia_fn : callable, optional
        Returns the inertia weight, called once per dimension of every
        particle, so stateful schedules advance per coordinate. Constant
        ``DEFAULT_INERTIA`` when omitted.
    rng : np.random.Generator, optional
        Random source. Built from ``seed`` on the first move when omitted.
    seed : int
        Seed used when ``rng`` is omitted, so runs are reproducible by default.
    """

    def __init__(
        self,
        cognition: float = DEFAULT_COGNITION,
        social: float = DEFAULT_SOCIAL,
        vmax: float = 0.0,
        inertia_fn: Callable[[], float] | None = None,
        rng: np.random.Generator | None = None,
        seed: int = DEFAULT_SEED,
    ) -> None:
        self.cognition = cognition
        self.social = social
        self.vmax = vmax
        self.inertia_fn = inertia_fn
        self.rng = rng
        self.seed = seed

    def move(self, pop: Population) -> None:
        if self.rng is None:
            self.rng = np.random.default_rng(self.seed)
        if self.inertia_fn is None:
            self.inertia_fn = lambda: DEFAULT_INERTIA

        best = pop.best()

        for p in pop:
            vmax = self.vmax
            if vmax == 0:
                vmax = 1.5 * speed(p.vel)

            # One pair of draws per particle, shared by every dimension.
            w1 = self.rng.random()
            w2 = self.rng.random()
            pull = best.pos - p.point.pos
            inertia = np.array([self.inertia_fn() for _ in range(p.vel.shape[0])])
            vel = inertia * p.vel + self.cognition * w1 * pull + self.social * w2 * pull

            s = speed(vel)
            if self.vmax > 0 and s > self.vmax:
                vel = vel * (vmax / s)
            p.vel = vel

            p.point = Point(p.point.pos + vel, p.point.val)


__all__ = [
    "DEFAULT_COGNITION",
    "DEFAULT_SOCIAL",
    "DEFAULT_INERTIA",
    "DEFAULT_SEED",
    "Mover",
    "SimpleMover",
    "speed",
]
