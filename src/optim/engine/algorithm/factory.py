"""Assemble a ready-to-run swarm iterator and mesh from a SwarmConfigData."""

from __future__ import annotations

import numpy as np

from optim.engine.algorithm.pswarm import SimpleMover, SwarmIterator, new_population, uniform_points
from optim.engine.config.swarm import SwarmConfigData
from optim.foundation.eval.backends import resolve_evaluator
from optim.foundation.mesh import BoundedMesh, InfiniteMesh, Mesh


def build_swarm(cfg: SwarmConfigData, lower, upper) -> SwarmIterator:
    """
    Build a swarm with ``cfg.pop_size`` particles spread uniformly in the bounds.

    Initial velocities are drawn from ``+/- velocity_fraction * (upper - lower)``.
    Population sampling and the mover use independent generators derived from
    ``cfg.seed``.
    """
    lower_arr = np.asarray(lower, dtype=np.float64)
    upper_arr = np.asarray(upper, dtype=np.float64)
    init_rng, move_rng = (np.random.default_rng(s) for s in np.random.SeedSequence(cfg.seed).spawn(2))

    span = (upper_arr - lower_arr) * cfg.velocity_fraction
    points = uniform_points(cfg.pop_size, lower_arr, upper_arr, init_rng)
    pop = new_population(points, -span, span, init_rng)

    inertia = cfg.inertia
    mover = SimpleMover(
        cognition=cfg.cognition,
        social=cfg.social,
        vmax=cfg.vmax,
        inertia_fn=lambda: inertia,
        rng=move_rng,
    )
    evaluator = resolve_evaluator(cfg.evaluator, cache=cfg.cache, continue_on_error=cfg.continue_on_error)
    return SwarmIterator(pop, evaluator=evaluator, mover=mover)


def build_mesh(cfg: SwarmConfigData, lower, upper) -> Mesh:
    """A grid with ``cfg.step`` spacing (continuous when 0) clamped to the bounds."""
    return BoundedMesh(InfiniteMesh(step=cfg.step), lower, upper)


__all__ = ["build_swarm", "build_mesh"]
