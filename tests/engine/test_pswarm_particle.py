from __future__ import annotations

import math

import numpy as np
import pytest

from optim.engine.algorithm.pswarm import Particle, Population, new_population, uniform_points
from optim.foundation.point import Point


def _particle(i: int, pos, vel=(0.0, 0.0)) -> Particle:
    return Particle(id=i, point=Point(pos), vel=np.array(vel, dtype=float))


def test_particle_starts_with_infinite_best_at_its_position() -> None:
    p = _particle(0, [1.0, 2.0])
    assert math.isinf(p.best.val)
    np.testing.assert_array_equal(p.best.pos, [1.0, 2.0])
    assert p.best.pos is not p.point.pos


def test_update_takes_first_evaluation_and_only_strict_improvements() -> None:
    p = _particle(0, [1.0, 2.0])
    first = Point([1.0, 2.0], 5.0)
    p.update(first)
    assert p.best is first
    assert p.point.val == 5.0

    p.update(Point([3.0, 3.0], 5.0))
    assert p.best is first

    worse = Point([4.0, 4.0], 7.0)
    p.update(worse)
    assert p.best is first
    assert p.point.val == 7.0
    assert p.best.val <= p.point.val

    better = Point([0.0, 0.0], 1.0)
    p.update(better)
    assert p.best is better


def test_update_replaces_an_unset_best() -> None:
    p = Particle(id=0, point=Point([1.0]), vel=np.zeros(1), best=Point())
    failed = Point([1.0], math.inf)
    p.update(failed)
    assert p.best is failed


def test_population_best_is_lowest_personal_best() -> None:
    pop = Population([_particle(i, [float(i), 0.0]) for i in range(3)])
    for particle, val in zip(pop, [3.0, 1.0, 2.0]):
        particle.update(Point(particle.point.pos.copy(), val))

    best = pop.best()
    assert best.val == 1.0
    np.testing.assert_array_equal(best.pos, [1.0, 0.0])
    assert all(a is p.point for a, p in zip(pop.points(), pop))


def test_empty_population_best_raises() -> None:
    with pytest.raises(ValueError):
        Population().best()


def test_new_population_draws_velocities_within_limits() -> None:
    rng = np.random.default_rng(3)
    points = uniform_points(20, [-1.0, 0.0, 5.0], [1.0, 2.0, 6.0], rng)
    pop = new_population(points, [-0.1, -0.2, 0.0], [0.1, 0.2, 0.5], rng)

    assert len(pop) == 20
    for i, p in enumerate(pop):
        assert p.id == i
        assert np.all(p.vel >= [-0.1, -0.2, 0.0]) and np.all(p.vel <= [0.1, 0.2, 0.5])
        assert np.all(p.point.pos >= [-1.0, 0.0, 5.0]) and np.all(p.point.pos <= [1.0, 2.0, 6.0])
        assert math.isinf(p.best.val)
        assert p.point.pos is not points[i].pos


def test_new_population_is_reproducible() -> None:
    def build():
        rng = np.random.default_rng(11)
        return new_population(uniform_points(4, [0.0, 0.0], [1.0, 1.0], rng), [-1.0, -1.0], [1.0, 1.0], rng)

    a, b = build(), build()
    for pa, pb in zip(a, b):
        np.testing.assert_array_equal(pa.point.pos, pb.point.pos)
        np.testing.assert_array_equal(pa.vel, pb.vel)
