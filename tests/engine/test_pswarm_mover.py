from __future__ import annotations

import numpy as np
import pytest

from optim.engine.algorithm.pswarm import (
    DEFAULT_INERTIA,
    DEFAULT_SEED,
    Particle,
    Population,
    SimpleMover,
    speed,
)
from optim.foundation.point import Point


def _population() -> Population:
    # p0 sits on the global best and drifts; p1 is still.
    p0 = Particle(id=0, point=Point([0.0, 0.0]), vel=np.array([1.0, 0.0]))
    p0.update(Point([0.0, 0.0], 1.0))
    p1 = Particle(id=1, point=Point([2.0, 2.0]), vel=np.array([0.0, 0.0]))
    p1.update(Point([2.0, 2.0], 8.0))
    return Population([p0, p1])


def test_speed_is_euclidean_norm() -> None:
    assert speed(np.array([3.0, 4.0])) == 5.0
    assert speed(np.zeros(3)) == 0.0


def test_move_uses_one_draw_pair_per_particle_and_global_best() -> None:
    pop = _population()
    SimpleMover(rng=np.random.default_rng(7)).move(pop)

    draws = np.random.default_rng(7).random(4)
    w1, w2 = draws[2], draws[3]

    np.testing.assert_allclose(pop[0].vel, [DEFAULT_INERTIA, 0.0])
    np.testing.assert_allclose(pop[0].point.pos, [DEFAULT_INERTIA, 0.0])

    # The same pair scales both dimensions; the dynamic cap (0 here) is not applied.
    expected_v = -(w1 + w2) * np.array([1.0, 1.0])
    np.testing.assert_allclose(pop[1].vel, expected_v)
    np.testing.assert_allclose(pop[1].point.pos, [2.0, 2.0] + expected_v)


def test_move_keeps_stale_value_and_personal_best() -> None:
    pop = _population()
    best_before = pop[1].best
    SimpleMover().move(pop)
    assert pop[1].point.val == 8.0
    assert pop[1].best is best_before
    np.testing.assert_array_equal(pop[1].best.pos, [2.0, 2.0])


def test_fixed_vmax_rescales_whole_velocity() -> None:
    pop = _population()
    SimpleMover(vmax=0.5, rng=np.random.default_rng(7)).move(pop)

    np.testing.assert_allclose(pop[0].vel, [0.5, 0.0])
    assert speed(pop[1].vel) <= 0.5 + 1e-12
    assert pop[1].vel[0] == pop[1].vel[1]


def test_inertia_fn_is_used() -> None:
    calls = []

    def inertia() -> float:
        calls.append(1)
        return 0.25

    pop = _population()
    SimpleMover(inertia_fn=inertia).move(pop)
    np.testing.assert_allclose(pop[0].vel, [0.25, 0.0])
    assert len(calls) == len(pop) * 2


def test_inertia_schedule_advances_per_dimension() -> None:
    weights = iter([1.0, 0.5, 0.25, 0.125])
    p0 = Particle(id=0, point=Point([0.0, 0.0]), vel=np.array([1.0, 1.0]))
    p0.update(Point([0.0, 0.0], 0.0))
    p1 = Particle(id=1, point=Point([0.0, 0.0]), vel=np.array([2.0, 4.0]))
    p1.update(Point([0.0, 0.0], 3.0))

    SimpleMover(inertia_fn=lambda: next(weights)).move(Population([p0, p1]))

    np.testing.assert_allclose(p0.vel, [1.0, 0.5])
    np.testing.assert_allclose(p1.vel, [0.5, 0.5])


def test_shared_draws_scale_unequal_pull_components() -> None:
    leader = Particle(id=0, point=Point([0.0, 0.0]), vel=np.zeros(2))
    leader.update(Point([0.0, 0.0], 0.0))
    follower = Particle(id=1, point=Point([2.0, 3.0]), vel=np.zeros(2))
    follower.update(Point([2.0, 3.0], 13.0))

    SimpleMover(cognition=0.7, social=0.2, rng=np.random.default_rng(11)).move(Population([leader, follower]))

    draws = np.random.default_rng(11).random(4)
    w1, w2 = draws[2], draws[3]
    expected_v = (0.7 * w1 + 0.2 * w2) * np.array([-2.0, -3.0])
    np.testing.assert_allclose(follower.vel, expected_v)
    np.testing.assert_allclose(follower.point.pos, [2.0, 3.0] + expected_v)
    assert follower.vel[1] / follower.vel[0] == pytest.approx(1.5)
    np.testing.assert_array_equal(leader.vel, [0.0, 0.0])


def test_default_seed_is_reproducible() -> None:
    a, b = _population(), _population()
    mover_a, mover_b = SimpleMover(), SimpleMover()
    for _ in range(3):
        mover_a.move(a)
        mover_b.move(b)
    for pa, pb in zip(a, b):
        np.testing.assert_array_equal(pa.point.pos, pb.point.pos)
    assert mover_a.seed == DEFAULT_SEED


def test_movers_with_different_seeds_diverge() -> None:
    a, b = _population(), _population()
    SimpleMover(seed=1).move(a)
    SimpleMover(seed=2).move(b)
    assert not np.array_equal(a[1].point.pos, b[1].point.pos)
