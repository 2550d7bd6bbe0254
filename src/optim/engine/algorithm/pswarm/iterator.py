from __future__ import annotations

import logging

from optim.foundation.eval import Evaluator, evaluations_done
from optim.foundation.eval.backends import SerialEvaluator
from optim.foundation.mesh import Mesh, nearest
from optim.foundation.objective import Objective
from optim.foundation.point import Point

from .mover import Mover, SimpleMover
from .particle import Population

_logger = logging.getLogger(__name__)


class SwarmIterator:
    """
    Runs particle swarm steps: evaluate, update personal bests, move.

    Each call to ``iterate`` is one step; deciding when to stop is left to the
    caller (see ``optim.foundation.core.optimize.solve``).
    """

    def __init__(
        self,
        pop: Population,
        evaluator: Evaluator | None = None,
        mover: Mover | None = None,
    ) -> None:
        self.pop = pop
        self.evaluator = evaluator if evaluator is not None else SerialEvaluator()
        self.mover = mover if mover is not None else SimpleMover()
        self.generation = 0

    def add_point(self, p: Point) -> None:
        """Inject an externally found point as the swarm best if it beats the current one."""
        if p.val < self.pop.best().val:
            self.pop[0].best = p

    def iterate(self, objective: Objective, mesh: Mesh | None = None) -> tuple[Point, int]:
        """
        Run one step and return ``(best, n_eval)``.

        ``n_eval`` counts objective calls, so cache hits are free.

        An ``EvaluationError`` from the evaluator propagates unchanged; its
        ``n_eval`` reports the evaluations done before the failure.
        """
        points = self.pop.points()
        if mesh is not None:
            points = [nearest(p, mesh) for p in points]

        results = self.evaluator.evaluate(objective, points)
        n_eval = evaluations_done(self.evaluator, results)

        for particle, result in zip(self.pop, results):
            particle.update(result)

        self.mover.move(self.pop)
        self.generation += 1

        best = self.pop.best()
        _logger.debug("Generation %d: %d evaluations, best %.6g", self.generation, n_eval, best.val)
        return best, n_eval


__all__ = ["SwarmIterator"]
