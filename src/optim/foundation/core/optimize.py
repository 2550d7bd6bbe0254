from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

from optim.foundation.exceptions import EvaluationError, OptimizationAbortedError
from optim.foundation.mesh import Mesh
from optim.foundation.objective import Objective
from optim.foundation.point import Point

_logger = logging.getLogger(__name__)

# Consecutive steps without a single objective call before solve gives up.
MAX_IDLE_STEPS = 100


class Iterator(Protocol):
    """A solver that advances by one step per call."""

    def iterate(self, objective: Objective, mesh: Mesh | None = None) -> tuple[Point, int]: ...


@dataclass
class OptimizationResult:
    """Outcome of a ``solve`` run."""

    best: Point
    n_eval: int
    converged: bool
    iterations: int


def relative_error(val: float, optimum: float) -> float:
    """``|val - optimum| / |optimum|``, or the absolute error when ``optimum`` is 0."""
    err = abs(val - optimum)
    if optimum == 0:
        return err
    return err / abs(optimum)


def solve(
    iterator: Iterator,
    objective: Objective,
    *,
    mesh: Mesh | None = None,
    optimum: float | None = None,
    tol: float = 1e-6,
    max_eval: int = 10000,
) -> OptimizationResult:
    """
    Repeatedly step ``iterator`` until converged or out of budget.

    Convergence needs a known ``optimum``: the run stops once the relative
    error of the best value drops below ``tol``. Without it the run uses the
    whole ``max_eval`` budget. Steps served entirely from a cache cost
    nothing; the run stops after ``MAX_IDLE_STEPS`` such steps in a row. A
    failed step raises OptimizationAbortedError carrying the evaluations so far
    and the best point found before the failure.
    """
    n_eval = 0
    iterations = 0
    idle = 0
    best: Point | None = None
    while n_eval < max_eval:
        try:
            best, n = iterator.iterate(objective, mesh)
        except EvaluationError as exc:
            n_eval += exc.n_eval
            raise OptimizationAbortedError(
                f"optimization aborted after {n_eval} evaluations: {exc.message}", n_eval, best
            ) from exc
        n_eval += n
        iterations += 1
        if optimum is not None and relative_error(best.val, optimum) < tol:
            _logger.info("Converged after %d evaluations (best %.6g).", n_eval, best.val)
            return OptimizationResult(best=best, n_eval=n_eval, converged=True, iterations=iterations)
        idle = idle + 1 if n == 0 else 0
        if idle >= MAX_IDLE_STEPS:
            _logger.warning("No new evaluations in %d steps; stopping at %d evaluations.", idle, n_eval)
            break

    if best is None:
        best = Point()
    _logger.info("Stopped after %d evaluations (best %.6g).", n_eval, best.val)
    return OptimizationResult(best=best, n_eval=n_eval, converged=False, iterations=iterations)


def bench(iterator: Iterator, fn, tol: float, max_eval: int, mesh: Mesh | None = None) -> OptimizationResult:
    """Run ``solve`` against a benchmark function's first known optimum."""
    return solve(iterator, fn, mesh=mesh, optimum=fn.optima()[0].val, tol=tol, max_eval=max_eval)


__all__ = ["MAX_IDLE_STEPS", "Iterator", "OptimizationResult", "relative_error", "solve", "bench"]
