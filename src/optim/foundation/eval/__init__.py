from __future__ import annotations

from typing import Protocol, Sequence

from optim.foundation.objective import Objective
from optim.foundation.point import Point


class Evaluator(Protocol):
    """Protocol for batch evaluators.

    ``evaluate`` returns one evaluated point per input point. Non-caching
    evaluators keep input order. On failure an ``EvaluationError`` is raised
    holding whatever was evaluated; unevaluated points are never returned.

    ``n_eval`` is the number of objective calls made by the last ``evaluate``
    call. It can be lower than the number of results (cache hits).
    """

    n_eval: int

    def evaluate(self, objective: Objective, points: Sequence[Point]) -> list[Point]: ...


def evaluations_done(evaluator: object, results: Sequence[Point]) -> int:
    """Objective calls behind ``results``; evaluators without ``n_eval`` count every result."""
    return int(getattr(evaluator, "n_eval", len(results)))


__all__ = ["Evaluator", "evaluations_done"]
