from __future__ import annotations

import logging
import math
from typing import Sequence

from optim.foundation.exceptions import ConfigurationError, EvaluationError
from optim.foundation.objective import Objective
from optim.foundation.point import Point, hash_point

from . import Evaluator, evaluations_done

_logger = logging.getLogger(__name__)


class SerialEvaluator:
    """
    Synchronous in-process evaluation, one point at a time in input order.

    Notes:
        - Without ``continue_on_error`` the first failure stops the batch; the
          raised EvaluationError holds only the points evaluated before it.
        - With ``continue_on_error`` every point is evaluated (failures get
          ``+inf``) and the raised EvaluationError is chained to the *last*
          failure. Earlier failures are only logged.
    """

    def __init__(self, continue_on_error: bool = False) -> None:
        self.continue_on_error = continue_on_error
        self.n_eval = 0

    def evaluate(self, objective: Objective, points: Sequence[Point]) -> list[Point]:
        self.n_eval = 0
        results: list[Point] = []
        last_exc: Exception | None = None
        for p in points:
            pos = p.pos.copy()
            try:
                val = float(objective(pos))
            except Exception as exc:
                if not self.continue_on_error:
                    self.n_eval = len(results)
                    raise EvaluationError(
                        f"objective evaluation failed at point {len(results)}: {exc}", results
                    ) from exc
                if last_exc is not None:
                    _logger.debug("Superseding earlier evaluation failure: %s", last_exc)
                last_exc = exc
                val = math.inf
            results.append(Point(pos, val))

        self.n_eval = len(results)
        if last_exc is not None:
            raise EvaluationError(f"objective evaluation failed: {last_exc}", results) from last_exc
        return results


class CachingEvaluator:
    """
    Memoizes another evaluator by coordinate digest.

    Notes:
        - Results are cache hits followed by freshly evaluated points; input
          order is not preserved.
        - ``n_eval`` counts only the points forwarded to the wrapped evaluator.
        - Points returned by the wrapped evaluator are cached even when it
          raised, so a cache hit never carries error information.
        - Duplicates within one batch are all forwarded to the wrapped evaluator.
        - Not safe for concurrent use; callers must serialize access.
    """

    def __init__(self, evaluator: Evaluator) -> None:
        self.evaluator = evaluator
        self._cache: dict[bytes, float] = {}
        self._hits = 0
        self._misses = 0
        self.n_eval = 0

    def evaluate(self, objective: Objective, points: Sequence[Point]) -> list[Point]:
        results: list[Point] = []
        fresh: list[Point] = []
        for p in points:
            val = self._cache.get(hash_point(p))
            if val is not None:
                results.append(Point(p.pos, val))
            else:
                fresh.append(p)
        self._hits += len(results)
        self._misses += len(fresh)
        self.n_eval = 0

        if not fresh:
            return results

        try:
            new_results = self.evaluator.evaluate(objective, fresh)
        except EvaluationError as exc:
            self._store(exc.results)
            self.n_eval = exc.n_eval
            cause = exc.__cause__ if exc.__cause__ is not None else exc
            raise EvaluationError(exc.message, results + exc.results, n_eval=exc.n_eval) from cause
        self._store(new_results)
        self.n_eval = evaluations_done(self.evaluator, new_results)
        return results + new_results

    def _store(self, points: Sequence[Point]) -> None:
        for p in points:
            self._cache[hash_point(p)] = p.val

    def __len__(self) -> int:
        return len(self._cache)

    @property
    def stats(self) -> dict[str, int]:
        """Return cache statistics."""
        return {
            "hits": self._hits,
            "misses": self._misses,
            "size": len(self._cache),
        }


def resolve_evaluator(name: str, *, cache: bool = False, continue_on_error: bool = False) -> Evaluator:
    key = (name or "serial").lower()
    if key != "serial":
        raise ConfigurationError(f"Unknown evaluator '{name}'.", suggestion="Available evaluators: serial")
    evaluator: Evaluator = SerialEvaluator(continue_on_error=continue_on_error)
    if cache:
        evaluator = CachingEvaluator(evaluator)
    return evaluator


__all__ = ["SerialEvaluator", "CachingEvaluator", "resolve_evaluator"]
