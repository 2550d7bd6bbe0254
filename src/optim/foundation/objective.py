"""
Objective contract and diagnostic wrappers.

An objective maps a coordinate vector to a scalar, framed so that lower values
are better. A failed evaluation raises; evaluators record the failed point with
a value of ``+inf`` and surface the exception through ``EvaluationError``.
"""

from __future__ import annotations

import logging
from typing import Protocol

import numpy as np

_logger = logging.getLogger(__name__)


class Objective(Protocol):
    """Protocol for objective functions (plain callables satisfy it)."""

    def __call__(self, x: np.ndarray) -> float: ...


class LoggedObjective:
    """Wraps an objective, counting calls and logging each evaluation at DEBUG level."""

    def __init__(self, objective: Objective, logger: logging.Logger | None = None) -> None:
        self.objective = objective
        self.count = 0
        self._logger = logger or _logger

    def __call__(self, x: np.ndarray) -> float:
        try:
            val = self.objective(x)
        finally:
            self.count += 1
        self._logger.debug("%d %s    %s", self.count, " ".join(repr(float(v)) for v in x), val)
        return val


__all__ = ["Objective", "LoggedObjective"]
