"""
optim exception hierarchy.

Provides user-friendly exceptions with helpful error messages and suggestions.
All optim-specific exceptions inherit from OptimError for easy catching.

Example:
    try:
        result = solve(iterator, objective, max_eval=5000)
    except OptimizationAbortedError as e:
        print(f"Stopped after {e.n_eval} evaluations, best so far: {e.best}")
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Sequence

if TYPE_CHECKING:
    from .point import Point


class OptimError(Exception):
    """
    Base exception for all optim errors.

    Attributes:
        message: Human-readable error description
        suggestion: Optional suggestion for fixing the error
        details: Optional dict with additional context
    """

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the full error message with suggestion."""
        msg = self.message
        if self.suggestion:
            msg += f"\n\nSuggestion: {self.suggestion}"
        return msg


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(OptimError):
    """Raised when configuration is invalid or incomplete."""

    pass


class MeshConfigurationError(ConfigurationError):
    """Raised when a mesh is configured inconsistently. Never retryable."""

    pass


class DimensionMismatchError(MeshConfigurationError):
    """Raised when a point's length disagrees with a mesh's fixed origin."""

    def __init__(self, expected: int, got: int) -> None:
        message = f"origin len {expected} incompatible with point len {got}."
        suggestion = "Reset the mesh origin or pass points with the mesh's dimensionality"
        super().__init__(message, suggestion, {"expected": expected, "got": got})


class BasisInversionError(MeshConfigurationError):
    """Raised when the mesh basis matrix cannot be inverted."""

    def __init__(self, reason: str) -> None:
        message = f"basis inversion failed: {reason}"
        suggestion = "Use a square, non-singular basis whose columns are the mesh axes"
        super().__init__(message, suggestion, {"reason": reason})


class BoundsError(MeshConfigurationError):
    """Raised when bounds are invalid or inconsistent."""

    def __init__(self, message: str) -> None:
        suggestion = "Ensure lower <= upper for all variables and both vectors match the mesh dimensionality"
        super().__init__(message, suggestion)


# =============================================================================
# Runtime Errors
# =============================================================================


class OptimizationError(OptimError):
    """Raised when optimization fails during execution."""

    pass


class EvaluationError(OptimizationError):
    """
    Raised when objective evaluation of a batch fails.

    The points evaluated before the failure (or all of them, for evaluators that
    continue on error) are kept on ``results``. ``n_eval`` counts the objective
    calls behind them and defaults to ``len(results)``; it is smaller when some
    results came from a cache. The objective's own exception is chained as
    ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        results: Sequence["Point"] | None = None,
        n_eval: int | None = None,
    ) -> None:
        self.results: list[Point] = list(results or [])
        self.n_eval = len(self.results) if n_eval is None else int(n_eval)
        suggestion = "Check your objective function for errors"
        super().__init__(message, suggestion, {"n_eval": self.n_eval})


class OptimizationAbortedError(OptimizationError):
    """Raised by the driver loop when a step fails; carries the progress made."""

    def __init__(self, message: str, n_eval: int, best: "Point | None" = None) -> None:
        self.n_eval = n_eval
        self.best = best
        suggestion = "Inspect the chained EvaluationError for the failing point"
        super().__init__(message, suggestion, {"n_eval": n_eval})


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Base
    "OptimError",
    # Configuration
    "ConfigurationError",
    "MeshConfigurationError",
    "DimensionMismatchError",
    "BasisInversionError",
    "BoundsError",
    # Runtime
    "OptimizationError",
    "EvaluationError",
    "OptimizationAbortedError",
]
