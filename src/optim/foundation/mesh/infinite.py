from __future__ import annotations

import numpy as np

from optim.foundation.exceptions import BasisInversionError, DimensionMismatchError


class InfiniteMesh:
    """
    Grid-based, linear-axis mesh that extends in all dimensions without bounds.

    Parameters
    ----------
    step : float
        Grid spacing. ``0`` means continuous space: ``nearest`` returns a copy
        of its input untouched.
    origin : array-like, optional
        Mesh origin. Its length fixes the dimensionality; when omitted, the
        first call to ``nearest`` fixes it with a zero origin.
    basis : array-like, optional
        Square matrix whose columns are the directions of the mesh axes.
        Identity when omitted. Inverted once, on first use.
    """

    def __init__(self, step: float = 0.0, origin=None, basis=None) -> None:
        self._step = float(step)
        self._origin: np.ndarray | None = None
        self._basis: np.ndarray | None = None
        self._inverter: np.ndarray | None = None
        self.origin = origin
        self.basis = basis

    @property
    def step(self) -> float:
        return self._step

    @step.setter
    def step(self, value: float) -> None:
        self._step = float(value)

    @property
    def origin(self) -> np.ndarray | None:
        return self._origin

    @origin.setter
    def origin(self, value) -> None:
        self._origin = None if value is None else np.array(value, dtype=np.float64).reshape(-1)

    @property
    def basis(self) -> np.ndarray | None:
        return self._basis

    @basis.setter
    def basis(self, value) -> None:
        self._basis = None if value is None else np.array(value, dtype=np.float64)
        self._inverter = None

    def _fixed_origin(self, n: int) -> np.ndarray:
        if self._origin is None or self._origin.size == 0:
            self._origin = np.zeros(n, dtype=np.float64)
        elif self._origin.shape[0] != n:
            raise DimensionMismatchError(self._origin.shape[0], n)
        return self._origin

    def _inverse(self) -> np.ndarray | None:
        if self._basis is not None and self._inverter is None:
            try:
                self._inverter = np.linalg.inv(self._basis)
            except np.linalg.LinAlgError as exc:
                raise BasisInversionError(str(exc)) from exc
        return self._inverter

    def nearest(self, x: np.ndarray) -> np.ndarray:
        """Return the grid point nearest to ``x``.

        The point is translated by the origin and, when a basis is set, mapped
        into mesh coordinates before each coordinate is rounded to a whole
        number of steps (ties round up). The result is mapped back.
        """
        x = np.array(x, dtype=np.float64).reshape(-1)
        if self._step == 0:
            return x

        origin = self._fixed_origin(x.shape[0])
        inverter = self._inverse()

        local = x - origin
        if inverter is not None:
            local = inverter @ local

        snapped = np.floor(local / self._step + 0.5) * self._step

        if self._basis is not None:
            snapped = self._basis @ snapped
        return snapped + origin


__all__ = ["InfiniteMesh"]
