from __future__ import annotations

import numpy as np

from .base import MeshWrapper


class IntegerMesh(MeshWrapper):
    """Forces the inner mesh onto whole-number coordinates (step at least 1, ties round up)."""

    @property
    def step(self) -> float:
        return self.mesh.step

    @step.setter
    def step(self, value: float) -> None:
        self.mesh.step = max(float(value), 1.0)

    @property
    def origin(self) -> np.ndarray | None:
        return self.mesh.origin

    @origin.setter
    def origin(self, value) -> None:
        self.mesh.origin = None if value is None else self.nearest(value)

    def nearest(self, x: np.ndarray) -> np.ndarray:
        return np.floor(self.mesh.nearest(x) + 0.5)


__all__ = ["IntegerMesh"]
