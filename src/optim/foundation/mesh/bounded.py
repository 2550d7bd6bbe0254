from __future__ import annotations

import numpy as np

from optim.foundation.exceptions import BoundsError, DimensionMismatchError

from .base import Mesh, MeshWrapper


class BoundedMesh(MeshWrapper):
    """Clamps each coordinate into ``[lower, upper]`` before snapping with the inner mesh."""

    def __init__(self, mesh: Mesh, lower, upper) -> None:
        super().__init__(mesh)
        lower_arr = np.array(lower, dtype=np.float64).reshape(-1)
        upper_arr = np.array(upper, dtype=np.float64).reshape(-1)
        if lower_arr.shape != upper_arr.shape:
            raise BoundsError(
                f"mesh lower and upper bound vectors have different lengths ({lower_arr.shape[0]} != {upper_arr.shape[0]})"
            )
        if np.any(lower_arr > upper_arr):
            raise BoundsError("mesh lower bound exceeds upper bound")
        # Fails fast when the bounds don't match the inner mesh's dimensionality.
        try:
            mesh.nearest(lower_arr)
        except DimensionMismatchError as exc:
            raise BoundsError(f"bounds incompatible with wrapped mesh: {exc.message}") from exc
        self.lower = lower_arr
        self.upper = upper_arr

    def nearest(self, x: np.ndarray) -> np.ndarray:
        clamped = np.clip(np.asarray(x, dtype=np.float64), self.lower, self.upper)
        return self.mesh.nearest(clamped)


__all__ = ["BoundedMesh"]
