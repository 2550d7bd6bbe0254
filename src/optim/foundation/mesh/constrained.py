from __future__ import annotations

import logging

import numpy as np
from scipy.optimize import minimize  # type: ignore[import-untyped]

from optim.foundation.exceptions import MeshConfigurationError

from .base import Mesh, MeshWrapper

_logger = logging.getLogger(__name__)

FEASIBILITY_TOL = 1e-12


def project_feasible(x: np.ndarray, A: np.ndarray, b: np.ndarray) -> np.ndarray:
    """
    Euclidean projection of ``x`` onto ``{y : A y <= b}``.

    Solved as the quadratic program ``min 0.5 ||y - x||^2 s.t. A y <= b``.
    Points that already satisfy the system are returned unchanged.
    """
    x = np.array(x, dtype=np.float64).reshape(-1)
    if np.all(A @ x - b <= FEASIBILITY_TOL):
        return x

    res = minimize(
        lambda y: 0.5 * float(np.dot(y - x, y - x)),
        x0=x,
        jac=lambda y: y - x,
        constraints=[{"type": "ineq", "fun": lambda y: b - A @ y, "jac": lambda y: -A}],
        method="SLSQP",
        options={"ftol": 1e-12, "maxiter": 200},
    )
    if not res.success:
        _logger.warning("Feasibility projection did not converge: %s", res.message)
    return np.asarray(res.x, dtype=np.float64)


class ConstrainedMesh(MeshWrapper):
    """
    Projects onto the feasible region ``A x <= b`` before snapping with the inner mesh.

    The projection happens before the snap to the inner mesh's grid, so the
    returned point may lie slightly outside the feasible region.
    """

    def __init__(self, mesh: Mesh, A, b) -> None:
        super().__init__(mesh)
        A_arr = np.atleast_2d(np.array(A, dtype=np.float64))
        b_arr = np.array(b, dtype=np.float64).reshape(-1)
        if A_arr.shape[0] != b_arr.shape[0]:
            raise MeshConfigurationError(
                f"constraint matrix has {A_arr.shape[0]} rows but b has {b_arr.shape[0]} entries"
            )
        self.A = A_arr
        self.b = b_arr

    def nearest(self, x: np.ndarray) -> np.ndarray:
        x = np.asarray(x, dtype=np.float64).reshape(-1)
        if x.shape[0] != self.A.shape[1]:
            raise MeshConfigurationError(
                f"constraint matrix has {self.A.shape[1]} columns but point has {x.shape[0]} coordinates"
            )
        return self.mesh.nearest(project_feasible(x, self.A, self.b))


__all__ = ["ConstrainedMesh", "project_feasible"]
