"""Mesh protocol and the forwarding base shared by mesh wrappers."""

from __future__ import annotations

from typing import Protocol

import numpy as np

from optim.foundation.point import Point


class Mesh(Protocol):
    """Projects arbitrary dimensional points onto a (potentially discrete) mesh."""

    @property
    def step(self) -> float: ...

    @step.setter
    def step(self, value: float) -> None: ...

    @property
    def origin(self) -> np.ndarray | None: ...

    @origin.setter
    def origin(self, value: np.ndarray | None) -> None: ...

    def nearest(self, x: np.ndarray) -> np.ndarray: ...


class MeshWrapper:
    """Holds an inner mesh and forwards step, origin and nearest to it.

    Bounded, constrained and integer meshes build on this and override only
    what they change.
    """

    def __init__(self, mesh: Mesh) -> None:
        self.mesh = mesh

    @property
    def step(self) -> float:
        return self.mesh.step

    @step.setter
    def step(self, value: float) -> None:
        self.mesh.step = value

    @property
    def origin(self) -> np.ndarray | None:
        return self.mesh.origin

    @origin.setter
    def origin(self, value: np.ndarray | None) -> None:
        self.mesh.origin = value

    def nearest(self, x: np.ndarray) -> np.ndarray:
        return self.mesh.nearest(x)


def nearest(p: Point, mesh: Mesh) -> Point:
    """Snap ``p`` onto ``mesh``, keeping its value."""
    return Point(mesh.nearest(p.pos), p.val)


__all__ = ["Mesh", "MeshWrapper", "nearest"]
