"""
Meshes project arbitrary points onto a structured geometry.

``InfiniteMesh`` is the base grid (or continuous space when its step is 0);
``BoundedMesh``, ``ConstrainedMesh`` and ``IntegerMesh`` wrap another mesh.
"""

from __future__ import annotations

from .base import Mesh, MeshWrapper, nearest
from .bounded import BoundedMesh
from .constrained import ConstrainedMesh, project_feasible
from .infinite import InfiniteMesh
from .integer import IntegerMesh

__all__ = [
    "Mesh",
    "MeshWrapper",
    "nearest",
    "InfiniteMesh",
    "BoundedMesh",
    "ConstrainedMesh",
    "IntegerMesh",
    "project_feasible",
]
