"""Point type shared by evaluators, meshes and solvers."""

from __future__ import annotations

import hashlib
import math
from dataclasses import dataclass, field

import numpy as np


@dataclass
class Point:
    """A coordinate vector and its objective value.

    Attributes:
        pos: Coordinates, stored as a 1-D float64 array.
        val: Objective value (lower is better). ``+inf`` until evaluated.
    """

    pos: np.ndarray = field(default_factory=lambda: np.array([], dtype=np.float64))
    val: float = math.inf

    def __post_init__(self) -> None:
        # Enforce float64
        self.pos = np.asarray(self.pos, dtype=np.float64).reshape(-1)
        self.val = float(self.val)

    def __len__(self) -> int:
        return int(self.pos.shape[0])

    def at(self, i: int) -> float:
        return float(self.pos[i])

    def copy(self) -> Point:
        return Point(self.pos.copy(), self.val)


def hash_point(p: Point) -> bytes:
    """SHA-1 digest of the big-endian IEEE-754 bytes of ``p.pos``.

    The value is ignored, so two points with identical coordinates share a key.
    """
    data = np.asarray(p.pos, dtype=">f8").tobytes()
    return hashlib.sha1(data).digest()


__all__ = ["Point", "hash_point"]
