from __future__ import annotations

import hashlib
import math
import struct

import numpy as np

from optim.foundation.point import Point, hash_point


def test_point_defaults_to_unevaluated() -> None:
    p = Point([1, 2, 3])
    assert p.pos.dtype == np.float64
    assert len(p) == 3
    assert math.isinf(p.val) and p.val > 0
    assert p.at(1) == 2.0


def test_hash_point_uses_big_endian_ieee_bytes() -> None:
    p = Point([1.5, -2.25, 0.1])
    expected = hashlib.sha1(struct.pack(">ddd", 1.5, -2.25, 0.1)).digest()
    assert hash_point(p) == expected
    assert len(hash_point(p)) == 20


def test_hash_point_ignores_value_and_storage_identity() -> None:
    a = Point(np.array([0.3, 4.0]), 1.0)
    b = Point([0.3, 4.0], 99.0)
    assert a.pos is not b.pos
    assert hash_point(a) == hash_point(b)
    assert hash_point(a) != hash_point(Point([4.0, 0.3]))


def test_copy_is_independent() -> None:
    a = Point([1.0, 2.0], 3.0)
    b = a.copy()
    b.pos[0] = 10.0
    assert a.pos[0] == 1.0
    assert b.val == 3.0
