"""
Benchmark objective functions with known optima.

See https://en.wikipedia.org/wiki/Test_functions_for_optimization. Each
function is callable on a coordinate vector and reports its search bounds and
known optima.
"""

from __future__ import annotations

import math
from typing import Callable

import numpy as np

from optim.foundation.exceptions import ConfigurationError
from optim.foundation.point import Point


class BenchFunction:
    name: str = ""
    lower: tuple[float, ...] = ()
    upper: tuple[float, ...] = ()
    optimum: list[tuple[tuple[float, ...], float]] = []

    def __call__(self, x: np.ndarray) -> float:
        raise NotImplementedError

    def bounds(self) -> tuple[np.ndarray, np.ndarray]:
        return np.array(self.lower, dtype=float), np.array(self.upper, dtype=float)

    def optima(self) -> list[Point]:
        return [Point(pos, val) for pos, val in self.optimum]


class Ackley(BenchFunction):
    """Minimum f(0, 0) = 0 within -5 <= x, y <= 5."""

    name = "ackley"
    lower = (-5.0, -5.0)
    upper = (5.0, 5.0)
    optimum = [((0.0, 0.0), 0.0)]

    def __call__(self, x: np.ndarray) -> float:
        a, b = float(x[0]), float(x[1])
        return (
            -20.0 * math.exp(-0.2 * math.sqrt(0.5 * (a * a + b * b)))
            - math.exp(0.5 * (math.cos(2 * math.pi * a) + math.cos(2 * math.pi * b)))
            + 20.0
            + math.e
        )


class CrossTray(BenchFunction):
    name = "crosstray"
    lower = (-10.0, -10.0)
    upper = (10.0, 10.0)
    optimum = [
        ((1.34941, -1.34941), -2.06261),
        ((1.34941, 1.34941), -2.06261),
        ((-1.34941, 1.34941), -2.06261),
        ((-1.34941, -1.34941), -2.06261),
    ]

    def __call__(self, x: np.ndarray) -> float:
        a, b = float(x[0]), float(x[1])
        inner = abs(math.sin(a) * math.sin(b) * math.exp(abs(100.0 - math.sqrt(a * a + b * b) / math.pi)))
        return -0.0001 * (inner + 1.0) ** 0.1


class Eggholder(BenchFunction):
    name = "eggholder"
    lower = (-512.0, -512.0)
    upper = (512.0, 512.0)
    optimum = [((512.0, 404.2319), -959.6407)]

    def __call__(self, x: np.ndarray) -> float:
        a, b = float(x[0]), float(x[1])
        return -(b + 47.0) * math.sin(math.sqrt(abs(b + a / 2.0 + 47.0))) - a * math.sin(
            math.sqrt(abs(a - (b + 47.0)))
        )


class HolderTable(BenchFunction):
    name = "holdertable"
    lower = (-10.0, -10.0)
    upper = (10.0, 10.0)
    optimum = [
        ((8.05502, 9.66459), -19.2085),
        ((-8.05502, 9.66459), -19.2085),
        ((8.05502, -9.66459), -19.2085),
        ((-8.05502, -9.66459), -19.2085),
    ]

    def __call__(self, x: np.ndarray) -> float:
        a, b = float(x[0]), float(x[1])
        return -abs(math.sin(a) * math.cos(b) * math.exp(abs(1.0 - math.sqrt(a * a + b * b) / math.pi)))


class Sphere(BenchFunction):
    """Sum of squares; minimum 0 at the origin."""

    name = "sphere"
    lower = (-5.0, -5.0)
    upper = (5.0, 5.0)
    optimum = [((0.0, 0.0), 0.0)]

    def __call__(self, x: np.ndarray) -> float:
        x = np.asarray(x, dtype=float)
        return float(np.dot(x, x))


_BENCHMARKS: dict[str, Callable[[], BenchFunction]] = {
    cls.name: cls for cls in (Ackley, CrossTray, Eggholder, HolderTable, Sphere)
}


def available_benchmarks() -> list[str]:
    return sorted(_BENCHMARKS)


def get_benchmark(name: str) -> BenchFunction:
    key = (name or "").lower()
    if key not in _BENCHMARKS:
        raise ConfigurationError(
            f"Unknown benchmark '{name}'.",
            suggestion=f"Available benchmarks: {', '.join(available_benchmarks())}",
        )
    return _BENCHMARKS[key]()


__all__ = [
    "BenchFunction",
    "Ackley",
    "CrossTray",
    "Eggholder",
    "HolderTable",
    "Sphere",
    "available_benchmarks",
    "get_benchmark",
]
