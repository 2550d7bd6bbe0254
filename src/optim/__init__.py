from .engine.algorithm.pswarm import (
    Particle,
    Population,
    SimpleMover,
    SwarmIterator,
    new_population,
    uniform_points,
)
from .foundation.core.optimize import OptimizationResult, bench, solve
from .foundation.eval.backends import CachingEvaluator, SerialEvaluator, resolve_evaluator
from .foundation.mesh import (
    BoundedMesh,
    ConstrainedMesh,
    InfiniteMesh,
    IntegerMesh,
    nearest,
)
from .foundation.objective import LoggedObjective
from .foundation.point import Point, hash_point

__all__ = [
    "Point",
    "hash_point",
    "LoggedObjective",
    "SerialEvaluator",
    "CachingEvaluator",
    "resolve_evaluator",
    "InfiniteMesh",
    "BoundedMesh",
    "ConstrainedMesh",
    "IntegerMesh",
    "nearest",
    "Particle",
    "Population",
    "SimpleMover",
    "SwarmIterator",
    "new_population",
    "uniform_points",
    "solve",
    "bench",
    "OptimizationResult",
]
