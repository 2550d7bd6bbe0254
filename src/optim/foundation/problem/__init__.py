from .bench import (
    Ackley,
    BenchFunction,
    CrossTray,
    Eggholder,
    HolderTable,
    Sphere,
    available_benchmarks,
    get_benchmark,
)

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
