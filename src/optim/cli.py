from __future__ import annotations

import argparse
import logging
from typing import Any, Dict

from optim.engine.algorithm.factory import build_mesh, build_swarm
from optim.engine.config import SwarmConfig, load_config
from optim.foundation.core.optimize import bench
from optim.foundation.exceptions import OptimError
from optim.foundation.logging import configure_optim_logging
from optim.foundation.problem.bench import available_benchmarks, get_benchmark
from optim.foundation.version import get_version


def _parse_positive_float(parser, flag: str, raw, *, allow_zero: bool):
    if raw is None:
        return None
    value = float(raw)
    if allow_zero:
        if value < 0.0:
            parser.error(f"{flag} must be non-negative.")
    else:
        if value <= 0.0:
            parser.error(f"{flag} must be positive.")
    return value


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the particle swarm against a benchmark function.")
    parser.add_argument("benchmark", nargs="?", help="Benchmark function name (see list with --list).")
    parser.add_argument("--list", action="store_true", help="List available benchmark functions.")
    parser.add_argument("--config", help="JSON/YAML with swarm settings (pop_size, cognition, social, ...).")
    parser.add_argument("--pop-size", type=int, help="Number of particles.")
    parser.add_argument("--max-evals", type=int, default=10000, help="Evaluation budget (default: 10000).")
    parser.add_argument("--tol", type=float, default=1e-4, help="Relative error tolerance against the known optimum.")
    parser.add_argument("--step", help="Mesh step size; 0 searches continuous space.")
    parser.add_argument("--seed", type=int, help="Random seed.")
    parser.add_argument("--cache", action="store_true", help="Memoize objective evaluations.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every iteration.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {get_version()}")
    return parser


def _collect_overrides(parser, args) -> Dict[str, Any]:
    overrides: Dict[str, Any] = load_config(args.config) if args.config else {}
    if args.pop_size is not None:
        if args.pop_size < 1:
            parser.error("--pop-size must be at least 1.")
        overrides["pop_size"] = args.pop_size
    step = _parse_positive_float(parser, "--step", args.step, allow_zero=True)
    if step is not None:
        overrides["step"] = step
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.cache:
        overrides["cache"] = True
    return overrides


def main(argv: list[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.list or not args.benchmark:
        print("Available benchmarks:", ", ".join(available_benchmarks()))
        return 0

    configure_optim_logging(level=logging.DEBUG if args.verbose else logging.INFO)
    tol = _parse_positive_float(parser, "--tol", args.tol, allow_zero=False)

    try:
        fn = get_benchmark(args.benchmark)
        cfg = SwarmConfig().update(_collect_overrides(parser, args)).fixed()
        lower, upper = fn.bounds()
        iterator = build_swarm(cfg, lower, upper)
        result = bench(iterator, fn, tol, args.max_evals, mesh=build_mesh(cfg, lower, upper))
    except (OptimError, FileNotFoundError) as exc:
        parser.exit(2, f"error: {exc}\n")

    status = "converged" if result.converged else "budget exhausted"
    print(f"[optim] {fn.name}: {status} after {result.n_eval} evaluations ({result.iterations} iterations)")
    print(f"[optim] best value: {result.best.val:.10g}")
    print(f"[optim] best point: {' '.join(f'{x:.10g}' for x in result.best.pos)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
