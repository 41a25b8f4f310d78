#!/usr/bin/env python3
"""
Solver Comparison Benchmark: Greedy vs Backtrack vs Hungarian

Runs every solver, plus the SciPy and LAP references, on generated weight
matrices. Checks agreement, times each run, and records everything with
BenchmarkLogger.
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Any, Dict, Sequence

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Set thread limits for fair and consistent comparison
os.environ.setdefault("OMP_NUM_THREADS", "1")
os.environ.setdefault("MKL_NUM_THREADS", "1")
os.environ.setdefault("OPENBLAS_NUM_THREADS", "1")
os.environ.setdefault("PYTHONHASHSEED", "0")

import numpy as np

from matrixmatch import (
    WEIGHT_FAMILIES,
    BacktrackSolver,
    BenchmarkLogger,
    GreedySolver,
    HungarianSolver,
    LAPSolver,
    SciPySolver,
    check_selection,
    generate_weight_matrix,
    time_solver,
)
from matrixmatch.verification import BACKTRACK_LIMIT


def benchmark_matrix(dataset: str, family: str, matrix, num_repeats: int,
                     logger: BenchmarkLogger) -> Dict[str, Dict[str, Any]]:
    """Benchmark all solvers on a single matrix."""

    print(f"\n=== {dataset} ({matrix.height}x{matrix.width}) ===")

    solvers = [GreedySolver(), HungarianSolver(), SciPySolver(), LAPSolver()]
    if min(matrix.shape) <= BACKTRACK_LIMIT:
        solvers.append(BacktrackSolver())

    results: Dict[str, Dict[str, Any]] = {}
    for solver in solvers:
        timing = time_solver(solver, matrix, num_warmups=1, num_repeats=num_repeats)
        if not timing['success']:
            print(f"  {solver.name:10} FAILED: {timing['error']}")
            results[solver.name] = {'status': 'error', 'notes': timing['error']}
            continue

        solution = timing['solution']
        check_selection(solution, matrix)
        results[solver.name] = {
            'time': timing['median'],
            'total': solution.total,
            'selected': len(solution),
            'status': 'success',
            'notes': ", ".join(f"{k}={v}" for k, v in solution.stats.items()),
        }
        print(f"  {solver.name:10} total={solution.total:8d}  {timing['median'] * 1000:9.3f} ms")

    logger.log_comparison(dataset, matrix.height, matrix.width, family, results)

    exact = {r['total'] for name, r in results.items() if name != 'Greedy' and r['status'] == 'success'}
    if len(exact) > 1:
        print(f"  ❌ exact solvers disagree: {sorted(exact)}")
    else:
        print("  ✅ exact solvers agree")
    return results


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--sizes", type=int, nargs="+", default=[3, 5, 7, 20])
    parser.add_argument("--families", nargs="+", choices=sorted(WEIGHT_FAMILIES),
                        default=["uniform", "tie", "greedy_trap"])
    parser.add_argument("--instances", type=int, default=2, help="Instances per family and size")
    parser.add_argument("--extra-cols", type=int, default=0, help="Width = size + extra-cols (random families)")
    parser.add_argument("--repeats", type=int, default=5)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--log-dir", type=str, default="logs")
    parser.add_argument("--name", type=str, default="compare_solvers")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    rng = np.random.default_rng(args.seed)
    logger = BenchmarkLogger(log_dir=args.log_dir, experiment_name=args.name)

    disagreements = 0
    for family in args.families:
        for size in args.sizes:
            width = size + args.extra_cols if family in ("uniform", "tie", "negative") else size
            for idx in range(args.instances):
                matrix = generate_weight_matrix(family, size, width, rng)
                results = benchmark_matrix(f"{family}_{size}x{width}_{idx}", family, matrix,
                                           args.repeats, logger)
                exact = {r['total'] for name, r in results.items()
                         if name != 'Greedy' and r['status'] == 'success'}
                disagreements += len(exact) > 1

    logger.save_experiment()
    print("\n" + logger.generate_summary())
    print(f"\nLogs written to {logger.log_dir} (experiment {logger.experiment_id})")
    return 1 if disagreements else 0


if __name__ == "__main__":
    sys.exit(main())
