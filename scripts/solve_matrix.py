#!/usr/bin/env python3
"""Solve the maximum-weight assignment for a ';'-separated matrix file."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from matrixmatch import SOLVERS, MatrixMatchError, format_matrix, load_matrix
from matrixmatch.timing import time_solver


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path", type=Path, help="Matrix file, one row per line, cells separated by ';'")
    parser.add_argument("--solver", choices=sorted(SOLVERS) + ["all"], default="hungarian")
    parser.add_argument("--max-iterations", type=int, help="Hungarian fixpoint bound (default min(H, W))")
    parser.add_argument("--repeats", type=int, default=1, help="Timed runs per solver")
    parser.add_argument("--quiet", action="store_true", help="Do not print the matrix")
    return parser


def _make_solver(name: str, args: argparse.Namespace):
    if name == "hungarian":
        return SOLVERS[name](max_iterations=args.max_iterations)
    return SOLVERS[name]()


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        matrix = load_matrix(args.path)
    except (OSError, ValueError, MatrixMatchError) as e:
        print(f"ERROR: cannot load '{args.path}': {e}", file=sys.stderr)
        return 1

    print(f"Matrix {matrix.height}x{matrix.width} from {args.path}")
    if not args.quiet:
        print(format_matrix(matrix))

    names = sorted(SOLVERS) if args.solver == "all" else [args.solver]
    status = 0
    for name in names:
        solver = _make_solver(name, args)
        timing = time_solver(solver, matrix, num_warmups=0, num_repeats=args.repeats)
        if not timing['success']:
            print(f"\n{solver.name}: FAILED ({timing['error']})")
            status = 1
            continue

        solution = timing['solution']
        print(f"\n{solver.name}: total={solution.total} ({timing['median'] * 1000:.3f} ms)")
        for element in solution.selection:
            print(f"  row {element.row:3d}  col {element.col:3d}  value {element.value}")
        if solution.stats:
            print("  " + ", ".join(f"{k}={v}" for k, v in solution.stats.items()))

    return status


if __name__ == "__main__":
    sys.exit(main())
