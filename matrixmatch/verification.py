"""
Verification Module

Correctness checks for solver output and cross-solver agreement.
"""

from typing import Dict, Optional

from .backtrack_solver import BacktrackSolver
from .greedy_solver import GreedySolver
from .hungarian_solver import HungarianSolver
from .matrix import Matrix, as_matrix
from .reference_solvers import LAPSolver, SciPySolver
from .solution import Solution


# Largest min(H, W) for which the exhaustive search is run by default.
BACKTRACK_LIMIT = 7


def check_selection(solution: Solution, matrix: Matrix) -> bool:
    """
    Assert that a solution is a valid selection on `matrix`:
      - rows pairwise distinct, columns pairwise distinct
      - at most min(H, W) elements
      - each value equals the matrix cell, and the total is their sum
    """
    matrix = as_matrix(matrix)
    rows = [e.row for e in solution.selection]
    cols = [e.col for e in solution.selection]
    if len(set(rows)) != len(rows):
        raise AssertionError(f"{solution.solver}: row selected twice in {rows}")
    if len(set(cols)) != len(cols):
        raise AssertionError(f"{solution.solver}: column selected twice in {cols}")
    limit = min(matrix.width, matrix.height)
    if len(solution.selection) > limit:
        raise AssertionError(
            f"{solution.solver}: {len(solution.selection)} elements selected, at most {limit} allowed"
        )
    for e in solution.selection:
        actual = matrix.get(e.row, e.col)
        if actual != e.value:
            raise AssertionError(
                f"{solution.solver}: cell ({e.row}, {e.col}) holds {actual}, selection says {e.value}"
            )
    value_sum = sum(e.value for e in solution.selection)
    if value_sum != solution.total:
        raise AssertionError(f"{solution.solver}: total {solution.total} != sum of values {value_sum}")
    return True


def solve_all(matrix: Matrix, include_backtrack: Optional[bool] = None) -> Dict[str, Solution]:
    """Run every solver on `matrix` and return their solutions keyed by name."""
    matrix = as_matrix(matrix)
    if include_backtrack is None:
        include_backtrack = min(matrix.width, matrix.height) <= BACKTRACK_LIMIT

    solvers = [GreedySolver(), HungarianSolver(), SciPySolver(), LAPSolver()]
    if include_backtrack:
        solvers.append(BacktrackSolver())

    return {solver.name: solver.solve(matrix) for solver in solvers}


def verify_solver_correctness(matrix: Matrix, tolerance: int = 0,
                              include_backtrack: Optional[bool] = None) -> bool:
    """
    Verify that all exact solvers reach the same optimum and greedy does not exceed it.

    Args:
        matrix: Weight matrix
        tolerance: Allowed spread between exact totals
        include_backtrack: Run the exhaustive search too (default: small matrices only)

    Returns:
        True if every selection is valid and the exact solvers agree
    """
    solutions = solve_all(matrix, include_backtrack=include_backtrack)
    for solution in solutions.values():
        check_selection(solution, matrix)

    exact = [s.total for name, s in solutions.items() if name != "Greedy"]
    if max(exact) - min(exact) > tolerance:
        return False
    return solutions["Greedy"].total <= max(exact)
