"""
Backtrack Solver Module

Exhaustive depth-first search over row -> column assignments.
Always optimal; worst case O(H! * W) when W >= H.
"""

from typing import List, Optional

from .matrix import Matrix, as_matrix
from .solution import Solution


class _Search:
    """Scratch state for one solve call."""

    def __init__(self, values: List[List[int]], height: int, width: int):
        self.values = values
        self.height = height
        self.width = width
        self.used_cols = [False] * width
        self.free_count = width
        self.chosen: List[Optional[int]] = [None] * height
        self.best_total: Optional[int] = None
        self.best_chosen: List[Optional[int]] = []
        self.leaves = 0

    def explore(self, row: int, running: int) -> None:
        if row == self.height:
            self.leaves += 1
            if self.best_total is None or running > self.best_total:
                self.best_total = running
                self.best_chosen = list(self.chosen)
            return

        for col in range(self.width):
            if self.used_cols[col]:
                continue
            self.used_cols[col] = True
            self.free_count -= 1
            self.chosen[row] = col
            self.explore(row + 1, running + self.values[row][col])
            self.used_cols[col] = False
            self.free_count += 1
            self.chosen[row] = None

        # More rows left than free columns: this row may stay unassigned.
        if self.height - row > self.free_count:
            self.explore(row + 1, running)


class BacktrackSolver:
    """Exhaustive search; the reference for optimality."""

    def __init__(self):
        self.name = "Backtrack"

    def solve(self, matrix: Matrix) -> Solution:
        """
        Solve the assignment by trying every row/column-exclusive selection.

        Every leaf of the search selects exactly min(H, W) cells. On an H x H
        matrix exactly H! leaves are visited; the count is reported in
        ``stats["leaves_explored"]``.

        Args:
            matrix: Weight matrix (Matrix or 2-D array-like)

        Returns:
            Solution with the maximum total
        """
        matrix = as_matrix(matrix)
        search = _Search(matrix.tolist(), matrix.height, matrix.width)
        search.explore(0, 0)

        pairs = [(row, col) for row, col in enumerate(search.best_chosen) if col is not None]
        return Solution.from_pairs(
            matrix, pairs, solver=self.name, stats={"leaves_explored": search.leaves}
        )

    def __call__(self, matrix: Matrix) -> Solution:
        """Allow using solver as callable."""
        return self.solve(matrix)


def solve_backtrack(matrix: Matrix) -> Solution:
    return BacktrackSolver().solve(matrix)
