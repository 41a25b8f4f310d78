"""
Greedy Solver Module

Row-by-row local maximisation. Fast, deterministic, not guaranteed optimal.
"""

import numpy as np

from .matrix import Matrix, as_matrix
from .solution import Solution


class GreedySolver:
    """Pick the largest free cell of each row, top to bottom."""

    def __init__(self):
        self.name = "Greedy"

    def solve(self, matrix: Matrix) -> Solution:
        """
        Solve the assignment greedily.

        Rows are visited in index order; each takes the maximum value among
        columns not used by an earlier row (lowest column wins ties). A choice
        is never revisited, so the total can fall short of the optimum.

        Args:
            matrix: Weight matrix (Matrix or 2-D array-like)

        Returns:
            Solution with one element per row that found a free column
        """
        matrix = as_matrix(matrix)
        values = matrix.to_numpy()
        free_cols = np.ones(matrix.width, dtype=bool)

        pairs = []
        for row in range(matrix.height):
            candidates = np.flatnonzero(free_cols)
            if candidates.size == 0:
                break
            # argmax returns the first maximum, i.e. the lowest free column
            col = int(candidates[np.argmax(values[row, candidates])])
            free_cols[col] = False
            pairs.append((row, col))

        return Solution.from_pairs(matrix, pairs, solver=self.name)

    def __call__(self, matrix: Matrix) -> Solution:
        """Allow using solver as callable."""
        return self.solve(matrix)


def solve_greedy(matrix: Matrix) -> Solution:
    return GreedySolver().solve(matrix)
