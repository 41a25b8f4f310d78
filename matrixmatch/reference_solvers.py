"""
Reference Solvers Module

Max-weight wrappers around SciPy's linear_sum_assignment and LAP's lapjv.
Used as independent oracles when verifying and benchmarking the in-house
solvers.
"""

import numpy as np
import scipy.optimize
import lap

from .matrix import Matrix, as_matrix
from .solution import Solution


class SciPySolver:
    """Wrapper for SciPy's linear_sum_assignment in maximise mode."""

    def __init__(self):
        self.name = "SciPy"

    def solve(self, matrix: Matrix) -> Solution:
        """
        Solve the max-weight assignment using SciPy.

        Args:
            matrix: Weight matrix

        Returns:
            Solution with min(H, W) elements
        """
        matrix = as_matrix(matrix)
        W = matrix.to_numpy()
        rows, cols = scipy.optimize.linear_sum_assignment(W, maximize=True)
        return Solution.from_pairs(matrix, zip(rows, cols), solver=self.name)

    def __call__(self, matrix: Matrix) -> Solution:
        """Allow using solver as callable."""
        return self.solve(matrix)


class LAPSolver:
    """Wrapper for LAP's lapjv on negated weights."""

    def __init__(self):
        self.name = "LAP"

    def solve(self, matrix: Matrix) -> Solution:
        """
        Solve the max-weight assignment using lapjv.

        Rectangular inputs go through lapjv's `extend_cost` padding.

        Args:
            matrix: Weight matrix

        Returns:
            Solution with min(H, W) elements
        """
        matrix = as_matrix(matrix)
        C = -matrix.to_numpy().astype(np.float64)
        _, x, _ = lap.lapjv(C, extend_cost=matrix.height != matrix.width)

        x = np.asarray(x, dtype=np.int64)
        pairs = [(i, int(x[i])) for i in range(matrix.height) if x[i] >= 0]
        return Solution.from_pairs(matrix, pairs, solver=self.name)

    def __call__(self, matrix: Matrix) -> Solution:
        """Allow using solver as callable."""
        return self.solve(matrix)
