"""
Hungarian Solver Module

Cost reduction, exact zero covering and adjustment for the maximum-weight
assignment problem.

Pipeline on a private copy of the weights:
    negate -> shift nonnegative -> orient/pad square -> row reduction
    -> column reduction -> fixpoint loop (cover + adjust) -> extraction

The cover step uses a minimum vertex cover of the zero graph (König), so
every pass either grows the zero matching or widens the set of columns
reachable by alternating paths. The loop therefore ends after at most
min(H, W) matching growths.
"""

from typing import Optional

import numpy as np

from .cover import (
    augment_zero_matching,
    matching_size,
    maximum_zero_matching,
    minimum_zero_cover,
)
from .errors import ExtractionFailureError, NonConvergenceError
from .matrix import Matrix, as_matrix
from .reductions import (
    adjust_uncovered,
    negate,
    pad_to_square,
    shift_nonnegative,
    subtract_column_minima,
    subtract_row_minima,
)
from .solution import Solution


class HungarianSolver:
    """Polynomial exact solver.

    Args:
        max_iterations: Bound on matching growths in the fixpoint loop.
            Defaults to min(H, W) of each input.
    """

    def __init__(self, max_iterations: Optional[int] = None):
        self.name = "Hungarian"
        if max_iterations is not None and max_iterations < 0:
            raise ValueError(f"max_iterations must be >= 0, got {max_iterations}")
        self.max_iterations = max_iterations

    def solve(self, matrix: Matrix) -> Solution:
        """
        Solve the assignment exactly.

        Args:
            matrix: Weight matrix (Matrix or 2-D array-like); never mutated

        Returns:
            Solution with min(H, W) elements and the maximum total.
            ``stats`` holds ``iterations`` (matching growths) and
            ``adjustments`` (cover/adjust passes).

        Raises:
            NonConvergenceError: fixpoint loop exceeded its bound
            ExtractionFailureError: fewer than min(H, W) zeros could be matched
        """
        matrix = as_matrix(matrix)
        height, width = matrix.shape
        limit = min(height, width) if self.max_iterations is None else self.max_iterations

        C = matrix.to_numpy()
        transposed = height > width
        if transposed:
            C = np.ascontiguousarray(C.T)
        real_rows, real_cols = C.shape

        C = negate(C)
        C = shift_nonnegative(C)
        C = pad_to_square(C)
        C = subtract_row_minima(C)
        C = subtract_column_minima(C)

        C, row_match, stats = self._converge(C, limit)

        pairs = []
        for r in range(real_rows):
            c = int(row_match[r])
            if c < 0 or c >= real_cols:
                continue
            pairs.append((c, r) if transposed else (r, c))

        expected = min(height, width)
        if len(pairs) < expected:
            raise ExtractionFailureError(
                f"Matched {len(pairs)} zeros, expected {expected} for a {height}x{width} matrix"
            )

        pairs.sort()
        return Solution.from_pairs(matrix, pairs, solver=self.name, stats=stats)

    def _converge(self, C: np.ndarray, limit: int):
        """Run cover/adjust passes until the zero matching is perfect."""
        n = C.shape[0]
        zeros = C == 0
        row_match, col_match = maximum_zero_matching(zeros)

        iterations = 0
        adjustments = 0
        while matching_size(row_match) < n:
            if iterations >= limit:
                raise NonConvergenceError(
                    f"No optimal zero assignment after {iterations} iterations "
                    f"(matched {matching_size(row_match)}/{n})"
                )
            iterations += 1
            before = matching_size(row_match)

            # Each adjustment adds a reachable column, so n passes always suffice.
            for _ in range(n):
                cover = minimum_zero_cover(zeros, row_match, col_match)
                C = adjust_uncovered(C, cover)
                adjustments += 1
                zeros = C == 0
                if augment_zero_matching(zeros, row_match, col_match) > before:
                    break
            else:
                raise NonConvergenceError(
                    f"Zero matching did not grow after {n} adjustments in iteration {iterations}"
                )

        return C, row_match, {"iterations": iterations, "adjustments": adjustments}

    def __call__(self, matrix: Matrix) -> Solution:
        """Allow using solver as callable."""
        return self.solve(matrix)


def solve_hungarian(matrix: Matrix) -> Solution:
    return HungarianSolver().solve(matrix)
