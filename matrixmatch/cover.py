"""
Zero Cover Module

Matching and covering on the bipartite graph of zero cells.

A maximum matching is grown from the row-major "first free zero" scan with
breadth-first augmenting paths. König's theorem then turns the maximum
matching into a minimum vertex cover: rows not reachable from an unmatched
row by an alternating path, plus the reachable columns.
"""

from collections import deque
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np


UNMATCHED = -1


@dataclass
class CoverState:
    """Covered rows and columns of one cover computation."""

    covered_rows: np.ndarray
    covered_cols: np.ndarray

    @classmethod
    def empty(cls, n_rows: int, n_cols: int) -> "CoverState":
        return cls(np.zeros(n_rows, dtype=bool), np.zeros(n_cols, dtype=bool))

    @property
    def line_count(self) -> int:
        return int(self.covered_rows.sum() + self.covered_cols.sum())

    def is_covered(self, row: int, col: int) -> bool:
        return bool(self.covered_rows[row] or self.covered_cols[col])

    def uncovered_mask(self) -> np.ndarray:
        return ~self.covered_rows[:, None] & ~self.covered_cols[None, :]

    def doubly_covered_mask(self) -> np.ndarray:
        return self.covered_rows[:, None] & self.covered_cols[None, :]


def matching_size(row_match: np.ndarray) -> int:
    return int(np.count_nonzero(row_match != UNMATCHED))


def greedy_zero_matching(zeros: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Scan rows in order; each takes its first zero in a column not yet claimed."""
    zeros = np.asarray(zeros, dtype=bool)
    n_rows, n_cols = zeros.shape
    row_match = np.full(n_rows, UNMATCHED, dtype=np.int64)
    col_match = np.full(n_cols, UNMATCHED, dtype=np.int64)
    for r in range(n_rows):
        free = np.flatnonzero(zeros[r] & (col_match == UNMATCHED))
        if free.size:
            c = int(free[0])
            row_match[r] = c
            col_match[c] = r
    return row_match, col_match


def _augment_from(zeros: np.ndarray, root: int,
                  row_match: np.ndarray, col_match: np.ndarray) -> bool:
    """BFS for an augmenting path starting at unmatched row `root`; flip it if found."""
    n_cols = zeros.shape[1]
    visited = np.zeros(n_cols, dtype=bool)
    parent_row = np.full(n_cols, UNMATCHED, dtype=np.int64)
    queue = deque([root])

    while queue:
        r = queue.popleft()
        for c in np.flatnonzero(zeros[r] & ~visited):
            c = int(c)
            visited[c] = True
            parent_row[c] = r
            if col_match[c] == UNMATCHED:
                # Flip the path back to the root.
                while c != UNMATCHED:
                    r = int(parent_row[c])
                    previous = int(row_match[r])
                    row_match[r] = c
                    col_match[c] = r
                    c = previous
                return True
            queue.append(int(col_match[c]))
    return False


def augment_zero_matching(zeros: np.ndarray, row_match: np.ndarray,
                          col_match: np.ndarray) -> int:
    """
    Grow a valid zero matching to maximum size in place.

    Every existing matched pair must still lie on a zero cell.

    Returns:
        Size of the maximum matching
    """
    zeros = np.asarray(zeros, dtype=bool)
    for r in np.flatnonzero(row_match == UNMATCHED):
        _augment_from(zeros, int(r), row_match, col_match)
    return matching_size(row_match)


def maximum_zero_matching(zeros: np.ndarray,
                          row_match: Optional[np.ndarray] = None,
                          col_match: Optional[np.ndarray] = None) -> Tuple[np.ndarray, np.ndarray]:
    """
    Maximum matching of the zero graph.

    Without a starting matching, the greedy row-major scan seeds it.

    Returns:
        row_match, col_match: matched column per row / row per column, -1 if free
    """
    zeros = np.asarray(zeros, dtype=bool)
    if row_match is None or col_match is None:
        row_match, col_match = greedy_zero_matching(zeros)
    augment_zero_matching(zeros, row_match, col_match)
    return row_match, col_match


def minimum_zero_cover(zeros: np.ndarray, row_match: np.ndarray,
                       col_match: np.ndarray) -> CoverState:
    """
    Minimum set of lines covering every zero, from a maximum matching.

    The cover has exactly as many lines as the matching has pairs, and every
    matched zero is covered by exactly one line.

    Raises:
        ValueError: if the matching is not maximum (an augmenting path exists)
    """
    zeros = np.asarray(zeros, dtype=bool)
    n_rows, n_cols = zeros.shape
    reach_rows = row_match == UNMATCHED
    reach_cols = np.zeros(n_cols, dtype=bool)
    queue = deque(int(r) for r in np.flatnonzero(reach_rows))

    while queue:
        r = queue.popleft()
        for c in np.flatnonzero(zeros[r] & ~reach_cols):
            reach_cols[c] = True
            owner = int(col_match[c])
            if owner == UNMATCHED:
                raise ValueError("Zero matching is not maximum; augmenting path exists")
            if not reach_rows[owner]:
                reach_rows[owner] = True
                queue.append(owner)

    return CoverState(covered_rows=~reach_rows, covered_cols=reach_cols)
