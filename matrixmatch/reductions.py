"""
Reduction Passes Module

Stateless transforms applied by the Hungarian solver to its private cost
array. Each pass returns a new array and leaves its input untouched.
"""

import numpy as np

from .cover import CoverState


def negate(C: np.ndarray) -> np.ndarray:
    """Turn a maximum-weight problem into a minimum-cost one."""
    return -np.asarray(C)


def shift_nonnegative(C: np.ndarray) -> np.ndarray:
    """
    Subtract the global minimum when it is negative so every entry is >= 0.
    A uniform shift changes every full assignment by the same amount.
    """
    C = np.asarray(C)
    m = C.min()
    if m < 0:
        return C - m
    return C.copy()


def pad_to_square(C: np.ndarray, fill: int = 0) -> np.ndarray:
    """
    Append constant rows until the array is square. Expects height <= width.

    Dummy rows add the same total to every assignment, so the optimal
    selection over the real rows is unchanged.
    """
    C = np.asarray(C)
    h, w = C.shape
    if h > w:
        raise ValueError(f"pad_to_square expects height <= width, got {C.shape}")
    if h == w:
        return C.copy()
    out = np.full((w, w), fill, dtype=C.dtype)
    out[:h, :] = C
    return out


def subtract_row_minima(C: np.ndarray) -> np.ndarray:
    """Expose at least one zero per row."""
    C = np.asarray(C)
    return C - C.min(axis=1, keepdims=True)


def subtract_column_minima(C: np.ndarray) -> np.ndarray:
    """Expose at least one zero per column."""
    C = np.asarray(C)
    return C - C.min(axis=0, keepdims=True)


def adjust_uncovered(C: np.ndarray, cover: CoverState) -> np.ndarray:
    """
    Subtract the minimum uncovered value from every uncovered cell and add
    it to every doubly covered cell. Singly covered cells are unchanged.

    Raises:
        ValueError: if the cover leaves no cell uncovered
    """
    C = np.asarray(C)
    uncovered = cover.uncovered_mask()
    if not uncovered.any():
        raise ValueError("Cover leaves no uncovered cell to adjust")
    delta = C[uncovered].min()
    out = C.copy()
    out[uncovered] -= delta
    out[cover.doubly_covered_mask()] += delta
    return out
