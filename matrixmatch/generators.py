"""
Problem Generators Module

Integer weight matrix generators for testing and benchmarking the solvers.
Includes random, structured, and adversarial problem types.
"""

from typing import Callable, Dict, Optional

import numpy as np

from .matrix import Matrix


def generate_uniform_weights(height: int, width: Optional[int] = None,
                             low: int = 0, high: int = 100, seed: int = 42) -> Matrix:
    """
    Generate a matrix with uniform integer weights in [low, high).

    Args:
        height: Number of rows
        width: Number of columns (defaults to height)
        low, high: Weight range
        seed: Random seed for reproducibility
    """
    width = height if width is None else width
    rng = np.random.default_rng(seed)
    return Matrix.from_rows(rng.integers(low, high, size=(height, width)))


def generate_diagonal_weights(n: int, dominant: int = 9, background: int = 1) -> Matrix:
    """Dominant diagonal; the optimum is the identity and greedy finds it."""
    W = np.full((n, n), background, dtype=np.int64)
    np.fill_diagonal(W, dominant)
    return Matrix.from_rows(W)


def generate_greedy_trap_weights(n: int) -> Matrix:
    """
    W[i, j] = n*n + 1 - (i+1)(j+1).

    Greedy takes the top-left corner first and ends on the diagonal, while
    the optimum is the anti-diagonal.
    """
    idx = np.arange(1, n + 1)
    return Matrix.from_rows(n * n + 1 - np.outer(idx, idx))


def generate_anti_diagonal_weights(n: int) -> Matrix:
    """Anti-diagonal structure; the anti-diagonal cells carry the smallest weights."""
    W = np.ones((n, n), dtype=np.int64)
    for i in range(n):
        for j in range(n):
            W[i, j] = abs(i - (n - 1 - j)) + 1
    return Matrix.from_rows(W)


def generate_identity_like_weights(n: int, diagonal: int = 1, off_diagonal: int = 0) -> Matrix:
    """Identity-like weight matrix (optimal assignment is identity)."""
    W = np.full((n, n), off_diagonal, dtype=np.int64)
    np.fill_diagonal(W, diagonal)
    return Matrix.from_rows(W)


def generate_tie_weights(height: int, width: Optional[int] = None,
                         levels: int = 3, seed: int = 42) -> Matrix:
    """
    Few distinct weight levels. Reductions leave many zeros in shared rows
    and columns, which stresses the cover step.
    """
    width = height if width is None else width
    rng = np.random.default_rng(seed)
    return Matrix.from_rows(rng.integers(0, max(1, levels), size=(height, width)))


def generate_negative_weights(height: int, width: Optional[int] = None,
                              low: int = -100, high: int = 0, seed: int = 42) -> Matrix:
    """All-negative weights."""
    return generate_uniform_weights(height, width, low=low, high=high, seed=seed)


WeightGenerator = Callable[[int, int, np.random.Generator], Matrix]


def _seeded(base_func: Callable[..., Matrix]) -> WeightGenerator:
    def _runner(height: int, width: int, rng: np.random.Generator) -> Matrix:
        seed = int(rng.integers(0, np.iinfo(np.uint32).max))
        return base_func(height, width, seed=seed)

    return _runner


def _square(base_func: Callable[[int], Matrix]) -> WeightGenerator:
    def _runner(height: int, width: int, rng: np.random.Generator) -> Matrix:
        if height != width:
            raise ValueError(f"{base_func.__name__} needs a square size, got {height}x{width}")
        return base_func(height)

    return _runner


WEIGHT_FAMILIES: Dict[str, WeightGenerator] = {
    "uniform": _seeded(generate_uniform_weights),
    "tie": _seeded(generate_tie_weights),
    "negative": _seeded(generate_negative_weights),
    "diagonal": _square(generate_diagonal_weights),
    "greedy_trap": _square(generate_greedy_trap_weights),
    "anti_diagonal": _square(generate_anti_diagonal_weights),
    "identity_like": _square(generate_identity_like_weights),
}


def generate_weight_matrix(family: str, height: int, width: Optional[int] = None,
                           rng: Optional[np.random.Generator] = None) -> Matrix:
    """Generate a matrix from a named family."""
    if family not in WEIGHT_FAMILIES:
        raise KeyError(f"Unknown family '{family}'. Known families: {sorted(WEIGHT_FAMILIES)}")
    width = height if width is None else width
    rng = rng or np.random.default_rng(0)
    return WEIGHT_FAMILIES[family](height, width, rng)
