"""
Timing Module

Repeated timing of a solver on one matrix, reporting the median.
"""

import statistics
import time
from typing import Any, Callable, Dict

from .matrix import Matrix
from .solution import Solution


def time_solver(solver: Callable[[Matrix], Solution], matrix: Matrix,
                num_warmups: int = 2, num_repeats: int = 10) -> Dict[str, Any]:
    """
    Time `solver(matrix)` over several runs.

    Args:
        solver: Solver instance or function taking a matrix
        matrix: Weight matrix
        num_warmups: Untimed runs before measuring
        num_repeats: Timed runs

    Returns:
        Dictionary with timing statistics and the last solution, or
        ``{'success': False, 'error': ...}`` if a run raised
    """
    solution = None
    try:
        for _ in range(num_warmups):
            solution = solver(matrix)

        times = []
        for _ in range(max(1, num_repeats)):
            start = time.perf_counter()
            solution = solver(matrix)
            times.append(time.perf_counter() - start)
    except Exception as e:
        return {'success': False, 'error': f"{type(e).__name__}: {e}"}

    return {
        'success': True,
        'median': statistics.median(times),
        'mean': statistics.mean(times),
        'std': statistics.stdev(times) if len(times) > 1 else 0.0,
        'min': min(times),
        'max': max(times),
        'num_samples': len(times),
        'solution': solution,
    }
