"""
Scripts Module

Command-line entry points for solving matrix files and benchmarking solvers.
"""

__all__ = [
    'solve_matrix',
    'compare_solvers',
]
