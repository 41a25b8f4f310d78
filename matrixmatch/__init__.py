"""
MatrixMatch

Maximum-weight assignment on integer matrices: pick at most one cell per
row and per column so that the picked cells sum to the largest total.

Solvers:
- Greedy (row-by-row local maximum, fast, not always optimal)
- Backtrack (exhaustive search, always optimal, exponential)
- Hungarian (reductions + exact König cover, always optimal, polynomial)

SciPy and LAP wrappers are included as reference oracles, together with
generators, timing and a file-based benchmark logger.
"""

from .errors import (
    MatrixMatchError,
    InvalidDimensionsError,
    InvalidMatrixError,
    OutOfBoundsError,
    AllocationFailureError,
    NonConvergenceError,
    ExtractionFailureError,
)
from .matrix import Matrix, as_matrix
from .solution import SelectedElement, Solution
from .greedy_solver import GreedySolver, solve_greedy
from .backtrack_solver import BacktrackSolver, solve_backtrack
from .hungarian_solver import HungarianSolver, solve_hungarian
from .cover import CoverState, maximum_zero_matching, minimum_zero_cover
from .reference_solvers import SciPySolver, LAPSolver
from .verification import check_selection, solve_all, verify_solver_correctness
from .loader import load_matrix, save_matrix, format_matrix, matrix_size_from_file
from .generators import (
    WEIGHT_FAMILIES,
    generate_weight_matrix,
    generate_uniform_weights,
    generate_diagonal_weights,
    generate_greedy_trap_weights,
    generate_anti_diagonal_weights,
    generate_identity_like_weights,
    generate_tie_weights,
    generate_negative_weights,
)
from .timing import time_solver
from .logging_system import BenchmarkLogger, get_latest_experiment, list_experiments, load_experiment

SOLVERS = {
    "greedy": GreedySolver,
    "backtrack": BacktrackSolver,
    "hungarian": HungarianSolver,
}

__all__ = [
    'MatrixMatchError',
    'InvalidDimensionsError',
    'InvalidMatrixError',
    'OutOfBoundsError',
    'AllocationFailureError',
    'NonConvergenceError',
    'ExtractionFailureError',
    'Matrix',
    'as_matrix',
    'SelectedElement',
    'Solution',
    'GreedySolver',
    'BacktrackSolver',
    'HungarianSolver',
    'solve_greedy',
    'solve_backtrack',
    'solve_hungarian',
    'SOLVERS',
    'CoverState',
    'maximum_zero_matching',
    'minimum_zero_cover',
    'SciPySolver',
    'LAPSolver',
    'check_selection',
    'solve_all',
    'verify_solver_correctness',
    'load_matrix',
    'save_matrix',
    'format_matrix',
    'matrix_size_from_file',
    'WEIGHT_FAMILIES',
    'generate_weight_matrix',
    'generate_uniform_weights',
    'generate_diagonal_weights',
    'generate_greedy_trap_weights',
    'generate_anti_diagonal_weights',
    'generate_identity_like_weights',
    'generate_tie_weights',
    'generate_negative_weights',
    'time_solver',
    'BenchmarkLogger',
    'get_latest_experiment',
    'list_experiments',
    'load_experiment',
]
