"""
Errors Module

Exception taxonomy for matrix construction and the assignment solvers.
Each error also derives from the closest built-in so callers can catch
either the specific class or the generic one.
"""


class MatrixMatchError(Exception):
    """Base class for all matrixmatch errors."""


class InvalidDimensionsError(MatrixMatchError, ValueError):
    """Requested matrix width or height is not a positive integer."""


class InvalidMatrixError(MatrixMatchError, ValueError):
    """Solver input is missing, empty, or not an integer weight matrix."""


class OutOfBoundsError(MatrixMatchError, IndexError):
    """Cell index outside the matrix extent, or a ragged row."""


class AllocationFailureError(MatrixMatchError, MemoryError):
    """Storage for a matrix or its copy could not be obtained."""


class NonConvergenceError(MatrixMatchError, RuntimeError):
    """Hungarian fixpoint loop exceeded its iteration bound."""


class ExtractionFailureError(MatrixMatchError, RuntimeError):
    """Hungarian could not match enough zeros to build a full selection."""
