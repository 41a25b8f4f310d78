"""
Matrix Module

Dense integer weight matrix used by every solver.
Cells are stored in a contiguous int64 array and addressed by (row, col).
"""

from typing import Iterator, Sequence, Tuple, Union

import numpy as np

from .errors import (
    AllocationFailureError,
    InvalidDimensionsError,
    InvalidMatrixError,
    OutOfBoundsError,
)


WEIGHT_DTYPE = np.int64


def _is_index(value) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


def _coerce_weights(arr: np.ndarray) -> np.ndarray:
    """Return `arr` as int64, rejecting non-integral weights."""
    if arr.dtype.kind in "biu":
        return arr.astype(WEIGHT_DTYPE)
    if arr.dtype.kind == "f":
        if not np.all(np.isfinite(arr)) or not np.all(arr == np.round(arr)):
            raise InvalidMatrixError("Matrix weights must be integers")
        return arr.astype(WEIGHT_DTYPE)
    raise InvalidMatrixError(f"Matrix weights must be integers, got dtype '{arr.dtype}'")


class Matrix:
    """Integer weight grid with bounds-checked access.

    Use :meth:`create` for a zero-filled matrix or :meth:`from_rows` to wrap
    existing data. The constructor takes ownership of an already validated
    2-D int64 array and is not meant to be called directly.
    """

    __slots__ = ("_values",)

    def __init__(self, values: np.ndarray):
        self._values = values

    @classmethod
    def create(cls, width: int, height: int) -> "Matrix":
        """Create a `height` x `width` matrix filled with zeros."""
        if not _is_index(width) or not _is_index(height) or width <= 0 or height <= 0:
            raise InvalidDimensionsError(
                f"Matrix dimensions must be positive integers, got {width}x{height} (width x height)"
            )
        try:
            values = np.zeros((int(height), int(width)), dtype=WEIGHT_DTYPE)
        except (MemoryError, ValueError) as exc:
            raise AllocationFailureError(
                f"Cannot allocate a {height}x{width} matrix"
            ) from exc
        return cls(values)

    @classmethod
    def from_rows(cls, rows: Union[Sequence[Sequence[int]], np.ndarray]) -> "Matrix":
        """Build a matrix from a nested sequence of rows or a 2-D array."""
        if isinstance(rows, Matrix):
            return rows.clone_deep()
        if isinstance(rows, np.ndarray):
            arr = rows
        else:
            rows = list(rows)
            if not rows:
                raise InvalidDimensionsError("Matrix must have at least one row")
            try:
                widths = {len(r) for r in rows}
            except TypeError as exc:
                raise InvalidDimensionsError("Matrix data must be a sequence of rows") from exc
            if len(widths) > 1:
                raise OutOfBoundsError(f"Ragged rows: found row widths {sorted(widths)}")
            arr = np.array(rows)

        if arr.ndim != 2:
            raise InvalidDimensionsError(f"Matrix data must be 2-D, got shape {arr.shape}")
        if arr.shape[0] == 0 or arr.shape[1] == 0:
            raise InvalidDimensionsError(f"Matrix must not be empty, got shape {arr.shape}")

        try:
            values = np.array(_coerce_weights(arr), dtype=WEIGHT_DTYPE, copy=True)
        except MemoryError as exc:
            raise AllocationFailureError(f"Cannot allocate a matrix of shape {arr.shape}") from exc
        return cls(values)

    # ------------------------------------------------------------------ shape

    @property
    def width(self) -> int:
        return int(self._values.shape[1])

    @property
    def height(self) -> int:
        return int(self._values.shape[0])

    @property
    def shape(self) -> Tuple[int, int]:
        """(height, width), numpy order."""
        return self.height, self.width

    def dimensions(self) -> Tuple[int, int]:
        """(width, height), loader order."""
        return self.width, self.height

    # ------------------------------------------------------------ cell access

    def _check_cell(self, row, col) -> None:
        if not _is_index(row) or not _is_index(col):
            raise OutOfBoundsError(f"Cell indices must be integers, got ({row!r}, {col!r})")
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise OutOfBoundsError(
                f"Cell ({row}, {col}) outside {self.height}x{self.width} matrix"
            )

    def _check_row(self, row) -> None:
        if not _is_index(row) or not 0 <= row < self.height:
            raise OutOfBoundsError(f"Row {row!r} outside [0, {self.height})")

    def _check_col(self, col) -> None:
        if not _is_index(col) or not 0 <= col < self.width:
            raise OutOfBoundsError(f"Column {col!r} outside [0, {self.width})")

    def get(self, row: int, col: int) -> int:
        self._check_cell(row, col)
        return int(self._values[row, col])

    def set(self, row: int, col: int, value: int) -> None:
        self._check_cell(row, col)
        if isinstance(value, float) and not value.is_integer():
            raise InvalidMatrixError(f"Matrix weights must be integers, got {value!r}")
        self._values[row, col] = int(value)

    def row(self, row: int) -> Tuple[int, ...]:
        self._check_row(row)
        return tuple(int(v) for v in self._values[row])

    def column(self, col: int) -> Tuple[int, ...]:
        self._check_col(col)
        return tuple(int(v) for v in self._values[:, col])

    def iter_rows(self) -> Iterator[Tuple[int, ...]]:
        for i in range(self.height):
            yield self.row(i)

    # ---------------------------------------------------------------- queries

    def row_minimum(self, row: int) -> int:
        self._check_row(row)
        return int(self._values[row].min())

    def column_minimum(self, col: int) -> int:
        self._check_col(col)
        return int(self._values[:, col].min())

    def row_minima(self) -> np.ndarray:
        return self._values.min(axis=1)

    def column_minima(self) -> np.ndarray:
        return self._values.min(axis=0)

    # ------------------------------------------------------------------ copies

    def clone_deep(self) -> "Matrix":
        """Independent copy; the clone never shares storage with `self`."""
        return Matrix(self.to_numpy())

    def to_numpy(self) -> np.ndarray:
        """Copy of the cell values as a (height, width) int64 array."""
        try:
            return self._values.copy()
        except MemoryError as exc:
            raise AllocationFailureError(
                f"Cannot copy a {self.height}x{self.width} matrix"
            ) from exc

    def tolist(self):
        return self._values.tolist()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._values, other._values))

    __hash__ = None

    def __repr__(self) -> str:
        return f"Matrix(height={self.height}, width={self.width}, rows={self.tolist()})"


def as_matrix(obj) -> Matrix:
    """Coerce solver input to a :class:`Matrix`.

    A `Matrix` is returned as-is (solvers only read it); nested sequences and
    arrays are wrapped. Missing or empty input raises `InvalidMatrixError`.
    """
    if obj is None:
        raise InvalidMatrixError("Matrix is None")
    if isinstance(obj, Matrix):
        matrix = obj
    else:
        try:
            matrix = Matrix.from_rows(obj)
        except InvalidDimensionsError as exc:
            raise InvalidMatrixError(str(exc)) from exc
    if matrix.width <= 0 or matrix.height <= 0:
        raise InvalidMatrixError(f"Matrix must have positive dimensions, got {matrix.shape}")
    return matrix
