import numpy as np
import pytest

from matrixmatch import (
    AllocationFailureError,
    InvalidDimensionsError,
    InvalidMatrixError,
    Matrix,
    OutOfBoundsError,
    as_matrix,
)


def test_create_is_zero_filled():
    m = Matrix.create(3, 2)
    assert m.dimensions() == (3, 2)
    assert m.shape == (2, 3)
    assert m.tolist() == [[0, 0, 0], [0, 0, 0]]


@pytest.mark.parametrize("width,height", [(0, 1), (1, 0), (-2, 3), (2, -1)])
def test_create_rejects_non_positive_dimensions(width, height):
    with pytest.raises(InvalidDimensionsError):
        Matrix.create(width, height)


def test_create_huge_matrix_reports_allocation_failure():
    with pytest.raises(AllocationFailureError):
        Matrix.create(2 ** 40, 2 ** 40)


def test_get_set_roundtrip():
    m = Matrix.create(2, 2)
    m.set(1, 0, 42)
    assert m.get(1, 0) == 42
    assert m.get(0, 1) == 0


@pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (2, 0), (0, 3), (5, 5)])
def test_access_out_of_bounds(row, col):
    m = Matrix.create(3, 2)
    with pytest.raises(OutOfBoundsError):
        m.get(row, col)
    with pytest.raises(OutOfBoundsError):
        m.set(row, col, 1)


def test_out_of_bounds_is_index_error():
    with pytest.raises(IndexError):
        Matrix.create(1, 1).get(0, 1)


def test_clone_deep_is_independent():
    m = Matrix.from_rows([[1, 2], [3, 4]])
    clone = m.clone_deep()
    assert clone == m
    clone.set(0, 0, 100)
    assert m.get(0, 0) == 1
    assert clone != m


def test_to_numpy_does_not_alias():
    m = Matrix.from_rows([[1, 2], [3, 4]])
    arr = m.to_numpy()
    arr[0, 0] = 99
    assert m.get(0, 0) == 1


def test_row_and_column_minima():
    m = Matrix.from_rows([[5, -1, 3], [2, 8, 0]])
    assert m.row_minimum(0) == -1
    assert m.row_minimum(1) == 0
    assert m.column_minimum(0) == 2
    assert m.column_minimum(2) == 0
    np.testing.assert_array_equal(m.row_minima(), [-1, 0])
    np.testing.assert_array_equal(m.column_minima(), [2, -1, 0])
    with pytest.raises(OutOfBoundsError):
        m.row_minimum(2)
    with pytest.raises(OutOfBoundsError):
        m.column_minimum(3)


def test_rows_and_columns():
    m = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
    assert m.row(1) == (4, 5, 6)
    assert m.column(2) == (3, 6)
    assert list(m.iter_rows()) == [(1, 2, 3), (4, 5, 6)]


def test_from_rows_rejects_ragged_rows():
    with pytest.raises(OutOfBoundsError):
        Matrix.from_rows([[1, 2], [3]])


def test_from_rows_rejects_empty():
    with pytest.raises(InvalidDimensionsError):
        Matrix.from_rows([])
    with pytest.raises(InvalidDimensionsError):
        Matrix.from_rows([[]])


def test_from_rows_weights_must_be_integers():
    assert Matrix.from_rows([[1.0, 2.0]]).tolist() == [[1, 2]]
    with pytest.raises(InvalidMatrixError):
        Matrix.from_rows([[1.5, 2.0]])
    with pytest.raises(InvalidMatrixError):
        Matrix.from_rows([["a", "b"]])


def test_from_rows_copies_array():
    arr = np.array([[1, 2], [3, 4]])
    m = Matrix.from_rows(arr)
    arr[0, 0] = 7
    assert m.get(0, 0) == 1


def test_as_matrix():
    m = Matrix.from_rows([[1]])
    assert as_matrix(m) is m
    assert as_matrix([[1, 2]]).dimensions() == (2, 1)
    with pytest.raises(InvalidMatrixError):
        as_matrix(None)
    with pytest.raises(InvalidMatrixError):
        as_matrix([])
