import numpy as np
import pytest

from matrixmatch.cover import (
    CoverState,
    greedy_zero_matching,
    matching_size,
    maximum_zero_matching,
    minimum_zero_cover,
)
from matrixmatch.reductions import (
    adjust_uncovered,
    negate,
    pad_to_square,
    shift_nonnegative,
    subtract_column_minima,
    subtract_row_minima,
)


def _covers_all_zeros(zeros, cover):
    return not (zeros & cover.uncovered_mask()).any()


def test_greedy_matching_can_fall_short():
    zeros = np.array([[1, 1], [1, 0]], dtype=bool)
    row_match, _ = greedy_zero_matching(zeros)
    assert row_match.tolist() == [0, -1]


def test_augmenting_path_repairs_greedy_choice():
    zeros = np.array([[1, 1], [1, 0]], dtype=bool)
    row_match, col_match = maximum_zero_matching(zeros)
    assert row_match.tolist() == [1, 0]
    assert col_match.tolist() == [1, 0]


def test_konig_cover_size_equals_matching(rng):
    for _ in range(50):
        zeros = rng.random((6, 6)) < 0.3
        row_match, col_match = maximum_zero_matching(zeros)
        cover = minimum_zero_cover(zeros, row_match, col_match)
        assert cover.line_count == matching_size(row_match)
        assert _covers_all_zeros(zeros, cover)


def test_cover_rejects_non_maximum_matching():
    zeros = np.array([[1, 1], [1, 0]], dtype=bool)
    row_match, col_match = greedy_zero_matching(zeros)
    with pytest.raises(ValueError):
        minimum_zero_cover(zeros, row_match, col_match)


def test_cover_state_masks():
    cover = CoverState(np.array([True, False]), np.array([False, True, False]))
    assert cover.line_count == 2
    assert cover.is_covered(0, 0)
    assert cover.is_covered(1, 1)
    assert not cover.is_covered(1, 2)
    assert cover.uncovered_mask().tolist() == [[False, False, False], [True, False, True]]
    assert cover.doubly_covered_mask().tolist() == [[False, True, False], [False, False, False]]
    assert CoverState.empty(2, 2).line_count == 0


def test_reduction_passes_do_not_mutate():
    C = np.array([[3, -1], [4, 2]])
    snapshot = C.copy()
    negate(C)
    shift_nonnegative(C)
    subtract_row_minima(C)
    subtract_column_minima(C)
    np.testing.assert_array_equal(C, snapshot)


def test_shift_nonnegative():
    np.testing.assert_array_equal(shift_nonnegative(np.array([[-3, 1]])), [[0, 4]])
    np.testing.assert_array_equal(shift_nonnegative(np.array([[2, 5]])), [[2, 5]])


def test_row_then_column_reduction_exposes_zeros():
    C = subtract_column_minima(subtract_row_minima(np.array([[4, 1, 3], [2, 0, 5], [3, 2, 2]])))
    assert (C == 0).any(axis=1).all()
    assert (C == 0).any(axis=0).all()
    assert C.min() == 0


def test_pad_to_square():
    out = pad_to_square(np.array([[1, 2, 3]]))
    assert out.shape == (3, 3)
    assert out[1:].tolist() == [[0, 0, 0], [0, 0, 0]]
    with pytest.raises(ValueError):
        pad_to_square(np.ones((3, 2), dtype=int))


def test_adjust_uncovered():
    C = np.array([[0, 2, 3], [0, 4, 1], [5, 0, 6]])
    cover = CoverState(np.array([False, False, True]), np.array([True, False, False]))
    out = adjust_uncovered(C, cover)
    # min uncovered is 1: uncovered cells drop, (2, 0) rises, the rest stays
    assert out.tolist() == [[0, 1, 2], [0, 3, 0], [6, 0, 6]]


def test_adjust_requires_uncovered_cell():
    cover = CoverState(np.array([True, True]), np.array([False, False]))
    with pytest.raises(ValueError):
        adjust_uncovered(np.zeros((2, 2), dtype=int), cover)
