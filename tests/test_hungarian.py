import numpy as np
import pytest

from matrixmatch import (
    HungarianSolver,
    InvalidMatrixError,
    Matrix,
    NonConvergenceError,
    SelectedElement,
    check_selection,
    generate_greedy_trap_weights,
    generate_tie_weights,
    generate_uniform_weights,
    solve_backtrack,
    solve_hungarian,
)


def test_single_cell():
    selection, total = solve_hungarian([[5]])
    assert total == 5
    assert selection == [SelectedElement(0, 0, 5)]


def test_two_by_two():
    solution = solve_hungarian([[1, 2], [3, 4]])
    assert solution.total == 5
    assert len(solution) == 2


def test_dominant_diagonal_selects_diagonal():
    solution = solve_hungarian([[9, 1, 1], [1, 9, 1], [1, 1, 9]])
    assert solution.total == 27
    assert solution.selection == [
        SelectedElement(0, 0, 9), SelectedElement(1, 1, 9), SelectedElement(2, 2, 9)
    ]


def test_trap_needs_one_iteration(trap3):
    solution = solve_hungarian(trap3)
    assert solution.total == 20
    assert solution.as_assignment() == {0: 2, 1: 1, 2: 0}
    assert solution.stats["iterations"] == 1
    assert solution.stats["adjustments"] >= 1


def test_two_by_three_selects_two():
    solution = solve_hungarian([[1, 5, 2], [4, 3, 6]])
    assert len(solution) == 2
    assert solution.total == 11


def test_three_by_two_selects_two():
    solution = solve_hungarian([[1, 1], [10, 0], [0, 10]])
    assert solution.total == 20
    assert solution.as_assignment() == {1: 0, 2: 1}


def test_negative_weights():
    assert solve_hungarian([[-5, -1], [-2, -7]]).total == -3


def test_does_not_mutate_input(trap3):
    before = trap3.clone_deep()
    solve_hungarian(trap3)
    assert trap3 == before


def test_iteration_bound_is_enforced(trap3):
    with pytest.raises(NonConvergenceError):
        HungarianSolver(max_iterations=0).solve(trap3)


def test_already_optimal_needs_no_iteration():
    solution = HungarianSolver(max_iterations=0).solve([[9, 1], [1, 9]])
    assert solution.total == 18
    assert solution.stats["iterations"] == 0


def test_negative_bound_rejected():
    with pytest.raises(ValueError):
        HungarianSolver(max_iterations=-1)


def test_invalid_input():
    with pytest.raises(InvalidMatrixError):
        solve_hungarian(None)


@pytest.mark.parametrize("n", [2, 3, 4, 5, 6, 8])
def test_greedy_trap_family(n):
    matrix = generate_greedy_trap_weights(n)
    solution = solve_hungarian(matrix)
    assert solution.total == solve_backtrack(matrix).total
    assert solution.stats["iterations"] <= n


@pytest.mark.parametrize("seed", range(25))
def test_terminates_within_bound_on_tie_heavy_input(seed):
    # Few weight levels leave many shared zeros after reduction, the input
    # on which a heuristic row/column cover can stop making progress.
    rng = np.random.default_rng(seed)
    h, w = (int(x) for x in rng.integers(1, 7, size=2))
    matrix = generate_tie_weights(h, w, levels=int(rng.integers(2, 4)), seed=seed)
    solution = solve_hungarian(matrix)
    check_selection(solution, matrix)
    assert len(solution) == min(h, w)
    assert solution.stats["iterations"] <= min(h, w)
    assert solution.total == solve_backtrack(matrix).total


def test_cover_stress_block_matrix():
    # Zeros after reduction form a dense block sharing rows and columns.
    matrix = Matrix.from_rows([
        [5, 5, 5, 0, 0],
        [5, 5, 5, 0, 0],
        [5, 5, 5, 0, 0],
        [5, 0, 0, 0, 0],
        [5, 0, 0, 0, 0],
    ])
    solution = solve_hungarian(matrix)
    assert solution.total == solve_backtrack(matrix).total == 15
    assert solution.stats["iterations"] <= 5


def test_larger_random_matches_scipy():
    from scipy.optimize import linear_sum_assignment

    matrix = generate_uniform_weights(40, 55, low=-50, high=500, seed=7)
    W = matrix.to_numpy()
    rows, cols = linear_sum_assignment(W, maximize=True)
    solution = solve_hungarian(matrix)
    assert solution.total == int(W[rows, cols].sum())
    assert solution.stats["iterations"] <= 40
