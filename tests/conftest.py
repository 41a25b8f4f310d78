import numpy as np
import pytest

from matrixmatch import Matrix


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def trap3():
    # Reductions leave a 2-zero matching; greedy ends at 16, optimum is 20.
    return Matrix.from_rows([[9, 8, 7], [8, 6, 4], [7, 4, 1]])
