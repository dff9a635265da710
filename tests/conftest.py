import pytest

from regression_analysis import Estimator, Sample

QUADRATIC_X = [1, 2, 3, 4, 5, 6, 7, 8]
QUADRATIC_Y = [x * x for x in QUADRATIC_X]


@pytest.fixture
def quadratic_sample():
    return Sample(QUADRATIC_X, QUADRATIC_Y)


@pytest.fixture
def quadratic_estimator(quadratic_sample):
    return Estimator(quadratic_sample)


@pytest.fixture
def held_out_sample():
    return Sample([10], [100])
