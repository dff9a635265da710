import numpy as np
import pytest

from regression_analysis import LengthMismatch, RegressionError, Sample


def test_integers_widened_to_float():
    sample = Sample([1, 2, 3], [4, 5, 6])
    assert sample.x_values.dtype == np.float64
    assert sample.y_values.dtype == np.float64
    assert sample.x_values.tolist() == [1.0, 2.0, 3.0]


def test_values_are_read_only():
    sample = Sample([1.0, 2.0], [3.0, 4.0])
    with pytest.raises(ValueError):
        sample.x_values[0] = 10.0
    with pytest.raises(ValueError):
        sample.y_values[1] = 10.0


def test_caller_array_not_frozen_or_shared():
    x = np.array([1.0, 2.0, 3.0])
    sample = Sample(x, [1, 2, 3])
    x[0] = 99.0
    assert sample.x_values[0] == 1.0


def test_x_y_length_mismatch_rejected():
    with pytest.raises(LengthMismatch) as exc_info:
        Sample([1, 2, 3], [1, 2])
    assert exc_info.value.expected == 3
    assert exc_info.value.actual == 2
    assert isinstance(exc_info.value, RegressionError)
    assert isinstance(exc_info.value, ValueError)


def test_empty_sample_allowed():
    sample = Sample([], [])
    assert len(sample) == 0
    assert list(sample) == []


def test_two_dimensional_input_rejected():
    with pytest.raises(ValueError, match='one-dimensional'):
        Sample([[1, 2], [3, 4]], [1, 2])


def test_non_numeric_input_rejected():
    with pytest.raises(ValueError):
        Sample(['a', 'b'], [1, 2])


def test_iterates_pairs_in_order():
    sample = Sample([3, 1, 2], [30, 10, 20])
    assert list(sample) == [(3.0, 30.0), (1.0, 10.0), (2.0, 20.0)]
    assert repr(sample) == 'Sample(n=3)'
