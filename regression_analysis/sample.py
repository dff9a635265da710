"""Paired (x, y) observations used for fitting and validation."""

from typing import Iterator, Sequence, Tuple
import logging

import numpy as np

from .errors import LengthMismatch

logger = logging.getLogger(__name__)

__all__ = ['Sample']


def _as_readonly_vector(values: Sequence[float], name: str) -> np.ndarray:
    arr = np.array(values, dtype=float)
    if arr.ndim != 1:
        raise ValueError(f'{name} must be one-dimensional, got shape {arr.shape}')
    arr.setflags(write=False)
    return arr


class Sample:
    """Immutable pair of equal-length x/y vectors, paired by index.

    Values are widened to float64 once, here, so integer input is accepted.

    Args:
        x_values: Independent variable
        y_values: Dependent variable, same length as ``x_values``

    Raises:
        LengthMismatch: If the two sequences differ in length
    """

    __slots__ = ('_x', '_y')

    def __init__(self, x_values: Sequence[float], y_values: Sequence[float]):
        x = _as_readonly_vector(x_values, 'x_values')
        y = _as_readonly_vector(y_values, 'y_values')
        if len(x) != len(y):
            raise LengthMismatch(len(x), len(y), what='y values')
        self._x = x
        self._y = y
        logger.debug(f'Sample created with {len(x)} observations')

    @property
    def x_values(self) -> np.ndarray:
        return self._x

    @property
    def y_values(self) -> np.ndarray:
        return self._y

    def __len__(self) -> int:
        return len(self._x)

    def __iter__(self) -> Iterator[Tuple[float, float]]:
        return zip(self._x.tolist(), self._y.tolist())

    def __repr__(self) -> str:
        return f'Sample(n={len(self)})'
