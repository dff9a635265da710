"""Ordinary least-squares estimation for a single regressor."""

from typing import NamedTuple, Optional, Sequence, Tuple
import logging
import math

import numpy as np

from .errors import DegenerateFit, DegenerateScore, EmptySample, LengthMismatch
from .sample import Sample

logger = logging.getLogger(__name__)

__all__ = [
    'FitResult',
    'Estimator',
]


class FitResult(NamedTuple):
    """Fitted line ``y = intercept + slope * x``."""
    intercept: float
    slope: float


def _fold_sum(values: np.ndarray) -> float:
    # Sequential left fold in input order (np.sum reorders pairwise).
    return float(sum(values.tolist(), 0.0))


def _is_constant(values: np.ndarray) -> bool:
    # Exact comparison; deviations from a rounded mean need not vanish.
    return bool(np.all(values == values[0]))


class Estimator:
    """Simple linear regression over one immutable :class:`Sample`.

    Every method is a pure function of the owned sample (plus, for
    :meth:`predict` and :meth:`rmse`, of the arguments), so nothing is cached
    and results are recomputed on each call.
    """

    def __init__(self, sample: Sample):
        if not isinstance(sample, Sample):
            raise TypeError(f'Expected Sample, got {type(sample).__name__}')
        self.sample = sample

    @classmethod
    def from_values(cls, x_values: Sequence[float], y_values: Sequence[float]) -> 'Estimator':
        return cls(Sample(x_values, y_values))

    def mean(self) -> Tuple[float, float]:
        """
        Arithmetic means of x and y.

        Returns:
            (x_mean, y_mean)

        Raises:
            EmptySample: If the sample has no observations
        """
        count = len(self.sample)
        if count == 0:
            raise EmptySample()
        x_mean = _fold_sum(self.sample.x_values) / float(count)
        y_mean = _fold_sum(self.sample.y_values) / float(count)
        return x_mean, y_mean

    def fit(self) -> FitResult:
        """
        Least-squares intercept and slope.

        slope = Σ(x-x̄)(y-ȳ) / Σ(x-x̄)²,  intercept = ȳ - slope·x̄

        Raises:
            EmptySample: If the sample has no observations
            DegenerateFit: If all x values are identical
        """
        x_mean, y_mean = self.mean()
        dx = self.sample.x_values - x_mean
        dy = self.sample.y_values - y_mean

        numerator = _fold_sum(dx * dy)
        denominator = _fold_sum(dx * dx)
        logger.debug(f'numerator={numerator!r} denominator={denominator!r}')

        if _is_constant(self.sample.x_values) or denominator == 0.0:
            raise DegenerateFit()

        slope = numerator / denominator
        intercept = y_mean - slope * x_mean
        return FitResult(intercept, slope)

    def score(self) -> float:
        """
        Coefficient of determination (R²) of the sample's own fit.

        Raises:
            EmptySample: If the sample has no observations
            DegenerateFit: If all x values are identical
            DegenerateScore: If all y values are identical
        """
        _, y_mean = self.mean()
        fit_result = self.fit()
        y = self.sample.y_values
        y_pred = self.predict(fit_result)

        ss_tot = _fold_sum((y - y_mean) ** 2)
        ss_res = _fold_sum((y - y_pred) ** 2)
        logger.debug(f'ss_tot={ss_tot!r} ss_res={ss_res!r}')

        if _is_constant(y) or ss_tot == 0.0:
            raise DegenerateScore()
        return 1.0 - ss_res / ss_tot

    def predict(self, fit_result: FitResult, sample: Optional[Sample] = None) -> np.ndarray:
        """Apply ``fit_result`` to each x of ``sample`` (default: own sample)."""
        if sample is None:
            sample = self.sample
        intercept, slope = fit_result
        return intercept + slope * sample.x_values

    def rmse(self, predicted: Sequence[float], sample: Optional[Sample] = None) -> float:
        """
        Root-mean-squared error of ``predicted`` against ``sample.y_values``.

        Args:
            predicted: One prediction per observation of ``sample``
            sample: Ground truth (default: own sample)

        Raises:
            LengthMismatch: If lengths differ
            EmptySample: If both are empty
        """
        if sample is None:
            sample = self.sample
        predicted = np.asarray(predicted, dtype=float)
        if len(predicted) != len(sample):
            raise LengthMismatch(len(sample), len(predicted), what='predictions')
        if len(sample) == 0:
            raise EmptySample()

        squared = (predicted - sample.y_values) ** 2
        return math.sqrt(_fold_sum(squared) / float(len(sample)))
