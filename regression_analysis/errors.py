"""Error types raised by the regression estimator."""

__all__ = [
    'RegressionError',
    'EmptySample',
    'DegenerateFit',
    'DegenerateScore',
    'LengthMismatch',
]


class RegressionError(ValueError):
    """Base class for input-dependent regression failures."""


class EmptySample(RegressionError):
    """Sample has no observations, so no mean exists."""

    def __init__(self, message: str = 'empty sample: no observations'):
        super().__init__(message)


class DegenerateFit(RegressionError):
    """All x values are identical; the slope is undefined."""

    def __init__(self, message: str = 'degenerate fit: zero x-variance'):
        super().__init__(message)


class DegenerateScore(RegressionError):
    """All y values are identical; R² is undefined."""

    def __init__(self, message: str = 'degenerate score: zero y-variance'):
        super().__init__(message)


class LengthMismatch(RegressionError):
    def __init__(self, expected: int, actual: int, what: str = 'values'):
        self.expected = expected
        self.actual = actual
        super().__init__(f'length mismatch: expected {expected} {what}, got {actual}')
