"""Simple linear regression package."""

from .errors import (
    RegressionError,
    EmptySample,
    DegenerateFit,
    DegenerateScore,
    LengthMismatch,
)
from .sample import Sample
from .estimator import Estimator, FitResult
from .loader import load_csv_files, load_sample
from .config import load_config

__all__ = [
    'RegressionError',
    'EmptySample',
    'DegenerateFit',
    'DegenerateScore',
    'LengthMismatch',
    'Sample',
    'Estimator',
    'FitResult',
    'load_csv_files',
    'load_sample',
    'load_config',
]
