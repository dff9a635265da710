"""Textual report, parameter export and plotting of a fitted line."""

from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
import logging

import matplotlib
matplotlib.use('Agg')  # Non-interactive backend
import matplotlib.pyplot as plt
import numpy as np
import yaml

from .estimator import FitResult
from .sample import Sample

logger = logging.getLogger(__name__)

__all__ = [
    'format_report',
    'save_parameters',
    'save_plot',
]

PathLike = Union[str, Path]


def _fmt(value: float, float_format: Optional[str]) -> str:
    if float_format is None:
        return str(float(value))
    return format(float(value), float_format)


def format_report(fit_result: FitResult, accuracy: float, score: float,
                  percent: bool = True, float_format: Optional[str] = None) -> List[str]:
    """Report lines: ``intercept,slope``, ``ACCURACY: <rmse>`` and the R² score."""
    intercept, slope = fit_result
    shown_score = score * 100.0 if percent else score
    return [
        f'{_fmt(intercept, float_format)},{_fmt(slope, float_format)}',
        f'ACCURACY: {_fmt(accuracy, float_format)}',
        _fmt(shown_score, float_format),
    ]


def _convert_types(obj: Any) -> Any:
    # numpy scalars/arrays are not representable by yaml.safe_dump
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    elif isinstance(obj, np.integer):
        return int(obj)
    elif isinstance(obj, np.floating):
        return float(obj)
    elif isinstance(obj, tuple) and hasattr(obj, '_asdict'):
        return _convert_types(obj._asdict())
    elif isinstance(obj, dict):
        return {k: _convert_types(v) for k, v in obj.items()}
    elif isinstance(obj, (list, tuple)):
        return [_convert_types(item) for item in obj]
    return obj


def save_parameters(output_file: PathLike, fit_result: FitResult,
                    metrics: Optional[Dict[str, float]] = None,
                    samples: Optional[int] = None) -> Path:
    """
    Save fitted parameters and validation metrics to a YAML file.

    Args:
        output_file: Destination path
        fit_result: Fitted line
        metrics: Validation metrics such as ``rmse`` and ``r_squared``
        samples: Number of training observations

    Returns:
        Path written
    """
    output_file = Path(output_file)
    output_file.parent.mkdir(parents=True, exist_ok=True)

    params = {
        'model_type': 'simple_linear_regression',
        'parameters': {
            'intercept': fit_result.intercept,
            'slope': fit_result.slope,
        },
        'validation': metrics or {},
        'samples': samples,
        'timestamp': datetime.now().isoformat(),
    }

    with open(output_file, 'w', encoding='utf-8') as f:
        yaml.safe_dump(_convert_types(params), f, default_flow_style=False)

    logger.info(f'Parameters saved to {output_file}')
    return output_file


def save_plot(output_file: PathLike, sample: Sample, fit_result: FitResult,
              test_sample: Optional[Sample] = None,
              title: str = 'Least-squares fit') -> Path:
    """Scatter the observations with the fitted line and save as an image."""
    output_file = Path(output_file)
    output_file.parent.mkdir(parents=True, exist_ok=True)

    intercept, slope = fit_result
    xs = [sample.x_values]
    if test_sample is not None and len(test_sample):
        xs.append(test_sample.x_values)
    x_all = np.concatenate(xs)
    x_line = np.linspace(x_all.min(), x_all.max(), 100) if len(x_all) else np.array([])

    fig, ax = plt.subplots(figsize=(8, 5))
    ax.scatter(sample.x_values, sample.y_values, label='Train', alpha=0.8)
    if test_sample is not None:
        ax.scatter(test_sample.x_values, test_sample.y_values, label='Test', marker='x')
    ax.plot(x_line, intercept + slope * x_line, 'r-',
            label=f'y = {intercept:.3f} + {slope:.3f}x')
    ax.set_title(title)
    ax.set_xlabel('x')
    ax.set_ylabel('y')
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(output_file, dpi=150)
    plt.close(fig)

    logger.info(f'Plot saved to {output_file}')
    return output_file
