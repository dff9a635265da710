"""YAML configuration for the regression report."""

from pathlib import Path
from typing import Any, Dict, Optional, Union
import copy
import logging

import yaml

logger = logging.getLogger(__name__)

__all__ = ['DEFAULT_CONFIG', 'load_config']

# Repository copy of the defaults; not installed with the package.
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / 'config' / 'regression_analysis.yaml'

DEFAULT_CONFIG: Dict[str, Dict[str, Any]] = {
    'data': {
        'x_column': 'x',
        'y_column': 'y',
    },
    'report': {
        'percent_score': True,
        'float_format': None,
    },
    'output': {
        'params_file': None,
        'plot_file': None,
    },
    'logging': {
        'level': 'INFO',
    },
}

LOG_LEVELS = ('CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG', 'NOTSET')


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if value is None and isinstance(merged.get(key), dict):
            continue
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(path: Optional[Union[str, Path]] = None) -> Dict[str, Dict[str, Any]]:
    """
    Load configuration, merging a YAML file over the built-in defaults.

    Args:
        path: YAML file; ``None`` returns a copy of the defaults

    Returns:
        Configuration dictionary with every section of DEFAULT_CONFIG

    Raises:
        FileNotFoundError: If ``path`` does not exist
        ValueError: If the file has unknown sections, is not a mapping,
            or holds an invalid log level or float format
    """
    if path is None:
        return copy.deepcopy(DEFAULT_CONFIG)

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f'Config file not found: {path}')

    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f'Config root must be a mapping, got {type(data).__name__}')

    unknown = set(data) - set(DEFAULT_CONFIG)
    if unknown:
        raise ValueError(f'Unknown config sections: {sorted(unknown)}')

    logger.debug(f'Loaded config from {path}')
    return _validate(_merge(DEFAULT_CONFIG, data))


def _validate(config: Dict[str, Dict[str, Any]]) -> Dict[str, Dict[str, Any]]:
    for section in DEFAULT_CONFIG:
        if not isinstance(config[section], dict):
            raise ValueError(f'Config section {section!r} must be a mapping')

    level = config['logging']['level']
    if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
        raise ValueError(f'Invalid logging.level {level!r}, expected one of {list(LOG_LEVELS)}')
    config['logging']['level'] = level.upper()

    float_format = config['report']['float_format']
    if float_format is not None:
        if not isinstance(float_format, str):
            raise ValueError(f'report.float_format must be a string, got {float_format!r}')
        try:
            format(0.0, float_format)
        except ValueError as e:
            raise ValueError(f'Invalid report.float_format {float_format!r}: {e}') from e

    if not isinstance(config['report']['percent_score'], bool):
        raise ValueError('report.percent_score must be true or false')

    for key in ('x_column', 'y_column'):
        if not isinstance(config['data'][key], str):
            raise ValueError(f'data.{key} must be a string')
    return config
