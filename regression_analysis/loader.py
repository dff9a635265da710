"""Utility for loading CSV observations into a Sample."""

from pathlib import Path
from typing import List, Union
import logging

import pandas as pd

from .sample import Sample

logger = logging.getLogger(__name__)

__all__ = ['load_csv_files', 'load_sample']

PathLike = Union[str, Path]


def _is_csv(path: Path) -> bool:
    return path.is_file() and path.suffix.lower() == '.csv'


def _gather_files(paths: List[PathLike]) -> List[Path]:
    files: List[Path] = []
    for p in paths:
        pth = Path(p)
        if pth.is_dir():
            candidates = sorted(f for f in pth.iterdir() if _is_csv(f))
        elif _is_csv(pth):
            candidates = [pth]
        else:
            logger.warning(f'Skipping {pth}: not a CSV file or directory')
            continue
        # A file named both directly and via its directory is read once
        files.extend(f for f in candidates if f not in files)
    if not files:
        raise FileNotFoundError(f'No CSV files found in given paths: {[str(p) for p in paths]}')
    return files


def load_csv_files(paths: List[PathLike]) -> pd.DataFrame:
    """Load one or more CSV files into a single DataFrame.

    Parameters
    ----------
    paths : List[str]
        File or directory paths. Directories contribute their ``*.csv``
        files in sorted order.

    Returns
    -------
    pd.DataFrame
        Concatenated dataframe containing all rows. Adds column `source_file`.
    """
    files = _gather_files(paths)
    frames = []
    for f in files:
        df = pd.read_csv(f)
        logger.info(f'Loaded {len(df)} rows from {f.name}')
        df['source_file'] = f.name
        frames.append(df)
    return pd.concat(frames, ignore_index=True)


def load_sample(paths: List[PathLike], x_column: str = 'x', y_column: str = 'y') -> Sample:
    """Build a Sample from two columns of the given CSV files.

    Rows with a missing value in either column are dropped.
    """
    df = load_csv_files(paths)

    missing = [col for col in (x_column, y_column) if col not in df.columns]
    if missing:
        raise KeyError(f'Missing required columns: {missing}')

    clean = df.dropna(subset=[x_column, y_column])
    dropped = len(df) - len(clean)
    if dropped:
        logger.warning(f'Dropped {dropped} rows with missing {x_column}/{y_column}')

    return Sample(clean[x_column].to_numpy(dtype=float), clean[y_column].to_numpy(dtype=float))
