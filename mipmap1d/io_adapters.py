"""
Columnar data adapters for mipmap1d.

Thin adapters that turn pandas DataFrames and CSV files into the 1D NumPy
arrays the pyramid is built from. The pyramid itself remains pure NumPy.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)


def from_pandas(
    df: pd.DataFrame,
    value_col: str,
    time_col: Optional[str] = None,
    sort_by_time: bool = True
) -> np.ndarray:
    """
    Convert a pandas DataFrame column to a NumPy array.

    Parameters
    ----------
    df : pd.DataFrame
        Input DataFrame
    value_col : str
        Column name for series values
    time_col : str, optional
        Column name for timestamps (used for sorting only)
    sort_by_time : bool, default True
        If True and time_col provided, sort by time

    Returns
    -------
    np.ndarray
        Values of ``value_col`` with nulls dropped. The column dtype is kept.

    Examples
    --------
    >>> df = pd.DataFrame({'t': [2, 1, 3], 'load': [20.0, 10.0, 30.0]})
    >>> from_pandas(df, value_col='load', time_col='t')
    array([10., 20., 30.])
    """
    for col in (value_col, time_col):
        if col is not None and col not in df.columns:
            raise KeyError(f"Column not found: {col}")

    if time_col and sort_by_time:
        df = df.sort_values(time_col, kind="stable")

    values = df[value_col].dropna().to_numpy()
    if len(values) < len(df):
        logger.info(f"Dropped {len(df) - len(values)} null values from '{value_col}'")
    return values


def load_series(
    path: Union[str, Path],
    value_col: Optional[str] = None,
    time_col: Optional[str] = None
) -> np.ndarray:
    """
    Load a single series from a CSV file.

    If ``value_col`` is not given, the first numeric column (other than
    ``time_col``) is used.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Series file not found: {path}")

    df = pd.read_csv(path)

    if value_col is None:
        numeric = [
            col for col in df.select_dtypes(include="number").columns
            if col != time_col
        ]
        if not numeric:
            raise ValueError(f"No numeric column found in {path}")
        value_col = numeric[0]

    logger.info(f"Loading '{value_col}' from {path} ({len(df)} rows)")
    return from_pandas(df, value_col=value_col, time_col=time_col)
