"""
Multi-resolution pyramid ("mipmap") of a one-dimensional series.

Every level is half the length of the previous one (rounded up), obtained by
averaging consecutive pairs. All levels are computed once at construction so
that lookups at any level of detail are plain reads.
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional, Tuple

import numpy as np
from numpy.typing import ArrayLike, NDArray

logger = logging.getLogger(__name__)


def _check_dtype(dtype: np.dtype) -> None:
    if dtype.kind not in "iuf":
        raise TypeError(f"Expected a real numeric dtype, got {dtype}")


def _cast_back(
    averaged: NDArray[np.float64], finite_inputs: NDArray[np.bool_], dtype: np.dtype
) -> NDArray:
    """Convert float64 averages to ``dtype``, refusing to wrap or truncate."""
    if dtype.kind in "iu":
        rounded = np.rint(averaged)
        info = np.iinfo(dtype)
        # float(info.max) may round up past the real maximum for 64-bit types
        out_of_range = (rounded < info.min) | (rounded >= float(info.max) + 1.0)
        if np.any(out_of_range):
            bad = rounded[out_of_range][0]
            raise OverflowError(f"Averaged value {bad!r} does not fit in {dtype}")
        return rounded.astype(dtype)

    with np.errstate(over="ignore"):
        converted = averaged.astype(dtype)
    if not np.all(np.isfinite(converted[finite_inputs])):
        raise OverflowError(f"Averaged value exceeds the range of {dtype}")
    return converted


def downsample(values: ArrayLike) -> NDArray:
    """
    Halve a series by averaging consecutive pairs.

    Parameters
    ----------
    values : array (n_points,)
        Non-empty series of a real numeric dtype.

    Returns
    -------
    array (ceil(n_points / 2),)
        Pair averages in the input dtype. With an odd length the last element
        is passed through unchanged.

    Raises
    ------
    ValueError
        If ``values`` is empty or not 1D.
    OverflowError
        If an average cannot be represented in the input dtype.

    Examples
    --------
    >>> downsample(np.array([2, 4, 6, 8, 9]))
    array([3, 7, 9])
    """
    x = np.asarray(values)
    _check_dtype(x.dtype)
    if x.ndim != 1:
        raise ValueError("Input must be a 1D array")
    n = len(x)
    if n == 0:
        raise ValueError("Cannot downsample an empty series")

    n_pairs = n // 2
    paired = x[:n_pairs * 2].astype(np.float64).reshape(n_pairs, 2)
    with np.errstate(over="ignore", invalid="ignore"):
        averaged = (paired[:, 0] + paired[:, 1]) / 2.0
    finite_inputs = np.isfinite(paired).all(axis=1)

    result = np.empty((n_pairs + n % 2,), dtype=x.dtype)
    result[:n_pairs] = _cast_back(averaged, finite_inputs, x.dtype)
    if n % 2:
        result[-1] = x[-1]
    return result


class MipMap1D:
    """
    Downsampled versions of a series, from the original down to one point.

    Takes about twice the memory of the source data. Level 0 is a copy of
    the source; level k has ``ceil(len(level k-1) / 2)`` points. Levels are
    read-only arrays.

    Examples
    --------
    >>> mipmap = MipMap1D([2, 4, 6, 8, 9])
    >>> mipmap.num_levels()
    4
    >>> mipmap.get_level(1)
    array([3, 7, 9])
    >>> mipmap.get_level(4) is None
    True
    """

    def __init__(self, source: ArrayLike):
        x = np.array(source, copy=True)
        _check_dtype(x.dtype)
        if x.ndim != 1:
            raise ValueError("Input must be a 1D array")

        current = x
        levels = [current]
        while len(current) > 1:
            current = downsample(current)
            levels.append(current)

        # views of read-only owners cannot be made writeable again
        for values in levels:
            values.setflags(write=False)
        self._levels: Tuple[NDArray, ...] = tuple(values.view() for values in levels)
        logger.debug(
            f"Built mipmap with {len(self._levels)} levels from {len(x)} points ({x.dtype})"
        )

    def num_levels(self) -> int:
        """Total number of levels, ``ceil(log2(n)) + 1`` for a non-empty source."""
        return len(self._levels)

    def get_level(self, level: int) -> Optional[NDArray]:
        """
        Data on the given level, or None if the level does not exist.

        Level 0 is the source data; higher levels are coarser.
        """
        if level < 0 or level >= self.num_levels():
            return None
        return self._levels[level]

    def level_for_length(self, max_points: int) -> int:
        """Index of the finest level with at most ``max_points`` points."""
        if max_points < 1:
            raise ValueError(f"max_points must be >= 1, got {max_points}")
        # the last level always has at most one point
        return next(
            index for index, values in enumerate(self._levels)
            if len(values) <= max_points
        )

    @property
    def levels(self) -> Tuple[NDArray, ...]:
        return self._levels

    @property
    def dtype(self) -> np.dtype:
        return self._levels[0].dtype

    @property
    def source_length(self) -> int:
        return len(self._levels[0])

    def __len__(self) -> int:
        return self.num_levels()

    def __iter__(self) -> Iterator[NDArray]:
        return iter(self._levels)

    def __repr__(self) -> str:
        return (
            f"MipMap1D(n_points={self.source_length}, "
            f"n_levels={self.num_levels()}, dtype={self.dtype})"
        )
