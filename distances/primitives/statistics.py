"""
Vector Statistics Primitives

Mean, population standard deviation, population covariance and the
Pearson distance between two vectors.

All functions are pure and take an optional ``dtype`` selecting the
accumulator precision (see distances.number). Degenerate input is not
guarded: an empty vector or a zero-variance vector yields NaN through
ordinary floating-point arithmetic, and vectors of different lengths are
truncated to the shorter one.
"""

from typing import Any, Tuple

import numpy as np

from distances.number import Number, FloatLike, resolve_float
from distances.validation import check_lengths


def _aligned(x: Any, y: Any, strict: bool = False) -> Tuple[np.ndarray, np.ndarray]:
    """Pair two vectors index by index, truncating to the shorter one."""
    x = Number.coerce(x)
    y = Number.coerce(y)

    if strict:
        check_lengths(x, y)

    n = min(len(x), len(y))
    return x[:n], y[:n]


def mean(xs: Any, dtype: FloatLike = None):
    """
    Compute the arithmetic mean.

    Parameters
    ----------
    xs : array-like
        Input vector
    dtype : optional
        Accumulator precision (default float64)

    Returns
    -------
    np.floating
        Sum of the converted elements divided by their count.
        NaN for an empty vector.

    Notes
    -----
    One correction pass, m + sum(x - m) / n, absorbs the rounding error of
    the first division, so [0.1, 0.1, 0.1] has a mean of exactly 0.1.
    """
    U = resolve_float(dtype)
    values = U.from_numbers(xs)

    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        n = U.from_count(len(values))
        m = U.sum(values) / n
        if not np.isfinite(m):
            return m
        return m + U.sum(values - m) / n


def std_dev(xs: Any, dtype: FloatLike = None):
    """
    Compute the population standard deviation.

    Parameters
    ----------
    xs : array-like
        Input vector
    dtype : optional
        Accumulator precision (default float64)

    Returns
    -------
    np.floating
        sqrt(mean((x - mean(x))**2)). NaN for an empty vector.

    Notes
    -----
    Denominator is n, not n - 1. Scale by sqrt(n / (n - 1)) for the
    sample estimate.
    """
    U = resolve_float(dtype)
    values = U.from_numbers(xs)
    xs_mean = mean(values, U)

    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        squares = U.powi(values - xs_mean, 2)
        return U.sqrt(U.sum(squares) / U.from_count(len(values)))


def covariance(x: Any, y: Any, dtype: FloatLike = None, strict: bool = False):
    """
    Compute the population covariance.

    Parameters
    ----------
    x, y : array-like
        Input vectors, index-aligned
    dtype : optional
        Accumulator precision (default float64)
    strict : bool
        If True, raise LengthMismatchError instead of truncating

    Returns
    -------
    np.floating
        Covariance with denominator n

    Notes
    -----
    cov(x, y) = (1/n) * sum((x_i - mean(x)) * (y_i - mean(y)))
    Both vectors are cut to the shorter length before the means are taken.
    """
    U = resolve_float(dtype)
    x, y = _aligned(x, y, strict)

    x_mean = mean(x, U)
    y_mean = mean(y, U)

    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        products = (U.from_numbers(x) - x_mean) * (U.from_numbers(y) - y_mean)
        return U.sum(products) / U.from_count(len(x))


def pearson(x: Any, y: Any, dtype: FloatLike = None, strict: bool = False):
    """
    Compute the Pearson distance, 1 - r.

    Parameters
    ----------
    x, y : array-like
        Input vectors, index-aligned
    dtype : optional
        Accumulator precision (default float64)
    strict : bool
        If True, raise LengthMismatchError instead of truncating

    Returns
    -------
    np.floating
        Distance in [0, 2]: 0 for a positive linear relation, 1 for none,
        2 for an inverse one. NaN when either vector has zero variance.

    Notes
    -----
    r = cov(x, y) / (std(x) * std(y))
    https://en.wikipedia.org/wiki/Pearson_correlation_coefficient#Definition
    """
    U = resolve_float(dtype)
    x, y = _aligned(x, y, strict)

    cov = covariance(x, y, U)
    std_dev_x = std_dev(x, U)
    std_dev_y = std_dev(y, U)

    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        r = cov / (std_dev_x * std_dev_y)
        # rounding can push |r| just past 1; NaN passes through
        r = np.clip(r, -U.one(), U.one())

    return U.one() - r


def pearson_f32(x: Any, y: Any) -> np.float32:
    """Pearson distance accumulated in float32."""
    return pearson(x, y, dtype=np.float32)


def pearson_f64(x: Any, y: Any) -> np.float64:
    """Pearson distance accumulated in float64."""
    return pearson(x, y, dtype=np.float64)
