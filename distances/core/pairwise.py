"""
Pairwise Distance Engine.

Applies a two-vector metric across collections of vectors:
- cdist: every row of one matrix against every row of another
- pdist: every unordered pair of rows of one matrix (condensed form)

Metrics are looked up by name in METRICS. The condensed layout matches
scipy.spatial.distance.pdist, so results can be passed to squareform or
scipy.cluster.hierarchy directly.
"""

import logging
from itertools import combinations
from typing import Any, Callable, Dict

import numpy as np

from distances.number import FloatLike, resolve_float
from distances.primitives.statistics import pearson
from distances.validation import LengthMismatchError, UnsupportedDtypeError

logger = logging.getLogger(__name__)


# 'correlation' is scipy's name for the same distance
METRICS: Dict[str, Callable] = {
    'pearson': pearson,
    'correlation': pearson,
}


def get_metric(name: str) -> Callable:
    """Look up a metric by name."""
    if name not in METRICS:
        available = ", ".join(sorted(METRICS))
        raise KeyError(f"Unknown metric: '{name}'. Available: {available}")
    return METRICS[name]


def _as_matrix(a: Any, label: str) -> np.ndarray:
    a = np.asarray(a)
    if a.ndim != 2:
        raise UnsupportedDtypeError(
            f"{label} must be a 2-D array (one vector per row), got shape {a.shape}"
        )
    return a


def cdist(
    a: Any,
    b: Any,
    metric: str = 'pearson',
    dtype: FloatLike = None,
) -> np.ndarray:
    """
    Compute the distance between each pair of rows of two matrices.

    Args:
        a: (m, d) matrix of vectors
        b: (k, d) matrix of vectors
        metric: Metric name from METRICS
        dtype: Accumulator precision (default float64)

    Returns:
        (m, k) matrix with out[i, j] = metric(a[i], b[j])

    Raises:
        LengthMismatchError: if the row widths differ
    """
    U = resolve_float(dtype)
    func = get_metric(metric)
    a = _as_matrix(a, 'a')
    b = _as_matrix(b, 'b')

    if a.shape[1] != b.shape[1]:
        raise LengthMismatchError(a.shape[1], b.shape[1])

    logger.debug(f"cdist: {a.shape} x {b.shape}, metric={metric}, dtype={U.name}")

    out = np.empty((a.shape[0], b.shape[0]), dtype=U.type)
    for i in range(a.shape[0]):
        for j in range(b.shape[0]):
            out[i, j] = func(a[i], b[j], dtype=U)

    return out


def pdist(
    a: Any,
    metric: str = 'pearson',
    dtype: FloatLike = None,
) -> np.ndarray:
    """
    Compute the distance between each unordered pair of rows.

    Args:
        a: (m, d) matrix of vectors
        metric: Metric name from METRICS
        dtype: Accumulator precision (default float64)

    Returns:
        Condensed vector of length m * (m - 1) / 2, pairs in the order
        (0, 1), (0, 2), ..., (1, 2), ...
    """
    U = resolve_float(dtype)
    func = get_metric(metric)
    a = _as_matrix(a, 'a')

    m = a.shape[0]
    logger.debug(f"pdist: {a.shape}, metric={metric}, dtype={U.name}")

    out = np.empty(m * (m - 1) // 2, dtype=U.type)
    for k, (i, j) in enumerate(combinations(range(m), 2)):
        out[k] = func(a[i], a[j], dtype=U)

    return out
