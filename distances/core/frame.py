"""
Frame Pairwise Engine

Pearson distance between every pair of columns of a polars DataFrame.
Each numeric column is one vector; rows are the aligned observations.

N columns -> N(N-1)/2 rows of output:

    signal_a | signal_b | covariance | correlation | pearson_distance

Nulls are read as NaN and propagate into every statistic of the pairs
they touch.
"""

import logging
from itertools import combinations
from typing import Any, Dict, List, Optional

import polars as pl

from distances.number import F32, FloatLike, resolve_float
from distances.primitives.statistics import covariance, pearson

logger = logging.getLogger(__name__)


def _output_schema(float_type: Any) -> Dict[str, Any]:
    return {
        'signal_a': pl.Utf8,
        'signal_b': pl.Utf8,
        'covariance': float_type,
        'correlation': float_type,
        'pearson_distance': float_type,
    }


def numeric_columns(df: pl.DataFrame) -> List[str]:
    """Names of the integer and float columns, in frame order."""
    return [name for name, dtype in df.schema.items() if dtype.is_numeric()]


def pairwise_frame(
    df: pl.DataFrame,
    columns: Optional[List[str]] = None,
    dtype: FloatLike = None,
) -> pl.DataFrame:
    """
    Compute pairwise Pearson statistics between DataFrame columns.

    Args:
        df: Frame with one vector per column
        columns: Columns to compare (default: all numeric columns)
        dtype: Accumulator precision (default float64)

    Returns:
        Long-format DataFrame, one row per unordered column pair
    """
    U = resolve_float(dtype)
    schema = _output_schema(pl.Float32 if U == F32 else pl.Float64)

    if columns is None:
        columns = numeric_columns(df)

    if len(columns) < 2:
        logger.debug(f"pairwise_frame: {len(columns)} column(s), nothing to pair")
        return pl.DataFrame(schema=schema)

    vectors = {name: df[name].to_numpy() for name in columns}

    rows = []
    for name_a, name_b in combinations(columns, 2):
        x, y = vectors[name_a], vectors[name_b]
        distance = pearson(x, y, dtype=U)
        rows.append({
            'signal_a': name_a,
            'signal_b': name_b,
            'covariance': float(covariance(x, y, dtype=U)),
            'correlation': float(U.one() - distance),
            'pearson_distance': float(distance),
        })

    logger.debug(f"pairwise_frame: {len(columns)} columns -> {len(rows)} pairs")
    return pl.DataFrame(rows, schema=schema)
