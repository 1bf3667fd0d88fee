"""
Distances: correlation-based distances between numeric vectors.

Public API:
    from distances import pearson
    pearson(x, y)                  # 1 - r, float64
    pearson(x, y, dtype='f32')     # float32 accumulator

Layers:
    distances.number       Numeric abstraction (Number inputs, Float accumulators)
    distances.primitives   Math: numpy in, numbers out (mean, std_dev, covariance, pearson)
    distances.core         Engines: cdist / pdist, polars column pairs
    distances.validation   Exceptions and optional guards

Also:
    distances.config       YAML configuration
    distances.cli          python -m distances
"""

from distances.number import F32, F64, Float, Number, resolve_float
from distances.primitives import (
    mean,
    std_dev,
    covariance,
    pearson,
    pearson_f32,
    pearson_f64,
)
from distances.core.pairwise import cdist, pdist
from distances.core.frame import pairwise_frame
from distances.validation import (
    ValidationError,
    LengthMismatchError,
    UnsupportedDtypeError,
    check_lengths,
    is_degenerate,
)

__version__ = "0.1.0"

__all__ = [
    "F32",
    "F64",
    "Float",
    "Number",
    "resolve_float",
    "mean",
    "std_dev",
    "covariance",
    "pearson",
    "pearson_f32",
    "pearson_f64",
    "cdist",
    "pdist",
    "pairwise_frame",
    "ValidationError",
    "LengthMismatchError",
    "UnsupportedDtypeError",
    "check_lengths",
    "is_degenerate",
]
