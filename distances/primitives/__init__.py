"""
Distances Primitives Library

Single- and two-vector computations, numpy in, numbers out:
- statistics: mean, std_dev, covariance, pearson, pearson_f32, pearson_f64
"""

from .statistics import (
    mean,
    std_dev,
    covariance,
    pearson,
    pearson_f32,
    pearson_f64,
)

__all__ = [
    'mean',
    'std_dev',
    'covariance',
    'pearson',
    'pearson_f32',
    'pearson_f64',
]
