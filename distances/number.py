"""
Numeric Abstraction Layer

Two capabilities decouple the statistics from concrete numeric types:

    Number  input elements. Anything numpy can hold as an integer or
            floating dtype (int8..int64, uint8..uint64, float16..float64).
            The only requirement is conversion into the accumulator.

    Float   the accumulator. A numpy floating scalar type plus the
            operations the primitives use: from_count, from_numbers, one,
            zero, sum, powi, sqrt.

Usage:
    from distances.number import F32, F64, resolve_float

    U = resolve_float('f32')
    U.sum(U.from_numbers([1, 2, 3])) / U.from_count(3)
"""

from dataclasses import dataclass
from typing import Any, Dict, Union

import numpy as np

from distances.validation import UnsupportedDtypeError


# Integer and floating dtype kinds. bool, complex, object, str and
# datetime inputs are not Numbers.
NUMBER_KINDS = ('i', 'u', 'f')


class Number:
    """Input capability: values convertible into an accumulator Float."""

    @staticmethod
    def supports(dtype: Any) -> bool:
        """Check whether a dtype can act as a Number."""
        return np.dtype(dtype).kind in NUMBER_KINDS

    @staticmethod
    def coerce(xs: Any) -> np.ndarray:
        """
        View an input vector as a 1-D numpy array of Numbers.

        Parameters
        ----------
        xs : array-like
            Ordered sequence of integers or floats

        Returns
        -------
        np.ndarray
            1-D array, not copied when already an ndarray

        Raises
        ------
        UnsupportedDtypeError
            If the input is not one-dimensional or not numeric
        """
        arr = np.asarray(xs)
        if arr.ndim != 1:
            raise UnsupportedDtypeError(
                f"Expected a 1-D vector, got array with shape {arr.shape}"
            )
        if arr.size == 0:
            return arr.astype(np.float64)
        if not Number.supports(arr.dtype):
            raise UnsupportedDtypeError(
                f"Unsupported input dtype '{arr.dtype}' "
                f"(expected an integer or floating dtype)"
            )
        return arr


@dataclass(frozen=True)
class Float:
    """
    Accumulator capability over a numpy floating scalar type.

    Results are numpy scalars of ``type`` so precision is carried through
    every step of a computation.
    """
    type: type

    def __post_init__(self):
        if not (isinstance(self.type, type) and issubclass(self.type, np.floating)):
            raise UnsupportedDtypeError(
                f"Accumulator must be a numpy floating type, got {self.type!r}"
            )

    @property
    def name(self) -> str:
        return f"f{np.dtype(self.type).itemsize * 8}"

    @property
    def epsilon(self):
        return np.finfo(self.type).eps

    def from_count(self, n: int):
        return self.type(n)

    def from_numbers(self, xs: Any) -> np.ndarray:
        """Convert a vector of Numbers into the accumulator precision."""
        return Number.coerce(xs).astype(self.type, copy=False)

    def one(self):
        return self.type(1)

    def zero(self):
        return self.type(0)

    def sum(self, values: Any):
        """
        Sum a sequence of accumulator values.

        The reduction runs strictly left to right, so a result does not
        depend on how numpy would block the array for a pairwise sum.
        """
        values = np.asarray(values, dtype=self.type)
        if values.size == 0:
            return self.zero()
        return np.cumsum(values, dtype=self.type)[-1]

    def powi(self, values: Any, n: int):
        return values ** int(n)

    def sqrt(self, value: Any):
        return np.sqrt(value)


F32 = Float(np.float32)
F64 = Float(np.float64)

_FLOATS_BY_NAME: Dict[str, Float] = {
    'f32': F32,
    'float32': F32,
    'single': F32,
    'f64': F64,
    'float64': F64,
    'double': F64,
}

FloatLike = Union[None, str, type, np.dtype, Float]


def resolve_float(dtype: FloatLike = None) -> Float:
    """
    Resolve an accumulator dtype into a Float.

    Args:
        dtype: None (float64), a Float, a name ('f32', 'f64', 'float32',
            'float64', 'single', 'double'), np.float32 / np.float64 or
            the equivalent np.dtype

    Returns:
        Float

    Raises:
        UnsupportedDtypeError: for anything else
    """
    if dtype is None:
        return F64
    if isinstance(dtype, Float):
        return dtype
    if isinstance(dtype, str):
        key = dtype.strip().lower()
        if key in _FLOATS_BY_NAME:
            return _FLOATS_BY_NAME[key]
        available = ", ".join(sorted(_FLOATS_BY_NAME))
        raise UnsupportedDtypeError(
            f"Unknown accumulator '{dtype}'. Available: {available}"
        )
    try:
        resolved = np.dtype(dtype)
    except TypeError:
        raise UnsupportedDtypeError(f"Unknown accumulator {dtype!r}")
    if resolved == np.float32:
        return F32
    if resolved == np.float64:
        return F64
    raise UnsupportedDtypeError(
        f"Unsupported accumulator dtype '{resolved}' (expected float32 or float64)"
    )
