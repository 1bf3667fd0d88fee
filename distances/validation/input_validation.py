"""
Input Validation

Exception hierarchy and the optional guards callers can apply around the
primitives. The primitives themselves never raise on degenerate numbers:
empty or constant vectors come back as NaN, mismatched lengths are truncated.

Usage:
    from distances.validation import check_lengths, is_degenerate

    n = check_lengths(x, y)          # raises LengthMismatchError
    if is_degenerate(pearson(x, y)):
        ...
"""

from typing import Any, Sized

import numpy as np


class ValidationError(ValueError):
    """Base class for input contract violations."""


class LengthMismatchError(ValidationError):
    """Raised when two index-aligned vectors have different lengths."""

    def __init__(self, left: int, right: int):
        self.left = left
        self.right = right
        super().__init__(
            f"Vectors must have equal length, got {left} and {right}"
        )


class UnsupportedDtypeError(ValidationError, TypeError):
    """Raised when an input cannot act as a Number or accumulator Float."""


def check_lengths(x: Sized, y: Sized) -> int:
    """
    Require two vectors to be index-aligned.

    Args:
        x, y: Vectors (anything with len())

    Returns:
        The common length

    Raises:
        LengthMismatchError: if the lengths differ
    """
    n_x, n_y = len(x), len(y)
    if n_x != n_y:
        raise LengthMismatchError(n_x, n_y)
    return n_x


def is_degenerate(value: Any) -> bool:
    """True for the NaN / infinity sentinels produced by degenerate input."""
    return not bool(np.isfinite(value))
