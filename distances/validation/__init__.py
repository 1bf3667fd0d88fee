"""
Distances Validation Module

Exports:
    - ValidationError: Base class for input contract violations
    - LengthMismatchError: Raised when aligned vectors differ in length
    - UnsupportedDtypeError: Raised for inputs that are not Numbers
    - check_lengths: Require equal-length vectors
    - is_degenerate: Detect NaN / infinity sentinel results
"""

from .input_validation import (
    ValidationError,
    LengthMismatchError,
    UnsupportedDtypeError,
    check_lengths,
    is_degenerate,
)

__all__ = [
    'ValidationError',
    'LengthMismatchError',
    'UnsupportedDtypeError',
    'check_lengths',
    'is_degenerate',
]
