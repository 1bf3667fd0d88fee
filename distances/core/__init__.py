"""
Core Engines.

Collection-level computations built on the primitives.
"""

from . import pairwise
from . import frame

__all__ = ['pairwise', 'frame']
