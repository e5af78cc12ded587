"""
Interpolation methods for yield curves.
"""

from .backward_flat import BackwardFlatInterpolator
from .base import Interpolator
from .linear import LinearInterpolator, LogLinearInterpolator

__all__ = [
    "BackwardFlatInterpolator",
    "Interpolator",
    "LinearInterpolator",
    "LogLinearInterpolator",
]
