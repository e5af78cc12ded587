"""
Base class for curve interpolation methods.
"""
from abc import ABC, abstractmethod
from bisect import bisect_right
from typing import Sequence

import numpy as np


class Interpolator(ABC):
    """Interpolates values given at increasing pillar times."""

    def __init__(self, pillars: Sequence[float], values: Sequence[float]):
        """
        Initialize interpolator.

        Args:
            pillars: Pillar times in years, strictly increasing after sorting
            values: Values to interpolate (forward rates, discount factors, ...)
        """
        if len(pillars) != len(values):
            raise ValueError("Pillars and values must have same length")
        if len(pillars) < 2:
            raise ValueError("Need at least 2 points for interpolation")

        sorted_pairs = sorted(zip(pillars, values))
        self.pillars = np.array([float(p[0]) for p in sorted_pairs])
        self.values = np.array([float(p[1]) for p in sorted_pairs])

        if len(np.unique(self.pillars)) != len(self.pillars):
            raise ValueError("Duplicate pillar dates not allowed")

    def _locate(self, t: float) -> int:
        """Index i of the segment [pillars[i], pillars[i+1]] used for t."""
        n = len(self.pillars)
        i = bisect_right(self.pillars, t, 0, n - 1) - 1
        return min(max(i, 0), n - 2)

    @abstractmethod
    def __call__(self, t: float) -> float:
        """Interpolated value at time t (extrapolating from the end segments)."""
        pass

    def interpolate_many(self, times: Sequence[float]) -> list:
        return [self(t) for t in times]

    def x_min(self) -> float:
        return float(self.pillars[0])

    def x_max(self) -> float:
        return float(self.pillars[-1])
