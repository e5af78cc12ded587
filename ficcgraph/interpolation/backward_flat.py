"""
Backward-flat interpolation.
"""
from typing import Sequence

import numpy as np

from .base import Interpolator


class BackwardFlatInterpolator(Interpolator):
    """Piecewise-constant interpolation taking the value of the right pillar.

    On instantaneous forwards each node rate applies over the period ending
    at that node, the usual output of a forward-rate bootstrap.
    """

    def __init__(self, pillars: Sequence[float], values: Sequence[float]):
        super().__init__(pillars, values)
        dx = np.diff(self.pillars)
        self.primitive_const = np.zeros(len(self.pillars))
        for i in range(1, len(self.pillars)):
            self.primitive_const[i] = self.primitive_const[i - 1] + dx[i - 1] * self.values[i]

    def __call__(self, t: float) -> float:
        if t <= self.pillars[0]:
            return float(self.values[0])
        i = self._locate(t)
        if t == self.pillars[i]:
            return float(self.values[i])
        return float(self.values[i + 1])

    def derivative(self, t: float) -> float:
        return 0.0

    def primitive(self, t: float) -> float:
        """Integral of the interpolant from the first pillar to t."""
        i = self._locate(t)
        return float(self.primitive_const[i] + (t - self.pillars[i]) * self.values[i + 1])
