"""
Linear and log-linear interpolation.
"""
import math
from typing import Sequence

import numpy as np

from .base import Interpolator


class LinearInterpolator(Interpolator):
    """Piecewise-linear interpolation with an exact primitive.

    Used on instantaneous forwards, where the zero yield is the integral of
    the interpolated forward divided by time.
    """

    def __init__(self, pillars: Sequence[float], values: Sequence[float]):
        super().__init__(pillars, values)
        dx = np.diff(self.pillars)
        self.slopes = np.diff(self.values) / dx
        # cumulative integral at each pillar
        self.primitive_const = np.zeros(len(self.pillars))
        for i in range(1, len(self.pillars)):
            step = dx[i - 1]
            self.primitive_const[i] = self.primitive_const[i - 1] + step * (
                self.values[i - 1] + 0.5 * step * self.slopes[i - 1]
            )

    def __call__(self, t: float) -> float:
        i = self._locate(t)
        return float(self.values[i] + (t - self.pillars[i]) * self.slopes[i])

    def derivative(self, t: float) -> float:
        return float(self.slopes[self._locate(t)])

    def primitive(self, t: float) -> float:
        """Integral of the interpolant from the first pillar to t."""
        i = self._locate(t)
        dx = t - self.pillars[i]
        return float(
            self.primitive_const[i] + dx * (self.values[i] + 0.5 * dx * self.slopes[i])
        )


class LogLinearInterpolator(Interpolator):
    """Linear interpolation on the logarithm of positive values.

    On discount factors this gives piecewise-flat instantaneous forwards.
    """

    def __init__(self, pillars: Sequence[float], values: Sequence[float]):
        super().__init__(pillars, values)
        if np.any(self.values <= 0.0):
            raise ValueError("Log-linear interpolation requires positive values")
        self._log_interpolator = LinearInterpolator(self.pillars, np.log(self.values))

    def __call__(self, t: float) -> float:
        return math.exp(self._log_interpolator(t))

    def derivative(self, t: float) -> float:
        return self(t) * self._log_interpolator.derivative(t)
