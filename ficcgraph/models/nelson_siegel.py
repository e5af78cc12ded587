"""
Nelson-Siegel yield model:
    y(0,T) = beta0 + beta1 * h(T) + beta2 * (h(T) - exp(-T/tau)),
where h(T) = (1 - exp(-T/tau)) / (T/tau).

The four coefficients form the calibrated parameter vector; tau is kept
positive through a log transform during calibration.
"""

import math

from ficcgraph.optimization.constraint import NoConstraint, PositiveConstraint

from .model import CalibratedModel
from .parameter import ConstantParameter, PositiveTransform


class NelsonSiegelModel(CalibratedModel):
    """Parametric zero curve with parameters ``[beta0, beta1, beta2, tau]``.

    Example:
        >>> model = NelsonSiegelModel(0.04, -0.02, 0.01, 2.0)
        >>> model.discount(5.0)
    """

    def __init__(self, beta0: float, beta1: float, beta2: float, tau: float):
        super().__init__(
            [
                ConstantParameter(beta0, NoConstraint(), name="beta0"),
                ConstantParameter(beta1, NoConstraint(), name="beta1"),
                ConstantParameter(beta2, NoConstraint(), name="beta2"),
                ConstantParameter(tau, PositiveConstraint(), PositiveTransform(), name="tau"),
            ]
        )

    def coefficients(self):
        return tuple(p(0.0) for p in self._arguments)

    def _h(self, T: float, tau: float) -> float:
        if T == 0.0:
            return 1.0
        x = T / tau
        if abs(x) < 1e-6:
            return 1.0 - 0.5 * x + x * x / 6.0
        return (1.0 - math.exp(-x)) / x

    def zero_rate(self, T: float) -> float:
        """Continuously-compounded zero yield to T."""
        if T < 0:
            raise ValueError("T must be >= 0")
        beta0, beta1, beta2, tau = self.coefficients()
        h = self._h(T, tau)
        return beta0 + beta1 * h + beta2 * (h - math.exp(-T / tau))

    def forward_rate(self, t: float) -> float:
        """Instantaneous forward f(0,t) = beta0 + beta1 e^{-x} + beta2 x e^{-x}, x = t/tau."""
        if t < 0:
            raise ValueError("t must be >= 0")
        beta0, beta1, beta2, tau = self.coefficients()
        x = t / tau
        e = math.exp(-x)
        return beta0 + beta1 * e + beta2 * x * e

    def discount(self, T: float) -> float:
        if T < 0:
            raise ValueError("T must be >= 0")
        if T == 0.0:
            return 1.0
        return math.exp(-self.zero_rate(T) * T)
