"""
Vasicek short-rate model:
    dr = a (b - r) dt + sigma dW,
with market price of risk lambda. Bond prices are affine in the short rate:
    P(t, T) = A(t, T) exp(-B(t, T) r(t)),
    B(t, T) = (1 - exp(-a (T - t))) / a,
    A(t, T) = exp((b + lambda sigma / a - sigma^2 / (2 a^2)) (B - (T - t)) - sigma^2 B^2 / (4 a)).
Bond options follow Jamshidian's closed form (Black formula on the forward
bond price).
"""

import math
from typing import Sequence

import numpy as np
from scipy.stats import norm

from ficcgraph.optimization.constraint import NoConstraint, PositiveConstraint

from .model import AffineModel, CalibratedModel, OptionType
from .parameter import ConstantParameter

# below this mean reversion A and B take their a -> 0 limits
_SMALL_A = 1.0e-12


def black_formula(option_type: OptionType, strike: float, forward: float, std_dev: float) -> float:
    """Undiscounted Black price of an option on a forward."""
    if strike < 0.0 or forward <= 0.0 or std_dev < 0.0:
        raise ValueError(
            f"invalid Black inputs: strike {strike}, forward {forward}, std dev {std_dev}"
        )
    w = option_type.value
    if std_dev == 0.0 or strike == 0.0:
        return max(w * (forward - strike), 0.0)
    d1 = math.log(forward / strike) / std_dev + 0.5 * std_dev
    d2 = d1 - std_dev
    return float(w * (forward * norm.cdf(w * d1) - strike * norm.cdf(w * d2)))


class Vasicek(CalibratedModel, AffineModel):
    """Vasicek model with parameters ``[a, b, sigma, lambda]``.

    Args:
        r0: Short rate at time 0 (not calibrated)
        a: Mean-reversion speed (> 0)
        b: Long-term level
        sigma: Volatility (> 0)
        lambda_: Market price of risk
    """

    def __init__(
        self,
        r0: float = 0.05,
        a: float = 0.1,
        b: float = 0.05,
        sigma: float = 0.01,
        lambda_: float = 0.0,
    ):
        super().__init__(
            [
                ConstantParameter(a, PositiveConstraint(), name="a"),
                ConstantParameter(b, NoConstraint(), name="b"),
                ConstantParameter(sigma, PositiveConstraint(), name="sigma"),
                ConstantParameter(lambda_, NoConstraint(), name="lambda"),
            ]
        )
        self._r0 = r0

    def a(self) -> float:
        return self._arguments[0](0.0)

    def b(self) -> float:
        return self._arguments[1](0.0)

    def sigma(self) -> float:
        return self._arguments[2](0.0)

    def lambda_(self) -> float:
        return self._arguments[3](0.0)

    def r0(self) -> float:
        return self._r0

    def B(self, t: float, T: float) -> float:
        a = self.a()
        tau = T - t
        if a < _SMALL_A:
            return tau
        return (1.0 - math.exp(-a * tau)) / a

    def A(self, t: float, T: float) -> float:
        a, b, sigma, lam = self.a(), self.b(), self.sigma(), self.lambda_()
        sigma2 = sigma * sigma
        tau = T - t
        if a < _SMALL_A:
            return math.exp(-0.5 * lam * sigma * tau * tau + sigma2 * tau ** 3 / 6.0)
        bt = self.B(t, T)
        long_rate = b + lam * sigma / a - 0.5 * sigma2 / (a * a)
        return math.exp((bt - tau) * long_rate - 0.25 * bt * bt * sigma2 / a)

    def discount_bond(self, now: float, maturity: float, factors: Sequence[float]) -> float:
        """Price at ``now`` of a bond maturing at ``maturity``, given the short rate."""
        rate = float(np.atleast_1d(factors)[0])
        return self.A(now, maturity) * math.exp(-self.B(now, maturity) * rate)

    def discount(self, t: float) -> float:
        return self.discount_bond(0.0, t, [self._r0])

    def discount_bond_option(
        self, option_type: OptionType, strike: float, maturity: float, bond_maturity: float
    ) -> float:
        """Option expiring at ``maturity`` on a bond maturing at ``bond_maturity``."""
        if bond_maturity < maturity:
            raise ValueError(
                f"bond maturity {bond_maturity} before option maturity {maturity}"
            )
        a, sigma = self.a(), self.sigma()
        if maturity <= 0.0:
            v = 0.0
        elif a < _SMALL_A:
            v = sigma * self.B(maturity, bond_maturity) * math.sqrt(maturity)
        else:
            v = sigma * self.B(maturity, bond_maturity) * math.sqrt(
                0.5 * (1.0 - math.exp(-2.0 * a * maturity)) / a
            )
        forward = self.discount(bond_maturity)
        k = self.discount(maturity) * strike
        return black_formula(option_type, k, forward, v)
