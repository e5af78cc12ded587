"""
Yield term structures.

Every rate query is derived from ``discount``; subclasses only provide
``_discount_impl(t)`` (or the zero-yield / forward hooks of the two
intermediate bases below).
"""

import math
from abc import abstractmethod
from datetime import date
from typing import Optional

from scipy import integrate

from ficcgraph.conventions.daycount import DayCountConvention
from ficcgraph.conventions.interest_rate import InterestRate
from ficcgraph.conventions.types import Compounding, Frequency

from .base import DateOrTime, TermStructure

# step used for instantaneous rates
DT = 1.0e-4


class YieldTermStructure(TermStructure):
    """Interest-rate curve built on a discount function."""

    def discount(self, x: DateOrTime, extrapolate: bool = False) -> float:
        """Discount factor at a date or at a time from the reference date."""
        t = self.time_from_reference(x) if isinstance(x, date) else float(x)
        self._check_range(t, extrapolate)
        return self._discount_impl(t)

    @abstractmethod
    def _discount_impl(self, t: float) -> float:
        """Discount factor at time t; no range checking."""
        pass

    def zero_rate(
        self,
        x: DateOrTime,
        day_counter: Optional[DayCountConvention] = None,
        compounding: Compounding = Compounding.CONTINUOUS,
        frequency: Frequency = Frequency.ANNUAL,
        extrapolate: bool = False,
    ) -> InterestRate:
        """Zero rate from the reference date to a date (or time).

        ``day_counter`` is only used for dates; times are always measured
        with the curve's own day counter.
        """
        if isinstance(x, date):
            dc = day_counter or self.day_counter()
            ref = self.reference_date()
            if x == ref:
                compound = 1.0 / self.discount(DT, extrapolate)
                return InterestRate.implied_rate(compound, dc, compounding, frequency, DT)
            compound = 1.0 / self.discount(x, extrapolate)
            return InterestRate.implied_rate(compound, dc, compounding, frequency, ref, x)

        t = float(x) if x != 0.0 else DT
        compound = 1.0 / self.discount(t, extrapolate)
        return InterestRate.implied_rate(
            compound, self.day_counter(), compounding, frequency, t
        )

    def forward_rate(
        self,
        x1: DateOrTime,
        x2: DateOrTime,
        day_counter: Optional[DayCountConvention] = None,
        compounding: Compounding = Compounding.CONTINUOUS,
        frequency: Frequency = Frequency.ANNUAL,
        extrapolate: bool = False,
    ) -> InterestRate:
        """Forward rate between two dates (or times).

        Equal endpoints give the instantaneous forward, estimated over a
        ``DT``-wide interval centred on the point (clamped at the reference).
        """
        if isinstance(x1, date):
            dc = day_counter or self.day_counter()
            if x1 == x2:
                self._check_date_range(x1, extrapolate)
                t1 = max(self.time_from_reference(x1) - DT / 2.0, 0.0)
                t2 = t1 + DT
                compound = self.discount(t1, True) / self.discount(t2, True)
                return InterestRate.implied_rate(compound, dc, compounding, frequency, DT)
            if x1 > x2:
                raise ValueError(f"{x1} later than {x2}")
            compound = self.discount(x1, extrapolate) / self.discount(x2, extrapolate)
            return InterestRate.implied_rate(compound, dc, compounding, frequency, x1, x2)

        t1, t2 = float(x1), float(x2)
        if t1 == t2:
            self._check_range(t1, extrapolate)
            t1 = max(t1 - DT / 2.0, 0.0)
            t2 = t1 + DT
            compound = self.discount(t1, True) / self.discount(t2, True)
        else:
            if t1 > t2:
                raise ValueError(f"t2 ({t2}) < t1 ({t1})")
            compound = self.discount(t1, extrapolate) / self.discount(t2, extrapolate)
        return InterestRate.implied_rate(
            compound, self.day_counter(), compounding, frequency, t2 - t1
        )


class ZeroYieldStructure(YieldTermStructure):
    """Curve defined by its continuously-compounded zero yield."""

    def _discount_impl(self, t: float) -> float:
        if t == 0.0:
            return 1.0
        return math.exp(-self._zero_yield_impl(t) * t)

    @abstractmethod
    def _zero_yield_impl(self, t: float) -> float:
        pass


class ForwardRateStructure(YieldTermStructure):
    """Curve defined by its instantaneous forward rate."""

    def _discount_impl(self, t: float) -> float:
        if t == 0.0:
            return 1.0
        return math.exp(-self._zero_yield_impl(t) * t)

    @abstractmethod
    def _forward_impl(self, t: float) -> float:
        pass

    def _zero_yield_impl(self, t: float) -> float:
        """Average of the forward over [0, t]; override when closed-form."""
        if t == 0.0:
            return self._forward_impl(0.0)
        integral, _ = integrate.quad(self._forward_impl, 0.0, t, limit=200)
        return integral / t
