"""
Interest rate with its compounding convention.

``compound_factor`` implements the compounding formulas; ``implied_rate`` is
their inverse and is what term structures use to turn discount factors into
zero and forward rates.
"""

import math
from dataclasses import dataclass
from datetime import date
from typing import Optional, Union

from .daycount import DayCountConvention
from .types import Compounding, Frequency


def _check_frequency(compounding: Compounding, frequency: Frequency) -> None:
    if compounding in (Compounding.COMPOUNDED, Compounding.SIMPLE_THEN_COMPOUNDED):
        if frequency in (Frequency.ONCE, Frequency.NO_FREQUENCY):
            raise ValueError(f"{frequency.name} frequency not allowed for this interest rate")


@dataclass(frozen=True)
class InterestRate:
    """Rate plus the conventions needed to turn it into compound factors.

    Attributes:
        rate: Rate in decimal (0.03 for 3%)
        day_counter: Day count used for date-based accrual
        compounding: Compounding rule
        frequency: Compounding frequency (ignored for SIMPLE/CONTINUOUS)
    """

    rate: float
    day_counter: Optional[DayCountConvention] = None
    compounding: Compounding = Compounding.CONTINUOUS
    frequency: Frequency = Frequency.ANNUAL

    def __post_init__(self):
        _check_frequency(self.compounding, self.frequency)

    def __float__(self) -> float:
        return self.rate

    def compound_factor(self, t: Union[float, date], end: Optional[date] = None) -> float:
        """Growth of one unit over time ``t`` (or between dates ``t`` and ``end``)."""
        if end is not None:
            t = self.day_counter.year_fraction(t, end)
        if t < 0.0:
            raise ValueError(f"negative time ({t}) not allowed")
        r = self.rate
        f = self.frequency.value
        if self.compounding is Compounding.SIMPLE:
            return 1.0 + r * t
        if self.compounding is Compounding.COMPOUNDED:
            return (1.0 + r / f) ** (f * t)
        if self.compounding is Compounding.CONTINUOUS:
            return math.exp(r * t)
        if t <= 1.0 / f:
            return 1.0 + r * t
        return (1.0 + r / f) ** (f * t)

    def discount_factor(self, t: Union[float, date], end: Optional[date] = None) -> float:
        return 1.0 / self.compound_factor(t, end)

    @staticmethod
    def implied_rate(
        compound: float,
        day_counter: Optional[DayCountConvention],
        compounding: Compounding,
        frequency: Frequency,
        t: Union[float, date],
        end: Optional[date] = None,
    ) -> "InterestRate":
        """Rate that produces ``compound`` over ``t`` (or between two dates)."""
        if end is not None:
            t = day_counter.year_fraction(t, end)
        if compound <= 0.0:
            raise ValueError(f"positive compound factor required, got {compound}")
        _check_frequency(compounding, frequency)
        if compound == 1.0:
            if t < 0.0:
                raise ValueError(f"non-negative time ({t}) required")
            return InterestRate(0.0, day_counter, compounding, frequency)
        if t <= 0.0:
            raise ValueError(f"positive time ({t}) required")
        f = frequency.value
        if compounding is Compounding.SIMPLE:
            r = (compound - 1.0) / t
        elif compounding is Compounding.COMPOUNDED:
            r = (compound ** (1.0 / (f * t)) - 1.0) * f
        elif compounding is Compounding.CONTINUOUS:
            r = math.log(compound) / t
        elif t <= 1.0 / f:
            r = (compound - 1.0) / t
        else:
            r = (compound ** (1.0 / (f * t)) - 1.0) * f
        return InterestRate(r, day_counter, compounding, frequency)

    def equivalent_rate(
        self, compounding: Compounding, frequency: Frequency, t: float
    ) -> "InterestRate":
        """Same growth over ``t`` expressed under another convention."""
        return InterestRate.implied_rate(
            self.compound_factor(t), self.day_counter, compounding, frequency, t
        )

    def __str__(self) -> str:
        dc = self.day_counter.name if self.day_counter is not None else "no day counter"
        label = self.compounding.name.lower().replace("_", " ")
        if self.compounding in (Compounding.COMPOUNDED, Compounding.SIMPLE_THEN_COMPOUNDED):
            label += f" {self.frequency.name.lower()}"
        return f"{self.rate * 100:.6f} % {dc} {label}"
