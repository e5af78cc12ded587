"""
Composite zero-yield curve: two curves combined pointwise through their zero rates.
"""

from datetime import date
from typing import Callable, Optional, Union

from ficcgraph.conventions.calendars import Calendar
from ficcgraph.conventions.daycount import DayCountConvention
from ficcgraph.conventions.interest_rate import InterestRate
from ficcgraph.conventions.types import Compounding, Frequency
from ficcgraph.patterns.handle import Handle, as_handle

from .yield_curve import YieldTermStructure, ZeroYieldStructure

BinaryFunction = Callable[[float, float], float]


class CompositeZeroYieldStructure(ZeroYieldStructure):
    """Zero yield ``f(z1(t), z2(t))`` of two underlying curves.

    Both zero rates are taken under the caller's ``compounding`` and
    ``frequency`` before being combined, and the combined rate is converted
    back to a continuous yield. The day counter defaults to the first
    curve's; the calendar is always the first curve's.

    Both curves must share their reference date; a mismatch is reported as a
    ValueError on the first read needing the reference date.

    Example:
        >>> basis = CompositeZeroYieldStructure(curve1, curve2, lambda a, b: a - b)
    """

    def __init__(
        self,
        curve1: Union[YieldTermStructure, Handle],
        curve2: Union[YieldTermStructure, Handle],
        f: BinaryFunction,
        compounding: Compounding = Compounding.CONTINUOUS,
        frequency: Frequency = Frequency.NO_FREQUENCY,
        day_counter: Union[str, DayCountConvention, None] = None,
    ):
        super().__init__(day_counter=day_counter)
        self._curve1 = as_handle(curve1)
        self._curve2 = as_handle(curve2)
        self._f = f
        self._compounding = compounding
        self._frequency = frequency
        self.register_with(self._curve1)
        self.register_with(self._curve2)

    def curves(self) -> tuple:
        return self._curve1, self._curve2

    def day_counter(self) -> DayCountConvention:
        if self._day_counter is not None:
            return self._day_counter
        return self._curve1.current_link().day_counter()

    def calendar(self) -> Optional[Calendar]:
        return self._curve1.current_link().calendar()

    def settlement_days(self) -> Optional[int]:
        return self._curve1.current_link().settlement_days()

    def reference_date(self) -> date:
        ref1 = self._curve1.current_link().reference_date()
        ref2 = self._curve2.current_link().reference_date()
        if ref1 != ref2:
            raise ValueError(
                f"composite curve inputs have different reference dates: {ref1} and {ref2}"
            )
        return ref1

    def max_date(self) -> date:
        return min(
            self._curve1.current_link().max_date(),
            self._curve2.current_link().max_date(),
        )

    def allows_extrapolation(self) -> bool:
        return self._extrapolate or self._curve1.current_link().allows_extrapolation()

    def _zero_yield_impl(self, t: float) -> float:
        zero1 = self._curve1.current_link().zero_rate(
            t, compounding=self._compounding, frequency=self._frequency, extrapolate=True
        )
        zero2 = self._curve2.current_link().zero_rate(
            t, compounding=self._compounding, frequency=self._frequency, extrapolate=True
        )
        combined = InterestRate(
            self._f(zero1.rate, zero2.rate),
            self.day_counter(),
            self._compounding,
            self._frequency,
        )
        return combined.equivalent_rate(Compounding.CONTINUOUS, Frequency.NO_FREQUENCY, t).rate
