"""
Flat forward curve.
"""

from datetime import date
from typing import Optional, Union

from ficcgraph.conventions.calendars import Calendar
from ficcgraph.conventions.daycount import DayCountConvention
from ficcgraph.conventions.interest_rate import InterestRate
from ficcgraph.conventions.types import Compounding, Frequency
from ficcgraph.patterns.handle import Handle, as_handle
from ficcgraph.quotes import Quote, SimpleQuote

from .yield_curve import YieldTermStructure


class FlatForward(YieldTermStructure):
    """Curve with a single rate for all maturities.

    The rate can be a number or an observable quote (bare or in a handle);
    the curve observes the quote and notifies on every change.

    Example:
        >>> rate = SimpleQuote(0.03)
        >>> curve = FlatForward(rate, "ACT/360", settlement_days=2, calendar="NULL")
    """

    def __init__(
        self,
        forward: Union[float, Quote, Handle],
        day_counter: Union[str, DayCountConvention],
        reference_date: Optional[date] = None,
        settlement_days: Optional[int] = None,
        calendar: Union[str, Calendar, None] = None,
        compounding: Compounding = Compounding.CONTINUOUS,
        frequency: Frequency = Frequency.ANNUAL,
    ):
        super().__init__(day_counter, reference_date, settlement_days, calendar)
        if isinstance(forward, (int, float)):
            forward = SimpleQuote(forward)
        self._forward = as_handle(forward)
        self._compounding = compounding
        self._frequency = frequency
        self.register_with(self._forward)

    def forward_quote(self) -> Handle:
        return self._forward

    def _rate(self) -> InterestRate:
        return InterestRate(
            self._forward.current_link().value(),
            self.day_counter(),
            self._compounding,
            self._frequency,
        )

    def _discount_impl(self, t: float) -> float:
        return self._rate().discount_factor(t)
