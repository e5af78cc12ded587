"""
Implied term structure: an underlying curve rebased to a later reference date.
"""

from datetime import date
from typing import Optional, Union

from ficcgraph.conventions.calendars import Calendar
from ficcgraph.conventions.daycount import DayCountConvention
from ficcgraph.patterns.handle import Handle, as_handle

from .yield_curve import YieldTermStructure


class ImpliedTermStructure(YieldTermStructure):
    """Curve seen from ``reference_date`` instead of the underlying's reference.

    ``discount(t) = underlying.discount(R + t) / underlying.discount(R)``, so
    the absolute discount factors of the underlying are reproduced:
    ``underlying.discount(d) == underlying.discount(R) * implied.discount(d)``.

    Day counter, calendar, settlement days and max date come from the
    underlying. An empty handle is accepted; reads then raise
    NullReferenceError until it is linked.
    """

    def __init__(self, underlying: Union[YieldTermStructure, Handle], reference_date: date):
        super().__init__(reference_date=reference_date)
        self._original = as_handle(underlying)
        self.register_with(self._original)

    def underlying(self) -> Handle:
        return self._original

    def day_counter(self) -> DayCountConvention:
        return self._original.current_link().day_counter()

    def calendar(self) -> Optional[Calendar]:
        return self._original.current_link().calendar()

    def settlement_days(self) -> Optional[int]:
        return self._original.current_link().settlement_days()

    def max_date(self) -> date:
        return self._original.current_link().max_date()

    def allows_extrapolation(self) -> bool:
        return self._extrapolate or self._original.current_link().allows_extrapolation()

    def _discount_impl(self, t: float) -> float:
        original = self._original.current_link()
        ref = self.reference_date()
        # time of our reference date on the underlying's time axis
        offset = self.day_counter().year_fraction(original.reference_date(), ref)
        return original.discount(t + offset, True) / original.discount(offset, True)
