"""
Spread-adjusted curves: a quoted spread added to the forwards or to the zero
yields of an underlying curve.

Both decorators observe the underlying handle and the spread quote, take
every convention and the reference date from the underlying, and may be
built on an empty handle; reads fail with NullReferenceError until the
handle is linked.
"""

from datetime import date
from typing import Optional, Union

from ficcgraph.conventions.calendars import Calendar
from ficcgraph.conventions.daycount import DayCountConvention
from ficcgraph.conventions.interest_rate import InterestRate
from ficcgraph.conventions.types import Compounding, Frequency
from ficcgraph.patterns.handle import Handle, as_handle
from ficcgraph.quotes import Quote, SimpleQuote

from .yield_curve import ForwardRateStructure, YieldTermStructure, ZeroYieldStructure

SpreadInput = Union[float, Quote, Handle]


def _spread_handle(spread: SpreadInput) -> Handle:
    if isinstance(spread, (int, float)):
        spread = SimpleQuote(spread)
    return as_handle(spread)


class _SpreadedCurveMixin:
    """Delegation of conventions and dates to the underlying curve."""

    _original: Handle
    _spread: Handle

    def underlying(self) -> Handle:
        return self._original

    def spread(self) -> Handle:
        return self._spread

    def day_counter(self) -> DayCountConvention:
        return self._original.current_link().day_counter()

    def calendar(self) -> Optional[Calendar]:
        return self._original.current_link().calendar()

    def settlement_days(self) -> Optional[int]:
        return self._original.current_link().settlement_days()

    def reference_date(self) -> date:
        return self._original.current_link().reference_date()

    def max_date(self) -> date:
        return self._original.current_link().max_date()

    def allows_extrapolation(self) -> bool:
        return self._extrapolate or self._original.current_link().allows_extrapolation()

    def _spread_value(self) -> float:
        return self._spread.current_link().value()


class ForwardSpreadedTermStructure(_SpreadedCurveMixin, ForwardRateStructure):
    """Underlying curve with a spread added to its instantaneous forwards.

    Equivalently, ``discount(t) = underlying.discount(t) * exp(-s t)``.
    """

    def __init__(self, underlying: Union[YieldTermStructure, Handle], spread: SpreadInput):
        super().__init__()
        self._original = as_handle(underlying)
        self._spread = _spread_handle(spread)
        self.register_with(self._original)
        self.register_with(self._spread)

    def _forward_impl(self, t: float) -> float:
        forward = self._original.current_link().forward_rate(
            t,
            t,
            compounding=Compounding.CONTINUOUS,
            frequency=Frequency.NO_FREQUENCY,
            extrapolate=True,
        )
        return forward.rate + self._spread_value()

    def _zero_yield_impl(self, t: float) -> float:
        # average forward spread over [0, t] is the spread itself
        zero = self._original.current_link().zero_rate(
            t,
            compounding=Compounding.CONTINUOUS,
            frequency=Frequency.NO_FREQUENCY,
            extrapolate=True,
        )
        return zero.rate + self._spread_value()


class ZeroSpreadedTermStructure(_SpreadedCurveMixin, ZeroYieldStructure):
    """Underlying curve with a spread added to its zero yields.

    The spread is added under the given compounding/frequency and the result
    converted back to a continuous zero yield.
    """

    def __init__(
        self,
        underlying: Union[YieldTermStructure, Handle],
        spread: SpreadInput,
        compounding: Compounding = Compounding.CONTINUOUS,
        frequency: Frequency = Frequency.NO_FREQUENCY,
    ):
        super().__init__()
        self._original = as_handle(underlying)
        self._spread = _spread_handle(spread)
        self._compounding = compounding
        self._frequency = frequency
        self.register_with(self._original)
        self.register_with(self._spread)

    def _zero_yield_impl(self, t: float) -> float:
        zero = self._original.current_link().zero_rate(
            t, compounding=self._compounding, frequency=self._frequency, extrapolate=True
        )
        spreaded = InterestRate(
            zero.rate + self._spread_value(),
            zero.day_counter,
            zero.compounding,
            zero.frequency,
        )
        return spreaded.equivalent_rate(Compounding.CONTINUOUS, Frequency.NO_FREQUENCY, t).rate
