"""
Curves interpolated between dated nodes.

The first node date is the reference date of the curve and the last one its
max date. These curves stand in for bootstrapped (piecewise) curves: the
bootstrapping itself happens elsewhere, only its output nodes are needed.
"""

import logging
import math
from datetime import date
from typing import List, Sequence, Tuple, Type, Union

from ficcgraph.conventions.calendars import Calendar
from ficcgraph.conventions.dates import to_date
from ficcgraph.conventions.daycount import DayCountConvention
from ficcgraph.interpolation import (
    BackwardFlatInterpolator,
    Interpolator,
    LinearInterpolator,
    LogLinearInterpolator,
)

from .yield_curve import ForwardRateStructure, YieldTermStructure, ZeroYieldStructure

logger = logging.getLogger(__name__)


class _NodeCurveMixin:
    """Node bookkeeping shared by the interpolated curves."""

    def _init_nodes(self, dates: Sequence[date], values: Sequence[float]) -> None:
        if len(dates) != len(values):
            raise ValueError("Dates and values must have same length")
        if len(dates) < 2:
            raise ValueError("Need at least 2 nodes")
        self._dates = [to_date(d) for d in dates]
        for prev, nxt in zip(self._dates, self._dates[1:]):
            if nxt <= prev:
                raise ValueError(f"Node dates must be increasing: {prev} >= {nxt}")
        self._times = [self.time_from_reference(d) for d in self._dates]
        self._data = [float(v) for v in values]

    def dates(self) -> List[date]:
        return list(self._dates)

    def times(self) -> List[float]:
        return list(self._times)

    def data(self) -> List[float]:
        return list(self._data)

    def nodes(self) -> List[Tuple[date, float]]:
        return list(zip(self._dates, self._data))

    def max_date(self) -> date:
        return self._dates[-1]


class InterpolatedDiscountCurve(_NodeCurveMixin, YieldTermStructure):
    """Log-linear interpolation of discount factors (piecewise-flat forwards)."""

    def __init__(
        self,
        dates: Sequence[date],
        discounts: Sequence[float],
        day_counter: Union[str, DayCountConvention],
        calendar: Union[str, Calendar, None] = None,
    ):
        super().__init__(day_counter, reference_date=dates[0], calendar=calendar)
        if discounts[0] != 1.0:
            raise ValueError(f"Initial discount factor must be 1.0, got {discounts[0]}")
        for i, df in enumerate(discounts):
            if df <= 0:
                raise ValueError(f"Discount factor at node {i} must be positive: {df}")
        self._init_nodes(dates, discounts)
        self._interpolation = LogLinearInterpolator(self._times, self._data)
        logger.debug("Built %s with %s nodes", type(self).__name__, len(self._dates))

    def _discount_impl(self, t: float) -> float:
        return self._interpolation(t)


class InterpolatedForwardCurve(_NodeCurveMixin, ForwardRateStructure):
    """Interpolated instantaneous forwards; flat beyond the last node.

    Forwards are linear between nodes unless another ``interpolator`` with an
    exact ``primitive`` is given.
    """

    def __init__(
        self,
        dates: Sequence[date],
        forwards: Sequence[float],
        day_counter: Union[str, DayCountConvention],
        calendar: Union[str, Calendar, None] = None,
        interpolator: Type[Interpolator] = LinearInterpolator,
    ):
        super().__init__(day_counter, reference_date=dates[0], calendar=calendar)
        self._init_nodes(dates, forwards)
        self._interpolation = interpolator(self._times, self._data)

    def _forward_impl(self, t: float) -> float:
        if t <= self._times[-1]:
            return self._interpolation(t)
        return self._data[-1]

    def _zero_yield_impl(self, t: float) -> float:
        if t == 0.0:
            return self._forward_impl(0.0)
        t_max = self._times[-1]
        if t <= t_max:
            integral = self._interpolation.primitive(t)
        else:
            integral = self._interpolation.primitive(t_max) + self._data[-1] * (t - t_max)
        return integral / t


class ForwardCurve(InterpolatedForwardCurve):
    """Backward-flat instantaneous forwards: each node rate holds up to its date."""

    def __init__(
        self,
        dates: Sequence[date],
        forwards: Sequence[float],
        day_counter: Union[str, DayCountConvention],
        calendar: Union[str, Calendar, None] = None,
    ):
        super().__init__(
            dates, forwards, day_counter, calendar, interpolator=BackwardFlatInterpolator
        )


class InterpolatedZeroCurve(_NodeCurveMixin, ZeroYieldStructure):
    """Linear interpolation of continuously-compounded zero yields."""

    def __init__(
        self,
        dates: Sequence[date],
        yields: Sequence[float],
        day_counter: Union[str, DayCountConvention],
        calendar: Union[str, Calendar, None] = None,
    ):
        super().__init__(day_counter, reference_date=dates[0], calendar=calendar)
        self._init_nodes(dates, yields)
        self._interpolation = LinearInterpolator(self._times, self._data)

    def _zero_yield_impl(self, t: float) -> float:
        t_max = self._times[-1]
        if t <= t_max:
            return self._interpolation(t)
        # flat forward beyond the last node
        z_max = self._data[-1]
        forward_max = z_max + t_max * self._interpolation.derivative(t_max)
        return (z_max * t_max + forward_max * (t - t_max)) / t


def discounts_from_zero_rates(times: Sequence[float], rates: Sequence[float]) -> List[float]:
    """Continuous-compounding discount factors for (time, zero rate) pairs."""
    return [math.exp(-r * t) for t, r in zip(times, rates)]
