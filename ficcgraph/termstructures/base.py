"""
Term structure base class: reference date, day counter and range checks.

A term structure gets its reference date in one of three ways:

- fixed: passed at construction;
- moving: evaluation date advanced by ``settlement_days`` on ``calendar``,
  recomputed lazily after the evaluation date changes;
- derived: subclasses (decorators) override ``reference_date`` and read it
  from an underlying curve.
"""

import logging
from datetime import date
from typing import Optional, Union

from ficcgraph.conventions.calendars import NULL_CALENDAR, Calendar, get_calendar
from ficcgraph.conventions.dates import MAX_DATE, to_date
from ficcgraph.conventions.daycount import DayCountConvention, get_day_count_convention
from ficcgraph.conventions.types import TimeUnit
from ficcgraph.patterns.observable import Observable, Observer
from ficcgraph.settings import settings

logger = logging.getLogger(__name__)

DateOrTime = Union[date, float]


class TermStructure(Observer, Observable):
    """Base class for curves; both observes its inputs and is observed."""

    def __init__(
        self,
        day_counter: Union[str, DayCountConvention, None] = None,
        reference_date: Optional[date] = None,
        settlement_days: Optional[int] = None,
        calendar: Union[str, Calendar, None] = None,
    ):
        """
        Args:
            day_counter: Convention turning dates into curve times
            reference_date: Fixed reference date
            settlement_days: Business days between evaluation and reference
                date; makes the reference date move with the evaluation date
            calendar: Calendar used to advance by ``settlement_days``
        """
        Observer.__init__(self)
        Observable.__init__(self)
        if reference_date is not None and settlement_days is not None:
            raise ValueError("give either a reference date or settlement days, not both")
        self._day_counter = (
            get_day_count_convention(day_counter) if day_counter is not None else None
        )
        self._calendar = get_calendar(calendar) if calendar is not None else None
        self._settlement_days = settlement_days
        self._moving = settlement_days is not None
        self._reference_date = to_date(reference_date) if reference_date is not None else None
        self._updated = reference_date is not None
        self._extrapolate = False
        if self._moving:
            if self._calendar is None:
                self._calendar = NULL_CALENDAR
            self.register_with(settings.evaluation_date_observable())

    # --- conventions -------------------------------------------------------

    def day_counter(self) -> DayCountConvention:
        if self._day_counter is None:
            raise ValueError(f"{type(self).__name__} has no day counter")
        return self._day_counter

    def calendar(self) -> Optional[Calendar]:
        return self._calendar

    def settlement_days(self) -> Optional[int]:
        return self._settlement_days

    def reference_date(self) -> date:
        """Date at which discount equals 1 (curve time zero)."""
        if not self._updated:
            if not self._moving:
                raise ValueError(f"{type(self).__name__} has no reference date")
            self._reference_date = self._calendar.advance(
                settings.evaluation_date, self._settlement_days, TimeUnit.DAYS
            )
            self._updated = True
        return self._reference_date

    def max_date(self) -> date:
        return MAX_DATE

    def max_time(self) -> float:
        return self.time_from_reference(self.max_date())

    def time_from_reference(self, d: date) -> float:
        return self.day_counter().year_fraction(self.reference_date(), to_date(d))

    # --- extrapolation -----------------------------------------------------

    def enable_extrapolation(self, enabled: bool = True) -> None:
        self._extrapolate = enabled

    def disable_extrapolation(self) -> None:
        self._extrapolate = False

    def allows_extrapolation(self) -> bool:
        return self._extrapolate

    def _check_range(self, t: float, extrapolate: bool) -> None:
        if t < 0.0:
            raise ValueError(f"negative time ({t}) given")
        if not (extrapolate or self.allows_extrapolation()) and t > self.max_time():
            raise ValueError(
                f"time ({t}) is past max curve time ({self.max_time()}) "
                f"of {type(self).__name__}"
            )

    def _check_date_range(self, d: date, extrapolate: bool) -> None:
        d = to_date(d)
        ref = self.reference_date()
        if d < ref:
            raise ValueError(f"date ({d}) before reference date ({ref})")
        if not (extrapolate or self.allows_extrapolation()) and d > self.max_date():
            raise ValueError(f"date ({d}) is past max curve date ({self.max_date()})")

    # --- notification ------------------------------------------------------

    def update(self) -> None:
        """Mark the reference date stale (moving curves) and notify observers."""
        if self._moving:
            self._updated = False
        logger.debug("%s notified", type(self).__name__)
        self.notify_observers()

    def __str__(self) -> str:
        return type(self).__name__
