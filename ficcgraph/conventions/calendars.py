"""
QuantLib-backed business-day calendars.

Reference-date computation only needs ``adjust`` and ``advance``.
"""

from datetime import date, datetime
from typing import Union

import QuantLib as ql

from .dates import to_ql_date, to_py_date
from .types import BusinessDayAdjustment, TimeUnit

_QL_ADJUSTMENTS = {
    BusinessDayAdjustment.NO_ADJUSTMENT: ql.Unadjusted,
    BusinessDayAdjustment.FOLLOWING: ql.Following,
    BusinessDayAdjustment.MODIFIED_FOLLOWING: ql.ModifiedFollowing,
    BusinessDayAdjustment.PRECEDING: ql.Preceding,
    BusinessDayAdjustment.MODIFIED_PRECEDING: ql.ModifiedPreceding,
}

_QL_UNITS = {
    TimeUnit.DAYS: ql.Days,
    TimeUnit.WEEKS: ql.Weeks,
    TimeUnit.MONTHS: ql.Months,
    TimeUnit.YEARS: ql.Years,
}


class Calendar:
    """Business-day arithmetic delegated to a QuantLib calendar."""

    def __init__(self, name: str, ql_calendar: ql.Calendar):
        self.name = name
        self._ql_calendar = ql_calendar

    def is_business_day(self, dt: Union[date, datetime]) -> bool:
        return self._ql_calendar.isBusinessDay(to_ql_date(dt))

    def is_holiday(self, dt: Union[date, datetime]) -> bool:
        return self._ql_calendar.isHoliday(to_ql_date(dt))

    def adjust(
        self,
        dt: Union[date, datetime],
        convention: BusinessDayAdjustment = BusinessDayAdjustment.FOLLOWING,
    ) -> date:
        """Roll a date onto a business day."""
        adjusted = self._ql_calendar.adjust(to_ql_date(dt), _QL_ADJUSTMENTS[convention])
        return to_py_date(adjusted)

    def advance(
        self,
        dt: Union[date, datetime],
        n: int,
        unit: TimeUnit = TimeUnit.DAYS,
        convention: BusinessDayAdjustment = BusinessDayAdjustment.FOLLOWING,
        end_of_month: bool = False,
    ) -> date:
        """Move a date by ``n`` units; days are counted as business days."""
        result = self._ql_calendar.advance(
            to_ql_date(dt), n, _QL_UNITS[unit], _QL_ADJUSTMENTS[convention], end_of_month
        )
        return to_py_date(result)

    def __eq__(self, other) -> bool:
        return isinstance(other, Calendar) and other.name == self.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return self.name


class TargetCalendar(Calendar):
    """TARGET (Trans-European Automated Real-time Gross settlement Express Transfer) calendar."""

    def __init__(self):
        super().__init__("TARGET", ql.TARGET())


class WeekendCalendar(Calendar):
    """Only weekends are non-business days."""

    def __init__(self):
        super().__init__("WEEKEND", ql.WeekendsOnly())


class NullCalendar(Calendar):
    """Every day is a business day; advancing by days is plain calendar arithmetic."""

    def __init__(self):
        super().__init__("NULL", ql.NullCalendar())


TARGET = TargetCalendar()
WEEKEND_ONLY = WeekendCalendar()
NULL_CALENDAR = NullCalendar()

CALENDARS = {
    "TARGET": TARGET,
    "EUR": TARGET,
    "WEEKEND": WEEKEND_ONLY,
    "NULL": NULL_CALENDAR,
}


def get_calendar(name: Union[str, Calendar]) -> Calendar:
    """Get a calendar by name (instances are passed through)."""
    if isinstance(name, Calendar):
        return name
    key = name.upper()
    if key not in CALENDARS:
        raise ValueError(
            f"Unknown calendar: {name}. Available: {list(CALENDARS.keys())}"
        )
    return CALENDARS[key]
