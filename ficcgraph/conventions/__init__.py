"""
Market conventions: day counts, calendars, compounding and interest rates.
"""

from .calendars import (
    NULL_CALENDAR,
    TARGET,
    WEEKEND_ONLY,
    Calendar,
    NullCalendar,
    TargetCalendar,
    WeekendCalendar,
    get_calendar,
)
from .dates import MAX_DATE, MIN_DATE, to_date
from .daycount import (
    ACT_360,
    ACT_365F,
    ACT_ACT,
    THIRTY_360E,
    THIRTY_360U,
    Actual360,
    Actual365Fixed,
    DayCountConvention,
    get_day_count_convention,
)
from .interest_rate import InterestRate
from .types import (
    BusinessDayAdjustment,
    Compounding,
    Frequency,
    TimeUnit,
    add_period,
    add_tenor,
    parse_tenor,
)

__all__ = [
    "Calendar",
    "TargetCalendar",
    "WeekendCalendar",
    "NullCalendar",
    "TARGET",
    "WEEKEND_ONLY",
    "NULL_CALENDAR",
    "get_calendar",
    "DayCountConvention",
    "Actual360",
    "Actual365Fixed",
    "ACT_360",
    "ACT_365F",
    "ACT_ACT",
    "THIRTY_360E",
    "THIRTY_360U",
    "get_day_count_convention",
    "InterestRate",
    "Compounding",
    "Frequency",
    "TimeUnit",
    "BusinessDayAdjustment",
    "add_period",
    "add_tenor",
    "parse_tenor",
    "to_date",
    "MIN_DATE",
    "MAX_DATE",
]
