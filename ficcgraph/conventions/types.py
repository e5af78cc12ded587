"""
Basic enums and tenor arithmetic used across term structures.
"""

import re
from datetime import date
from enum import Enum

from dateutil.relativedelta import relativedelta


class Compounding(Enum):
    """Interest compounding rules."""

    SIMPLE = "SIMPLE"  # 1 + r t
    COMPOUNDED = "COMPOUNDED"  # (1 + r/f)^(f t)
    CONTINUOUS = "CONTINUOUS"  # exp(r t)
    SIMPLE_THEN_COMPOUNDED = "SIMPLE_THEN_COMPOUNDED"


class Frequency(Enum):
    """Compounding frequencies, valued as periods per year."""

    NO_FREQUENCY = -1
    ONCE = 0
    ANNUAL = 1
    SEMIANNUAL = 2
    EVERY_FOURTH_MONTH = 3
    QUARTERLY = 4
    BIMONTHLY = 6
    MONTHLY = 12
    EVERY_FOURTH_WEEK = 13
    BIWEEKLY = 26
    WEEKLY = 52
    DAILY = 365

    def periods_per_year(self) -> int:
        return self.value


class TimeUnit(Enum):
    """Units of a tenor."""

    DAYS = "D"
    WEEKS = "W"
    MONTHS = "M"
    YEARS = "Y"


class BusinessDayAdjustment(Enum):
    """Business day adjustment rules."""

    NO_ADJUSTMENT = "NO_ADJUSTMENT"
    FOLLOWING = "FOLLOWING"
    MODIFIED_FOLLOWING = "MODIFIED_FOLLOWING"
    PRECEDING = "PRECEDING"
    MODIFIED_PRECEDING = "MODIFIED_PRECEDING"


_TENOR_RE = re.compile(r"^\s*(-?\d+)\s*([DWMY])\s*$", re.IGNORECASE)


def parse_tenor(tenor: str) -> tuple[int, TimeUnit]:
    """Split a tenor string such as '3M' or '10Y' into (n, unit)."""
    match = _TENOR_RE.match(tenor)
    if match is None:
        raise ValueError(f"Unsupported tenor: {tenor}")
    return int(match.group(1)), TimeUnit(match.group(2).upper())


def add_period(start: date, n: int, unit: TimeUnit) -> date:
    """Add a tenor to a date without any business-day adjustment.

    Month and year arithmetic clamps to the end of the month
    (e.g. 31 Jan + 1M = 28/29 Feb).
    """
    if unit is TimeUnit.DAYS:
        return start + relativedelta(days=n)
    if unit is TimeUnit.WEEKS:
        return start + relativedelta(weeks=n)
    if unit is TimeUnit.MONTHS:
        return start + relativedelta(months=n)
    return start + relativedelta(years=n)


def add_tenor(start: date, tenor: str) -> date:
    n, unit = parse_tenor(tenor)
    return add_period(start, n, unit)
