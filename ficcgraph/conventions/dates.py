"""
Conversions between Python dates and QuantLib dates.
"""

from datetime import date, datetime
from typing import Union

import QuantLib as ql

DateLike = Union[date, datetime]

# QuantLib's representable range
MIN_DATE = date(1901, 1, 1)
MAX_DATE = date(2199, 12, 31)


def to_date(dt: DateLike) -> date:
    """Convert datetime to date if needed."""
    return dt.date() if isinstance(dt, datetime) else dt


def to_ql_date(dt: DateLike) -> ql.Date:
    """Convert Python date/datetime to QuantLib Date."""
    py_date = to_date(dt)
    return ql.Date(py_date.day, py_date.month, py_date.year)


def to_py_date(ql_date: ql.Date) -> date:
    """Convert QuantLib Date to Python date."""
    return date(ql_date.year(), ql_date.month(), ql_date.dayOfMonth())
