"""
QuantLib-backed day count conventions.

Term structures only consume ``year_fraction``; the actual day counting is
delegated to QuantLib.
"""

from datetime import date, datetime
from typing import Union

import QuantLib as ql

from .dates import to_ql_date


class DayCountConvention:
    """Base class for QuantLib-backed day count conventions."""

    def __init__(self, name: str, ql_daycount: ql.DayCounter):
        self.name = name
        self._ql_daycount = ql_daycount

    def year_fraction(
        self, start: Union[date, datetime], end: Union[date, datetime]
    ) -> float:
        """Year fraction between two dates; negative when end precedes start."""
        return self._ql_daycount.yearFraction(to_ql_date(start), to_ql_date(end))

    def day_count(
        self, start: Union[date, datetime], end: Union[date, datetime]
    ) -> int:
        return self._ql_daycount.dayCount(to_ql_date(start), to_ql_date(end))

    def __eq__(self, other) -> bool:
        return isinstance(other, DayCountConvention) and other.name == self.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Actual360(DayCountConvention):
    """ACT/360, money-market convention."""

    def __init__(self):
        super().__init__("ACT/360", ql.Actual360())


class Actual365Fixed(DayCountConvention):
    """ACT/365F."""

    def __init__(self):
        super().__init__("ACT/365F", ql.Actual365Fixed())


class Thirty360European(DayCountConvention):
    """30E/360."""

    def __init__(self):
        super().__init__("30E/360", ql.Thirty360(ql.Thirty360.European))


class Thirty360US(DayCountConvention):
    """30U/360 (bond basis)."""

    def __init__(self):
        super().__init__("30U/360", ql.Thirty360(ql.Thirty360.BondBasis))


class ActualActualISDA(DayCountConvention):
    """ACT/ACT ISDA."""

    def __init__(self):
        super().__init__("ACT/ACT", ql.ActualActual(ql.ActualActual.ISDA))


ACT_360 = Actual360()
ACT_365F = Actual365Fixed()
THIRTY_360E = Thirty360European()
THIRTY_360U = Thirty360US()
ACT_ACT = ActualActualISDA()

DAY_COUNT_CONVENTIONS = {
    "ACT/360": ACT_360,
    "ACTUAL/360": ACT_360,
    "ACT/365F": ACT_365F,
    "ACT/365": ACT_365F,
    "ACTUAL/365F": ACT_365F,
    "30E/360": THIRTY_360E,
    "30/360E": THIRTY_360E,
    "30U/360": THIRTY_360U,
    "30/360": THIRTY_360U,
    "ACT/ACT": ACT_ACT,
    "ACTUAL/ACTUAL": ACT_ACT,
    "ACT/ACT ISDA": ACT_ACT,
}


def get_day_count_convention(
    name: Union[str, DayCountConvention],
) -> DayCountConvention:
    """Get a day count convention by name (instances are passed through)."""
    if isinstance(name, DayCountConvention):
        return name
    name_upper = name.upper()
    if name_upper not in DAY_COUNT_CONVENTIONS:
        raise ValueError(
            f"Unknown day count convention: {name}. "
            f"Available: {list(DAY_COUNT_CONVENTIONS.keys())}"
        )
    return DAY_COUNT_CONVENTIONS[name_upper]
