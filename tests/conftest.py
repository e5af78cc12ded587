"""
Shared fixtures: a fixed evaluation date and a synthetic EUR discount curve.
"""

from datetime import date

import pytest

from ficcgraph.conventions import ACT_360, TARGET, TimeUnit, add_tenor
from ficcgraph.settings import SavedSettings, settings
from ficcgraph.termstructures import InterpolatedDiscountCurve, discounts_from_zero_rates

SETTLEMENT_DAYS = 2

# (tenor, continuously-compounded zero rate)
CURVE_NODES = [
    ("1M", 0.04581),
    ("2M", 0.04573),
    ("3M", 0.04557),
    ("6M", 0.04496),
    ("9M", 0.04490),
    ("1Y", 0.04540),
    ("5Y", 0.04990),
    ("10Y", 0.05470),
    ("20Y", 0.05890),
    ("30Y", 0.05960),
]


@pytest.fixture(autouse=True)
def evaluation_date():
    """Pin the evaluation date for the test and restore it afterwards."""
    with SavedSettings():
        today = TARGET.adjust(date(2024, 3, 15))
        settings.evaluation_date = today
        yield today


def build_curve(today: date) -> InterpolatedDiscountCurve:
    settlement = TARGET.advance(today, SETTLEMENT_DAYS, TimeUnit.DAYS)
    dates = [settlement] + [add_tenor(settlement, tenor) for tenor, _ in CURVE_NODES]
    times = [ACT_360.year_fraction(settlement, d) for d in dates]
    rates = [CURVE_NODES[0][1]] + [rate for _, rate in CURVE_NODES]
    discounts = discounts_from_zero_rates(times, rates)
    return InterpolatedDiscountCurve(dates, discounts, ACT_360, TARGET)


@pytest.fixture
def term_structure(evaluation_date):
    return build_curve(evaluation_date)


@pytest.fixture
def dummy_term_structure(evaluation_date):
    return build_curve(evaluation_date)
