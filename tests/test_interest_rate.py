"""
Interest rate conventions.
"""

import math
from datetime import date

import pytest

from ficcgraph.conventions import ACT_360, ACT_365F, Compounding, Frequency, InterestRate


@pytest.mark.parametrize(
    "compounding, frequency, t, expected",
    [
        (Compounding.SIMPLE, Frequency.ANNUAL, 0.5, 1.0 + 0.04 * 0.5),
        (Compounding.COMPOUNDED, Frequency.SEMIANNUAL, 2.0, (1.0 + 0.04 / 2) ** 4),
        (Compounding.CONTINUOUS, Frequency.NO_FREQUENCY, 3.0, math.exp(0.04 * 3.0)),
        (Compounding.SIMPLE_THEN_COMPOUNDED, Frequency.QUARTERLY, 0.2, 1.0 + 0.04 * 0.2),
        (Compounding.SIMPLE_THEN_COMPOUNDED, Frequency.QUARTERLY, 2.0, (1.0 + 0.01) ** 8),
    ],
)
def test_compound_factor(compounding, frequency, t, expected):
    rate = InterestRate(0.04, ACT_365F, compounding, frequency)
    assert rate.compound_factor(t) == pytest.approx(expected, rel=1e-14)
    assert rate.discount_factor(t) == pytest.approx(1.0 / expected, rel=1e-14)


def test_compound_factor_between_dates():
    rate = InterestRate(0.05, ACT_360, Compounding.SIMPLE)
    start, end = date(2024, 1, 2), date(2024, 7, 1)
    assert rate.compound_factor(start, end) == pytest.approx(1.0 + 0.05 * 181 / 360)


def test_implied_rate_inverts_compound_factor():
    rate = InterestRate(0.037, ACT_365F, Compounding.COMPOUNDED, Frequency.QUARTERLY)
    implied = InterestRate.implied_rate(
        rate.compound_factor(4.25), ACT_365F, Compounding.COMPOUNDED, Frequency.QUARTERLY, 4.25
    )
    assert implied.rate == pytest.approx(0.037, abs=1e-14)


def test_implied_rate_of_unit_compound_is_zero():
    implied = InterestRate.implied_rate(1.0, ACT_365F, Compounding.CONTINUOUS, Frequency.ANNUAL, 0.0)
    assert implied.rate == 0.0


def test_implied_rate_requires_positive_time():
    with pytest.raises(ValueError):
        InterestRate.implied_rate(1.01, ACT_365F, Compounding.CONTINUOUS, Frequency.ANNUAL, 0.0)


def test_equivalent_rate():
    continuous = InterestRate(0.05, ACT_365F, Compounding.CONTINUOUS, Frequency.NO_FREQUENCY)
    annual = continuous.equivalent_rate(Compounding.COMPOUNDED, Frequency.ANNUAL, 2.0)
    assert annual.rate == pytest.approx(math.exp(0.05) - 1.0, abs=1e-14)
    assert annual.compound_factor(2.0) == pytest.approx(continuous.compound_factor(2.0))


def test_compounded_rate_needs_a_frequency():
    with pytest.raises(ValueError):
        InterestRate(0.05, ACT_365F, Compounding.COMPOUNDED, Frequency.NO_FREQUENCY)


def test_negative_time_rejected():
    with pytest.raises(ValueError):
        InterestRate(0.05).compound_factor(-1.0)
