"""
Vasicek closed-form prices.
"""

import math

import pytest

from ficcgraph.models import OptionType, Vasicek, black_formula
from ficcgraph.optimization import SizeMismatchError


@pytest.fixture
def model():
    return Vasicek(r0=0.03, a=0.15, b=0.05, sigma=0.01, lambda_=0.1)


def test_discount_at_zero_is_one(model):
    assert model.discount(0.0) == pytest.approx(1.0, abs=1e-15)


def test_discount_is_bond_price_at_time_zero(model):
    assert model.discount(7.0) == pytest.approx(model.discount_bond(0.0, 7.0, [0.03]))


def test_short_end_yield_is_short_rate(model):
    t = 1e-4
    assert -math.log(model.discount(t)) / t == pytest.approx(0.03, abs=1e-5)


def test_long_end_yield(model):
    a, b, sigma, lam = 0.15, 0.05, 0.01, 0.1
    long_rate = b + lam * sigma / a - 0.5 * sigma * sigma / (a * a)
    t = 10000.0
    assert -math.log(model.discount(t)) / t == pytest.approx(long_rate, abs=1e-4)


def test_zero_volatility_is_deterministic_mean_reversion():
    model = Vasicek(r0=0.03, a=0.5, b=0.06, sigma=1e-12, lambda_=0.0)
    t = 3.0
    # integral of r(s) = b + (r0 - b) exp(-a s)
    integral = 0.06 * t + (0.03 - 0.06) * (1.0 - math.exp(-0.5 * t)) / 0.5
    assert model.discount(t) == pytest.approx(math.exp(-integral), rel=1e-12)


def test_parameter_accessors_follow_set_params(model):
    model.set_params([0.2, 0.04, 0.02, 0.0])
    assert (model.a(), model.b(), model.sigma(), model.lambda_()) == (0.2, 0.04, 0.02, 0.0)
    with pytest.raises(SizeMismatchError):
        model.set_params([0.2, 0.04])


def test_constructor_rejects_non_positive_volatility():
    with pytest.raises(ValueError):
        Vasicek(sigma=0.0)


def test_put_call_parity(model):
    strike, expiry, maturity = 0.8, 2.0, 7.0
    call = model.discount_bond_option(OptionType.CALL, strike, expiry, maturity)
    put = model.discount_bond_option(OptionType.PUT, strike, expiry, maturity)
    parity = model.discount(maturity) - strike * model.discount(expiry)
    assert call - put == pytest.approx(parity, abs=1e-12)
    assert call > 0.0 and put > 0.0


def test_option_at_expiry_is_intrinsic(model):
    strike = 0.9
    value = model.discount_bond_option(OptionType.CALL, strike, 0.0, 5.0)
    assert value == pytest.approx(max(model.discount(5.0) - strike, 0.0))


def test_option_on_bond_maturing_before_expiry_rejected(model):
    with pytest.raises(ValueError):
        model.discount_bond_option(OptionType.CALL, 0.9, 5.0, 2.0)


def test_black_formula():
    assert black_formula(OptionType.CALL, 1.0, 1.0, 0.0) == 0.0
    assert black_formula(OptionType.PUT, 1.2, 1.0, 0.0) == pytest.approx(0.2)
    # at the money: F (2 N(s/2) - 1)
    atm = black_formula(OptionType.CALL, 1.0, 1.0, 0.2)
    assert atm == pytest.approx(0.0796557, abs=1e-6)


def test_vanishing_mean_reversion_takes_the_limit():
    tau = 5.0
    frozen = Vasicek(r0=0.03, a=1e-14, b=0.05, sigma=0.01, lambda_=0.1)
    slow = Vasicek(r0=0.03, a=1e-5, b=0.05, sigma=0.01, lambda_=0.1)

    a_limit = frozen.A(0.0, tau)
    assert math.isfinite(a_limit)
    assert a_limit == pytest.approx(
        math.exp(-0.5 * 0.1 * 0.01 * tau ** 2 + 0.01 ** 2 * tau ** 3 / 6.0), rel=1e-14
    )
    assert a_limit == pytest.approx(slow.A(0.0, tau), rel=1e-3)
    assert frozen.discount(tau) == pytest.approx(slow.discount(tau), rel=1e-3)
    option = frozen.discount_bond_option(OptionType.CALL, 0.9, 1.0, tau)
    expected = slow.discount_bond_option(OptionType.CALL, 0.9, 1.0, tau)
    assert option == pytest.approx(expected, rel=1e-2)
