"""
Quote tests.
"""

import pytest

from ficcgraph.patterns import Flag
from ficcgraph.quotes import Quote, SimpleQuote


def test_unset_quote_is_invalid():
    quote = SimpleQuote()
    assert not quote.is_valid()
    with pytest.raises(ValueError):
        quote.value()


def test_set_value_returns_difference():
    quote = SimpleQuote(0.01)
    assert quote.set_value(0.015) == pytest.approx(0.005)
    assert quote.value() == 0.015


def test_notifies_only_on_change():
    quote = SimpleQuote(0.01)
    flag = Flag()
    flag.register_with(quote)

    quote.set_value(0.01)
    assert not flag.is_up()

    quote.set_value(0.02)
    assert flag.is_up()


def test_reset_invalidates_and_notifies():
    quote = SimpleQuote(0.01)
    flag = Flag()
    flag.register_with(quote)

    quote.reset()

    assert flag.is_up()
    assert not quote.is_valid()


def test_quote_is_abstract():
    with pytest.raises(TypeError):
        Quote()
