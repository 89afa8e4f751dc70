"""Tests for option instruments."""

import math

import pytest

from mathfunc import EuropeanOption, MissingInputError, Option, Quote
from mathfunc.models import (
    black_scholes_delta,
    black_scholes_gamma,
    black_scholes_price,
    black_scholes_vega,
)


class TestOptionBase:
    """Option standardizes Maturity and Price."""

    def test_maturity(self):
        assert Option("o", 0.5).Maturity() == 0.5

    def test_price_defaults_to_zero(self):
        assert Option("o", 1.0).Price() == 0.0

    def test_missing_maturity_builds(self):
        option = Option("o")
        assert option.Price() == 0.0

    def test_missing_maturity_fails_on_read(self):
        option = Option("o")
        with pytest.raises(MissingInputError) as exc_info:
            option.Maturity()
        assert exc_info.value.attribute == "Maturity"

    def test_maturity_can_be_supplied_later(self):
        option = Option("o")
        option.Maturity = 2.0
        assert option.Maturity() == 2.0

    def test_price_can_be_bound(self):
        option = Option("o", 2.0)
        option.Price = lambda: option.Maturity() * 3.0
        assert option.Price() == 6.0

    def test_maturity_linked(self):
        tenor = Quote("tenor", 1.0)
        option = Option("o", tenor.Value)
        tenor.Value = 0.25
        assert option.Maturity() == 0.25


class TestEuropeanOptionDefaults:
    """Default inputs of EuropeanOption."""

    def setup_method(self):
        self.option = EuropeanOption("o", maturity=1.0)

    def test_default_spot(self):
        assert self.option.Spot() == 100.0

    def test_default_strike(self):
        assert self.option.Strike() == 100.0

    def test_default_volatility(self):
        assert self.option.Volatility() == 0.20

    def test_default_rate(self):
        assert self.option.Rate() == 0.05

    def test_default_dividend(self):
        assert self.option.Dividend() == 0.0

    def test_default_is_call(self):
        assert self.option.is_call is True

    def test_is_an_option(self):
        assert isinstance(self.option, Option)
        assert "Maturity" in EuropeanOption.attribute_names()


class TestEuropeanOptionPricing:
    """Black-Scholes pricing through the attribute graph."""

    def test_known_call_value(self):
        call = EuropeanOption("c", maturity=1.0)
        assert call.Price() == pytest.approx(10.4506, abs=1e-4)

    def test_known_put_value(self):
        put = EuropeanOption("p", maturity=1.0, is_call=False)
        assert put.Price() == pytest.approx(5.5735, abs=1e-4)

    def test_matches_model(self):
        option = EuropeanOption(
            "o", maturity=0.5, spot=105.0, strike=100.0, volatility=0.25, rate=0.03, dividend=0.01
        )
        expected = black_scholes_price(105.0, 100.0, 0.03, 0.01, 0.25, 0.5, True)
        assert option.Price() == pytest.approx(expected)

    def test_put_call_parity(self):
        kwargs = dict(maturity=1.0, spot=100.0, strike=95.0, volatility=0.3, rate=0.05, dividend=0.02)
        call = EuropeanOption("c", is_call=True, **kwargs)
        put = EuropeanOption("p", is_call=False, **kwargs)

        expected = 100.0 * math.exp(-0.02) - 95.0 * math.exp(-0.05)
        assert call.Price() - put.Price() == pytest.approx(expected, rel=1e-9)

    def test_price_changes_with_spot(self):
        call = EuropeanOption("c", maturity=1.0)
        price_100 = call.Price()
        call.Spot = 110.0
        assert call.Price() > price_100

    def test_linked_spot(self):
        underlying = Quote("SPX", 100.0)
        call = EuropeanOption("c", maturity=1.0, spot=underlying.Value)
        put = EuropeanOption("p", maturity=1.0, spot=underlying.Value, is_call=False)
        call_before, put_before = call.Price(), put.Price()

        underlying.Value = 90.0
        assert call.Price() < call_before
        assert put.Price() > put_before

    def test_intrinsic_value_itm_call(self):
        call = EuropeanOption("c", maturity=1.0, spot=110.0)
        assert call.IntrinsicValue() == pytest.approx(10.0)

    def test_intrinsic_value_otm_put(self):
        put = EuropeanOption("p", maturity=1.0, spot=110.0, is_call=False)
        assert put.IntrinsicValue() == 0.0

    def test_time_value(self):
        call = EuropeanOption("c", maturity=1.0, spot=110.0)
        assert call.TimeValue() == pytest.approx(call.Price() - 10.0)
        assert call.TimeValue() > 0

    def test_expired(self):
        call = EuropeanOption("c", maturity=0.0, spot=110.0)
        assert call.Price() == pytest.approx(10.0)

    def test_missing_maturity(self):
        call = EuropeanOption("c")
        with pytest.raises(MissingInputError):
            call.Price()

        call.Maturity = 1.0
        assert call.Price() == pytest.approx(10.4506, abs=1e-4)


class TestEuropeanOptionGreeks:
    """Closed-form Greeks."""

    @pytest.fixture
    def call(self):
        return EuropeanOption("c", maturity=0.75, spot=102.0, strike=100.0, volatility=0.22, rate=0.04)

    def test_delta(self, call):
        expected = black_scholes_delta(102.0, 100.0, 0.04, 0.0, 0.22, 0.75, True)
        assert call.Delta() == pytest.approx(expected)
        assert 0 < call.Delta() < 1

    def test_put_delta_negative(self):
        put = EuropeanOption("p", maturity=1.0, is_call=False)
        assert -1 < put.Delta() < 0

    def test_gamma(self, call):
        expected = black_scholes_gamma(102.0, 100.0, 0.04, 0.0, 0.22, 0.75)
        assert call.Gamma() == pytest.approx(expected)
        assert call.Gamma() > 0

    def test_vega(self, call):
        expected = black_scholes_vega(102.0, 100.0, 0.04, 0.0, 0.22, 0.75)
        assert call.Vega() == pytest.approx(expected)

    def test_greeks_follow_inputs(self, call):
        before = call.Delta()
        call.Spot = 120.0
        assert call.Delta() > before
