"""Tests for the mathfunc.risk module."""

import logging

import pytest

from mathfunc import Bond, EuropeanOption, Quote, risk
from mathfunc.risk import RiskEngine


@pytest.fixture
def atm_option():
    """An ATM call with one year to expiry."""
    return EuropeanOption("ATM", maturity=1.0, spot=100.0, strike=100.0, volatility=0.20, rate=0.05)


@pytest.fixture
def annual_bond():
    """An annual-pay 10Y bond; yields are per period, so per year here."""
    return Bond("10Y", face=1000, ytm=0.045, maturity=10, coupon=0.05, frequency=1)


class TestSensitivity:
    """Tests for the core sensitivity function."""

    def test_sensitivity_basic(self, atm_option):
        sens = risk.sensitivity(atm_option, "Spot", "Price", bump=0.01)
        assert sens > 0

    def test_absolute_vs_relative(self, atm_option):
        sens_abs = risk.sensitivity(atm_option, "Spot", bump=1.0, bump_type="absolute")
        sens_rel = risk.sensitivity(atm_option, "Spot", bump=0.01, bump_type="relative")
        assert sens_abs == pytest.approx(sens_rel)

    def test_unknown_bump_type(self, atm_option):
        with pytest.raises(ValueError):
            risk.sensitivity(atm_option, "Spot", bump_type="log")

    def test_unknown_attribute(self, atm_option):
        with pytest.raises(AttributeError):
            risk.sensitivity(atm_option, "Carry")

    def test_inputs_restored(self, atm_option):
        price = atm_option.Price()
        risk.sensitivity(atm_option, "Spot")
        assert atm_option.Spot() == 100.0
        assert atm_option.Price() == price

    def test_links_restored(self):
        spot = Quote("spot", 100.0)
        option = EuropeanOption("o", maturity=1.0, spot=spot.Value)
        risk.delta(option)

        spot.Value = 120.0
        assert option.Spot() == 120.0

    def test_bumped_value(self, annual_bond):
        bumped = risk.bumped_value(annual_bond, "YieldToMaturity", 0.05)
        assert bumped == pytest.approx(1000.0)
        assert annual_bond.YieldToMaturity() == 0.045


class TestGreeks:
    """Numerical Greeks against the closed forms."""

    def test_delta_matches_closed_form(self, atm_option):
        assert abs(risk.delta(atm_option) - atm_option.Delta()) < 0.001

    def test_gamma_matches_closed_form(self, atm_option):
        assert abs(risk.gamma(atm_option) - atm_option.Gamma()) < 0.0001

    def test_vega_matches_closed_form(self, atm_option):
        assert abs(risk.vega(atm_option) - atm_option.Vega()) < 0.01

    def test_theta_negative_for_long_call(self, atm_option):
        assert risk.theta(atm_option) < 0

    def test_rho_positive_for_call(self, atm_option):
        assert risk.rho(atm_option) > 0

    def test_delta_negative_for_put(self):
        put = EuropeanOption("p", maturity=1.0, is_call=False)
        assert risk.delta(put) < 0


class TestBondRisk:
    """Yield sensitivities against the closed-form bond measures."""

    def test_dv01(self, annual_bond):
        assert risk.dv01(annual_bond) == pytest.approx(annual_bond.DV01(), rel=2e-3)

    def test_effective_duration(self, annual_bond):
        assert risk.effective_duration(annual_bond) == pytest.approx(
            annual_bond.ModifiedDuration(), rel=1e-4
        )

    def test_effective_convexity(self, annual_bond):
        assert risk.effective_convexity(annual_bond) == pytest.approx(
            annual_bond.Convexity(), rel=1e-3
        )

    def test_zero_coupon_duration(self):
        bond = Bond("zero", face=1000, ytm=0.05, maturity=5)
        assert risk.effective_duration(bond) == pytest.approx(5 / 1.05, rel=1e-5)


class TestRiskEngine:
    """Tests for RiskEngine."""

    @pytest.fixture
    def engine(self, atm_option, annual_bond):
        engine = RiskEngine()
        engine.add(atm_option, "ATM_C")
        engine.add(annual_bond)
        return engine

    def test_add_uses_instrument_name(self, engine):
        assert set(engine.instruments) == {"ATM_C", "10Y"}

    def test_summary(self, engine):
        assert engine.summary() == {"count": 2, "instruments": ["ATM_C", "10Y"]}

    def test_remove(self, engine):
        engine.remove("10Y")
        assert list(engine.instruments) == ["ATM_C"]
        with pytest.raises(KeyError):
            engine.remove("10Y")

    def test_clear(self, engine):
        engine.clear()
        assert engine.summary()["count"] == 0

    def test_compute_greeks(self, engine, atm_option):
        greeks = engine.compute_greeks()
        assert set(greeks["ATM_C"]) == {"delta", "gamma", "vega", "theta", "rho"}
        assert set(greeks["10Y"]) == {"dv01", "effective_duration", "effective_convexity"}
        assert abs(greeks["ATM_C"]["delta"] - atm_option.Delta()) < 0.001

    def test_failed_measures_logged_and_skipped(self, caplog):
        engine = RiskEngine()
        engine.add(EuropeanOption("no maturity"))
        with caplog.at_level(logging.WARNING, logger="mathfunc.risk.engine"):
            greeks = engine.compute_greeks()
        assert greeks == {"no maturity": {}}
        assert "Skipping delta" in caplog.text

    def test_stress_test(self, engine, atm_option, annual_bond):
        base_option = atm_option.Price()
        base_bond = annual_bond.Price()

        results = engine.stress_test(Spot=-0.10, YieldToMaturity=0.20)

        assert results["ATM_C"]["base_price"] == base_option
        assert results["ATM_C"]["price_impact"] < 0
        assert results["10Y"]["stressed_price"] < base_bond
        assert results["10Y"]["price_impact_pct"] < 0

        # Shocks are undone
        assert atm_option.Spot() == 100.0
        assert annual_bond.Price() == base_bond

    def test_stress_without_price(self):
        engine = RiskEngine()
        engine.add(Quote("q", 1.0))
        assert engine.stress_test(Value=0.1) == {"q": {"error": "No Price attribute"}}

    def test_stress_skips_unpriceable_instrument(self, caplog):
        engine = RiskEngine()
        engine.add(Bond("bad", face=0, ytm=-1.0))
        engine.add(Bond("good", face=1000, ytm=0.05, maturity=5))

        with caplog.at_level(logging.WARNING, logger="mathfunc.risk.engine"):
            results = engine.stress_test(YieldToMaturity=0.1)

        assert set(results["bad"]) == {"error"}
        assert "bad.Price" in results["bad"]["error"]
        assert results["good"]["price_impact"] < 0
        assert "Stress test failed for bad" in caplog.text
