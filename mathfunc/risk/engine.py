"""RiskEngine for batch risk calculations.

Example:
    from mathfunc import Bond, EuropeanOption
    from mathfunc.risk import RiskEngine

    engine = RiskEngine()
    engine.add(option, name="SPX_4600C")
    engine.add(bond, name="UST_5Y")

    greeks = engine.compute_greeks()
    print(greeks["SPX_4600C"]["delta"])

    stress = engine.stress_test(Spot=-0.10)
    print(stress["SPX_4600C"])
"""

import logging
from typing import Any, Callable, Dict, Optional

from ..core import EvaluationError, MathObject, scenario
from ..instruments import Option
from .sensitivities import (
    DEFAULT_BUMP,
    delta,
    dv01,
    effective_convexity,
    effective_duration,
    gamma,
    rho,
    theta,
    vega,
)

logger = logging.getLogger(__name__)


def _measures(inst: MathObject, bump: float) -> Dict[str, Callable[[], float]]:
    """Risk measures applicable to ``inst``, keyed by result name."""
    names = set(inst.attribute_names())
    measures: Dict[str, Callable[[], float]] = {}
    if "Price" not in names:
        return measures

    if "Spot" in names:
        measures["delta"] = lambda: delta(inst, bump)
        measures["gamma"] = lambda: gamma(inst, bump)
    if "Volatility" in names:
        measures["vega"] = lambda: vega(inst, bump)
    if isinstance(inst, Option):
        measures["theta"] = lambda: theta(inst)
    if "Rate" in names:
        measures["rho"] = lambda: rho(inst, bump)
    if "YieldToMaturity" in names:
        measures["dv01"] = lambda: dv01(inst)
        measures["effective_duration"] = lambda: effective_duration(inst)
        measures["effective_convexity"] = lambda: effective_convexity(inst)
    return measures


class RiskEngine:
    """Batch risk calculations across multiple instruments.

    Example:
        engine = RiskEngine()
        engine.add(call, "SPX_4600C")
        engine.add(bond, "UST_5Y")

        for name, metrics in engine.compute_greeks().items():
            print(f"{name}: {metrics}")

        engine.stress_test(Spot=-0.10, Volatility=0.05)
    """

    def __init__(self):
        """Initialize an empty RiskEngine."""
        self._instruments: Dict[str, MathObject] = {}

    def add(self, instrument: MathObject, name: Optional[str] = None) -> None:
        """Register an instrument for risk calculation.

        Args:
            instrument: Any MathObject exposing a Price attribute
            name: Identifier for this instrument (instrument.name if None)
        """
        if name is None:
            name = instrument.name or f"inst_{len(self._instruments)}"
        self._instruments[name] = instrument

    def remove(self, name: str) -> None:
        """Remove an instrument from the engine.

        Raises:
            KeyError: If instrument not found
        """
        if name not in self._instruments:
            raise KeyError(f"Instrument '{name}' not found")
        del self._instruments[name]

    def clear(self) -> None:
        """Remove all instruments from the engine."""
        self._instruments.clear()

    @property
    def instruments(self) -> Dict[str, MathObject]:
        """Return registered instruments."""
        return self._instruments.copy()

    def compute_greeks(self, bump: float = DEFAULT_BUMP) -> Dict[str, Dict[str, float]]:
        """Compute every applicable risk measure for each instrument.

        Options get delta/gamma/vega/theta/rho, bonds get dv01 and
        effective duration/convexity. A measure whose evaluation fails
        is logged and left out of the result.

        Returns:
            dict mapping instrument name to dict of measures
        """
        results: Dict[str, Dict[str, float]] = {}
        for name, inst in self._instruments.items():
            results[name] = {}
            for measure, compute in _measures(inst, bump).items():
                try:
                    results[name][measure] = compute()
                except EvaluationError as exc:
                    logger.warning("Skipping %s for %s: %s", measure, name, exc)
        return results

    def stress_test(self, **shocks: float) -> Dict[str, Dict[str, Any]]:
        """Apply relative shocks to named inputs of every instrument.

        Args:
            **shocks: Relative shocks by input name,
                      e.g. Spot=-0.10, YieldToMaturity=0.20

        Returns:
            dict mapping instrument name to result dict with:
                - base_price: Price before shock
                - stressed_price: Price after shock
                - price_impact: Change in price
                - price_impact_pct: Change relative to base price
            An instrument that cannot be priced gets {"error": message}
            instead and is logged.
        """
        results: Dict[str, Dict[str, Any]] = {}

        for name, inst in self._instruments.items():
            if not inst.has_attribute("Price"):
                results[name] = {"error": "No Price attribute"}
                continue

            try:
                base_price = inst.Price()
                with scenario():
                    for input_name, shock in shocks.items():
                        if inst.has_attribute(input_name):
                            current_value = inst.evaluate(input_name)
                            inst.bind(input_name, current_value * (1 + shock))
                    stressed_price = inst.Price()
            except EvaluationError as exc:
                logger.warning("Stress test failed for %s: %s", name, exc)
                results[name] = {"error": str(exc)}
                continue

            results[name] = {
                "base_price": base_price,
                "stressed_price": stressed_price,
                "price_impact": stressed_price - base_price,
                "price_impact_pct": (stressed_price - base_price) / base_price if base_price else 0,
            }

        return results

    def summary(self) -> Dict[str, Any]:
        """Counts and names of registered instruments."""
        return {
            "count": len(self._instruments),
            "instruments": list(self._instruments.keys()),
        }
