#!/usr/bin/env python3
"""
Bond Risk Analysis - Duration, convexity and DV01 by formula and by repricing.

This example demonstrates:
1. Closed-form duration, modified duration and convexity
2. Duration-convexity approximation vs actual repricing
3. DV01 analytic vs bump-and-reval
4. A small book linked to one yield quote, stressed through a RiskEngine

Yields are per coupon period; the bonds here pay annually.

Run: python examples/bond_risk_analysis.py
"""

import logging

from mathfunc import Bond, Quote, risk, scenario
from mathfunc.risk import RiskEngine


def create_bond(name: str, face: float = 1000.0, coupon: float = 0.05,
                maturity: float = 10.0, ytm=0.04) -> Bond:
    """Create an annual-pay bond."""
    return Bond(name, face=face, ytm=ytm, maturity=maturity, coupon=coupon, frequency=1)


def key_metrics(bond: Bond):
    print("\n" + "=" * 70)
    print(f"  KEY METRICS: {bond.name}")
    print("=" * 70)

    print(f"    Face Value:        ${bond.FaceValue():,.0f}")
    print(f"    Coupon Rate:       {bond.CouponRate()*100:.1f}%")
    print(f"    Maturity:          {bond.Maturity():.0f} years")
    print(f"    YTM:               {bond.YieldToMaturity()*100:.2f}%")
    print(f"    Price:             ${bond.Price():,.2f}")
    print(f"    Macaulay Duration: {bond.Duration():.3f} years")
    print(f"    Modified Duration: {bond.ModifiedDuration():.3f}")
    print(f"    Convexity:         {bond.Convexity():.2f}")
    print(f"    DV01:              ${bond.DV01():.4f}")


def duration_convexity_approximation(bond: Bond):
    """Compare duration/convexity approximation to actual repricing."""
    print("\n" + "=" * 70)
    print("  DURATION-CONVEXITY APPROXIMATION vs ACTUAL REPRICING")
    print("=" * 70)

    base_price = bond.Price()
    base_ytm = bond.YieldToMaturity()
    md = bond.ModifiedDuration()
    conv = bond.Convexity()

    print(f"\n  Formula: dP/P = -MD x dy + 0.5 x Convexity x dy^2")
    print("\n  " + "-" * 62)
    print(f"  {'Yield Chg':>10} {'Actual':>12} {'Duration':>12} {'Dur+Conv':>12} {'Error':>10}")
    print("  " + "-" * 62)

    for dyield_pct in [-1.0, -0.5, -0.25, 0.25, 0.5, 1.0, 2.0]:
        dy = dyield_pct / 100

        with scenario():
            bond.YieldToMaturity = base_ytm + dy
            actual_change = bond.Price() - base_price

        duration_change = base_price * -md * dy
        durconv_change = base_price * (-md * dy + 0.5 * conv * dy ** 2)
        error = durconv_change - actual_change

        print(f"  {dyield_pct:>+9.2f}% ${actual_change:>+11.2f} "
              f"${duration_change:>+11.2f} ${durconv_change:>+11.2f} ${error:>+9.2f}")


def dv01_analysis(bond: Bond):
    print("\n" + "=" * 70)
    print("  DV01: ANALYTIC vs BUMP-AND-REVAL")
    print("=" * 70)

    print(f"    Analytic DV01:       ${bond.DV01():.4f}")
    print(f"    Numerical DV01:      ${risk.dv01(bond):.4f}")
    print(f"    Effective duration:  {risk.effective_duration(bond):.4f}")
    print(f"    Effective convexity: {risk.effective_convexity(bond):.2f}")


def linked_book():
    """Three bonds priced off one yield quote."""
    print("\n" + "=" * 70)
    print("  LINKED BOOK")
    print("=" * 70)

    curve = Quote("flat yield", 0.04)
    bonds = [
        create_bond("2Y 3%", maturity=2.0, coupon=0.03, ytm=curve.Value),
        create_bond("10Y 5%", maturity=10.0, coupon=0.05, ytm=curve.Value),
        create_bond("30Y 4.5%", maturity=30.0, coupon=0.045, ytm=curve.Value),
    ]

    engine = RiskEngine()
    for bond in bonds:
        engine.add(bond)

    for move in (0.0, 0.01, -0.01):
        curve.Value = 0.04 + move
        total = sum(b.Price() for b in bonds)
        print(f"    Yield {curve.Value()*100:.2f}%: book value ${total:,.2f}")
    curve.Value = 0.04

    print("\n    Stress: yields +25% relative")
    for name, result in engine.stress_test(YieldToMaturity=0.25).items():
        print(f"      {name:<10} {result['price_impact']:>+10.2f} ({result['price_impact_pct']:+.2%})")

    print("\n    Risk measures")
    for name, metrics in engine.compute_greeks().items():
        print(f"      {name:<10} DV01 ${metrics['dv01']:.4f}  eff. duration {metrics['effective_duration']:.3f}")


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    print("=" * 70)
    print("  BOND RISK ANALYSIS")
    print("=" * 70)

    bond = create_bond("10Y 5%")
    key_metrics(bond)
    duration_convexity_approximation(bond)
    dv01_analysis(bond)
    linked_book()


if __name__ == "__main__":
    main()
