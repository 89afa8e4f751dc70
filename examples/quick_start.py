#!/usr/bin/env python3
"""
Quick Start - Wire instruments to a shared quote and watch them reprice.

Usage:
    python examples/quick_start.py
"""

import logging

from mathfunc import Bond, EuropeanOption, Quote


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # One market quote drives two bonds
    curve = Quote("5Y yield", 0.05)
    zero = Bond("5Y zero", face=1000, ytm=curve.Value, maturity=5)
    coupon = Bond("5Y 6%", face=1000, ytm=curve.Value, maturity=5, coupon=0.06)

    price = zero.Price  # a live handle, not a number

    print(f"Yield {curve.Value():.2%}")
    print(f"  {zero.name}: ${price():,.4f}")
    print(f"  {coupon.name}: ${coupon.Price():,.4f}  (duration {coupon.Duration():.3f}y)")

    curve.Value = 0.04
    print(f"Yield {curve.Value():.2%}")
    print(f"  {zero.name}: ${price():,.4f}")
    print(f"  {coupon.name}: ${coupon.Price():,.4f}  (duration {coupon.Duration():.3f}y)")

    # Options link the same way
    spot = Quote("SPX", 4500.0)
    call = EuropeanOption("SPX 4600C", maturity=0.5, spot=spot.Value, strike=4600.0, volatility=0.18)

    print()
    print(f"{call.name} @ {spot.Value():,.0f}: ${call.Price():,.2f}  delta {call.Delta():.3f}")
    spot.Value = 4650.0
    print(f"{call.name} @ {spot.Value():,.0f}: ${call.Price():,.2f}  delta {call.Delta():.3f}")


if __name__ == "__main__":
    main()
