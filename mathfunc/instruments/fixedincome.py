"""Fixed income instruments."""

import math
from typing import Iterator

from ..core import MathObject, attribute, formula

DEFAULT_FACE_VALUE = 100.0
DEFAULT_YIELD = 0.0
DEFAULT_MATURITY = 1.0
DEFAULT_PRICING_TIME = 0.0
DEFAULT_COUPON_RATE = 0.0
DEFAULT_FREQUENCY = 1.0


def coupon_periods(n: float) -> Iterator[int]:
    """Coupon period indices 1, 2, ... up to and including n."""
    if n < 1:
        return iter(())
    return iter(range(1, math.floor(n) + 1))


class Bond(MathObject):
    """
    Bond with or without coupons.

    Every input may be a number, another object's attribute, or omitted
    for the default. Price, duration and convexity follow the inputs
    live: rebinding any input changes them on the next read.

    Example:
        bond = Bond("3Y 5%", face=1000, ytm=0.04, maturity=3, coupon=0.05)

        print(bond.Price())             # 1027.75
        print(bond.Duration())          # Macaulay duration, years
        print(bond.ModifiedDuration())
        print(bond.Convexity())

        bond.YieldToMaturity = 0.05
        print(bond.Price())             # 1000.00
    """

    # ==================== Inputs ====================

    FaceValue = attribute("Face (par) value.")
    YieldToMaturity = attribute("Yield to maturity per coupon period, not annualized.")
    Maturity = attribute("Maturity in years.")
    PricingTime = attribute("Pricing date in years from now.")
    CouponRate = attribute("Annual coupon rate (as decimal, e.g., 0.05 = 5%).")
    Frequency = attribute("Coupon payments per year.")

    def __init__(
        self,
        name: str,
        face=None,
        ytm=None,
        maturity=None,
        t0=None,
        coupon=None,
        frequency=None,
    ):
        """
        Args:
            name: Display name, no other meaning
            face: Face value, default 100
            ytm: Yield to maturity per period, default 0
            maturity: Maturity in years, default 1
            t0: Pricing time in years, default 0 (now)
            coupon: Annual coupon rate, default 0 (discount bond)
            frequency: Coupon payments per year, default 1

        Raises:
            InvalidArgumentError: If any input has the wrong type
        """
        super().__init__(name)
        self.FaceValue = self.input(face, DEFAULT_FACE_VALUE)
        self.YieldToMaturity = self.input(ytm, DEFAULT_YIELD)
        self.Maturity = self.input(maturity, DEFAULT_MATURITY)
        self.PricingTime = self.input(t0, DEFAULT_PRICING_TIME)
        self.CouponRate = self.input(coupon, DEFAULT_COUPON_RATE)
        self.Frequency = self.input(frequency, DEFAULT_FREQUENCY)

    # ==================== Computed Values ====================

    @formula
    def Periods(self) -> float:
        """Remaining coupon periods, (T - T0) * M. May be fractional."""
        return (self.Maturity() - self.PricingTime()) * self.Frequency()

    @formula
    def CouponPayment(self) -> float:
        """Coupon payment per period."""
        return self.CouponRate() * self.FaceValue() / self.Frequency()

    @formula
    def Price(self) -> float:
        """
        Bond price at the pricing time.

        P = sum(Cp / (1 + y)^i) + F / (1 + y)^n

        The coupon sum is skipped for zero-coupon bonds.
        """
        cp = self.CouponPayment()
        y = self.YieldToMaturity()
        n = self.Periods()

        pv = 0.0
        if cp > 0:
            for i in coupon_periods(n):
                pv += cp / (1 + y) ** i
        pv += self.FaceValue() / (1 + y) ** n
        return pv

    @formula
    def Duration(self) -> float:
        """
        Macaulay duration in years.

        D = [sum(Cp / (1 + y)^i * i / M) + F / (1 + y)^n * (T - T0)] / P
        """
        cp = self.CouponPayment()
        y = self.YieldToMaturity()
        n = self.Periods()
        freq = self.Frequency()

        weighted = 0.0
        if cp > 0:
            for i in coupon_periods(n):
                weighted += cp / (1 + y) ** i * i / freq
        weighted += self.FaceValue() / (1 + y) ** n * (self.Maturity() - self.PricingTime())
        return weighted / self.Price()

    @formula
    def ModifiedDuration(self) -> float:
        """Modified duration, D / (1 + y)."""
        return self.Duration() / (1 + self.YieldToMaturity())

    @formula
    def Convexity(self) -> float:
        """
        Convexity.

        C = [sum(Cp * i * (i + 1) / (1 + y)^i) + F * n * (n + 1) / (1 + y)^n]
            / (P * (1 + y)^2)
        """
        cp = self.CouponPayment()
        y = self.YieldToMaturity()
        n = self.Periods()

        weighted = 0.0
        if cp > 0:
            for i in coupon_periods(n):
                weighted += cp * i * (i + 1) / (1 + y) ** i
        weighted += self.FaceValue() * n * (n + 1) / (1 + y) ** n
        return weighted / (self.Price() * (1 + y) ** 2)

    @formula
    def DV01(self) -> float:
        """Price change for a 1bp move in yield."""
        return self.ModifiedDuration() * self.Price() * 0.0001

    @formula
    def CurrentYield(self) -> float:
        """Annual coupon over price."""
        return self.CouponRate() * self.FaceValue() / self.Price()
