"""Option instruments."""

from ..core import MathObject, attribute, formula
from ..models.blackscholes import (
    black_scholes_price,
    black_scholes_delta,
    black_scholes_gamma,
    black_scholes_vega,
    intrinsic_value,
)

DEFAULT_SPOT = 100.0
DEFAULT_STRIKE = 100.0
DEFAULT_VOLATILITY = 0.20
DEFAULT_RATE = 0.05
DEFAULT_DIVIDEND = 0.0


class Option(MathObject):
    """
    Base type of all options.

    Standardizes the Maturity and Price attribute names so option
    variants are interchangeable. Does no pricing: Price is 0 until a
    subclass (or a caller) binds a pricing computation.

    Maturity is required. Leaving it out still builds the option, but
    reading Maturity raises MissingInputError.
    """

    Maturity = attribute("Time to expiry in years.")

    def __init__(self, name: str, maturity=None):
        super().__init__(name)
        self.Maturity = self.input(maturity)

    @formula
    def Price(self) -> float:
        """Option price. No default pricing."""
        return 0.0


class EuropeanOption(Option):
    """
    European vanilla option priced with Black-Scholes.

    Example:
        spot = Quote("SPX", 4500.0)
        call = EuropeanOption("SPX 4600C", maturity=0.5, spot=spot.Value,
                              strike=4600.0, volatility=0.18)

        print(call.Price())
        spot.Value = 4550.0
        print(call.Price())   # repriced off the new spot
    """

    # ==================== Inputs ====================

    Spot = attribute("Underlying price.")
    Strike = attribute("Strike price.")
    Volatility = attribute("Annualized volatility.")
    Rate = attribute("Continuously compounded risk-free rate.")
    Dividend = attribute("Continuous dividend yield.")

    def __init__(
        self,
        name: str,
        maturity=None,
        spot=None,
        strike=None,
        volatility=None,
        rate=None,
        dividend=None,
        is_call: bool = True,
    ):
        super().__init__(name, maturity)
        self.is_call = is_call
        self.Spot = self.input(spot, DEFAULT_SPOT)
        self.Strike = self.input(strike, DEFAULT_STRIKE)
        self.Volatility = self.input(volatility, DEFAULT_VOLATILITY)
        self.Rate = self.input(rate, DEFAULT_RATE)
        self.Dividend = self.input(dividend, DEFAULT_DIVIDEND)

    # ==================== Pricing ====================

    @formula
    def Price(self) -> float:
        """Black-Scholes price."""
        return black_scholes_price(
            spot=self.Spot(),
            strike=self.Strike(),
            rate=self.Rate(),
            dividend=self.Dividend(),
            volatility=self.Volatility(),
            time_to_expiry=self.Maturity(),
            is_call=self.is_call,
        )

    @formula
    def IntrinsicValue(self) -> float:
        """Payoff if exercised now."""
        return intrinsic_value(self.Spot(), self.Strike(), self.is_call)

    @formula
    def TimeValue(self) -> float:
        return self.Price() - self.IntrinsicValue()

    # ==================== Greeks ====================

    @formula
    def Delta(self) -> float:
        """dPrice/dSpot."""
        return black_scholes_delta(
            spot=self.Spot(),
            strike=self.Strike(),
            rate=self.Rate(),
            dividend=self.Dividend(),
            volatility=self.Volatility(),
            time_to_expiry=self.Maturity(),
            is_call=self.is_call,
        )

    @formula
    def Gamma(self) -> float:
        """d2Price/dSpot2."""
        return black_scholes_gamma(
            spot=self.Spot(),
            strike=self.Strike(),
            rate=self.Rate(),
            dividend=self.Dividend(),
            volatility=self.Volatility(),
            time_to_expiry=self.Maturity(),
        )

    @formula
    def Vega(self) -> float:
        """Price change per one vol point (0.01)."""
        return black_scholes_vega(
            spot=self.Spot(),
            strike=self.Strike(),
            rate=self.Rate(),
            dividend=self.Dividend(),
            volatility=self.Volatility(),
            time_to_expiry=self.Maturity(),
        )
