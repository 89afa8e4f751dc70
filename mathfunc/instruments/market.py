"""Market observables."""

from ..core import MathObject, attribute

DEFAULT_QUOTE_VALUE = 0.0


class Quote(MathObject):
    """
    A single observable market value (a rate, a spot price, a vol).

    Quotes are the usual source for linked inputs: several instruments
    read the same quote, and moving the quote moves all of them.

    Example:
        ust5y = Quote("UST 5Y", 0.04)
        a = Bond("A", face=1000, ytm=ust5y.Value, maturity=5)
        b = Bond("B", face=1000, ytm=ust5y.Value, maturity=5, coupon=0.03)

        ust5y.Value = 0.045   # a.Price() and b.Price() both reprice
    """

    Value = attribute("Quoted value.")

    def __init__(self, name: str, value=None):
        super().__init__(name)
        self.Value = self.input(value, DEFAULT_QUOTE_VALUE)
