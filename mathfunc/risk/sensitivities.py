"""Sensitivity calculations using bump-and-reval.

Each bump rebinds an input attribute inside a ``scenario()`` and reads the
output again; the scenario puts the original binding back afterwards,
including links to other objects.

Example:
    from mathfunc import EuropeanOption, risk

    option = EuropeanOption("ATM", maturity=1.0)

    # Closed-form
    print(option.Delta())

    # Numerical (works for any MathObject)
    print(risk.delta(option))
"""

from ..core import MathObject, scenario

DEFAULT_BUMP = 0.01
DEFAULT_THETA_BUMP = 1 / 365
DV01_BUMP = 0.0001
DEFAULT_YIELD_BUMP = 0.0001


def _read(instrument: MathObject, name: str) -> float:
    return instrument.evaluate(name)


def bumped_value(
    instrument: MathObject,
    input_name: str,
    bumped_input: float,
    output_name: str = "Price",
) -> float:
    """Read ``output_name`` with ``input_name`` temporarily set to ``bumped_input``."""
    with scenario():
        instrument.bind(input_name, bumped_input)
        return _read(instrument, output_name)


def sensitivity(
    instrument: MathObject,
    input_name: str,
    output_name: str = "Price",
    bump: float = DEFAULT_BUMP,
    bump_type: str = "absolute",
) -> float:
    """Compute sensitivity of output to input via bump-and-reval.

    Uses forward difference: (f(x+h) - f(x)) / h

    Args:
        instrument: Any MathObject
        input_name: Attribute to bump (e.g., "Spot", "YieldToMaturity")
        output_name: Attribute to measure (e.g., "Price")
        bump: Size of bump
        bump_type: "absolute" (add bump) or "relative" (multiply by 1+bump)

    Returns:
        Sensitivity = (bumped_output - base_output) / effective_bump

    Raises:
        AttributeError: If input or output isn't declared on the instrument
        ValueError: If bump_type is not recognised
        EvaluationError: If either read fails
    """
    base_input = _read(instrument, input_name)
    base_output = _read(instrument, output_name)

    if bump_type == "relative":
        effective_bump = base_input * bump
    elif bump_type == "absolute":
        effective_bump = bump
    else:
        raise ValueError(f"Unknown bump_type: {bump_type!r}")

    bumped_output = bumped_value(instrument, input_name, base_input + effective_bump, output_name)
    return (bumped_output - base_output) / effective_bump


def delta(instrument: MathObject, bump: float = DEFAULT_BUMP) -> float:
    """dPrice/dSpot."""
    return sensitivity(instrument, "Spot", "Price", bump=bump)


def gamma(instrument: MathObject, bump: float = DEFAULT_BUMP) -> float:
    """d2Price/dSpot2 by central difference.

    (f(x+h) - 2*f(x) + f(x-h)) / h^2
    """
    spot = _read(instrument, "Spot")
    price = _read(instrument, "Price")
    price_up = bumped_value(instrument, "Spot", spot + bump)
    price_down = bumped_value(instrument, "Spot", spot - bump)
    return (price_up - 2 * price + price_down) / (bump * bump)


def vega(instrument: MathObject, bump: float = DEFAULT_BUMP) -> float:
    """Price change per 0.01 move in Volatility."""
    return sensitivity(instrument, "Volatility", "Price", bump=bump) * 0.01


def theta(instrument: MathObject, bump: float = DEFAULT_THETA_BUMP) -> float:
    """Price change per day as Maturity shrinks.

    Usually negative for long options.
    """
    maturity = _read(instrument, "Maturity")
    price = _read(instrument, "Price")
    later = bumped_value(instrument, "Maturity", maturity - bump)
    return (later - price) / bump / 365.0


def rho(instrument: MathObject, bump: float = DEFAULT_BUMP) -> float:
    """Price change per 0.01 move in Rate."""
    return sensitivity(instrument, "Rate", "Price", bump=bump) * 0.01


def dv01(instrument: MathObject, bump: float = DV01_BUMP) -> float:
    """Dollar value of a basis point: |price change| for a 1bp yield move."""
    sens = sensitivity(instrument, "YieldToMaturity", "Price", bump=bump)
    return abs(sens * bump)


def effective_duration(instrument: MathObject, bump: float = DEFAULT_YIELD_BUMP) -> float:
    """
    Effective duration from repricing at y +/- bump.

    D_eff = (P(y - h) - P(y + h)) / (2 * P(y) * h)

    With YieldToMaturity quoted per period this is in periods, and
    matches ModifiedDuration for annual-pay bonds.
    """
    y = _read(instrument, "YieldToMaturity")
    price = _read(instrument, "Price")
    price_up = bumped_value(instrument, "YieldToMaturity", y + bump)
    price_down = bumped_value(instrument, "YieldToMaturity", y - bump)
    return (price_down - price_up) / (2 * price * bump)


def effective_convexity(instrument: MathObject, bump: float = DEFAULT_YIELD_BUMP) -> float:
    """
    Effective convexity from repricing at y +/- bump.

    C_eff = (P(y + h) + P(y - h) - 2 * P(y)) / (P(y) * h^2)
    """
    y = _read(instrument, "YieldToMaturity")
    price = _read(instrument, "Price")
    price_up = bumped_value(instrument, "YieldToMaturity", y + bump)
    price_down = bumped_value(instrument, "YieldToMaturity", y - bump)
    return (price_up + price_down - 2 * price) / (price * bump * bump)
