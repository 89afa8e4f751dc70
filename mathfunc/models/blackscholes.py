"""
Black-Scholes closed forms for European options.

Leaf computations only: plain floats in, plain floats out. Instruments
wire these into their formula attributes.
"""

import math
from typing import Tuple


def norm_cdf(x: float) -> float:
    """Standard normal cumulative distribution function."""
    return 0.5 * (1.0 + math.erf(x / math.sqrt(2.0)))


def norm_pdf(x: float) -> float:
    """Standard normal probability density function."""
    return math.exp(-0.5 * x * x) / math.sqrt(2.0 * math.pi)


def d1_d2(
    spot: float,
    strike: float,
    rate: float,
    dividend: float,
    volatility: float,
    time_to_expiry: float,
) -> Tuple[float, float]:
    """
    The d1 and d2 terms of the Black-Scholes formula.

    d1 = (ln(S/K) + (r - q + sigma^2 / 2) T) / (sigma sqrt(T))
    d2 = d1 - sigma sqrt(T)
    """
    vol_sqrt_t = volatility * math.sqrt(time_to_expiry)
    d1 = (
        math.log(spot / strike)
        + (rate - dividend + 0.5 * volatility * volatility) * time_to_expiry
    ) / vol_sqrt_t
    return d1, d1 - vol_sqrt_t


def intrinsic_value(spot: float, strike: float, is_call: bool) -> float:
    """Payoff if exercised now."""
    return max(0.0, spot - strike) if is_call else max(0.0, strike - spot)


def black_scholes_price(
    spot: float,
    strike: float,
    rate: float,
    dividend: float,
    volatility: float,
    time_to_expiry: float,
    is_call: bool,
) -> float:
    """
    Black-Scholes price of a European option.

    Args:
        spot: Current underlying price
        strike: Strike price
        rate: Continuously compounded risk-free rate
        dividend: Continuous dividend yield
        volatility: Annualized volatility
        time_to_expiry: Years to expiry
        is_call: True for call, False for put

    Returns:
        Option price. At or past expiry, or with zero volatility,
        the discounted-forward intrinsic value.
    """
    if time_to_expiry <= 0:
        return intrinsic_value(spot, strike, is_call)

    discounted_spot = spot * math.exp(-dividend * time_to_expiry)
    discounted_strike = strike * math.exp(-rate * time_to_expiry)
    if volatility <= 0:
        return intrinsic_value(discounted_spot, discounted_strike, is_call)

    d1, d2 = d1_d2(spot, strike, rate, dividend, volatility, time_to_expiry)
    if is_call:
        return discounted_spot * norm_cdf(d1) - discounted_strike * norm_cdf(d2)
    return discounted_strike * norm_cdf(-d2) - discounted_spot * norm_cdf(-d1)


def black_scholes_delta(
    spot: float,
    strike: float,
    rate: float,
    dividend: float,
    volatility: float,
    time_to_expiry: float,
    is_call: bool,
) -> float:
    """Delta: dPrice/dSpot. In [0, 1] for calls, [-1, 0] for puts."""
    if time_to_expiry <= 0 or volatility <= 0:
        if is_call:
            return 1.0 if spot > strike else 0.0
        return -1.0 if spot < strike else 0.0

    d1, _ = d1_d2(spot, strike, rate, dividend, volatility, time_to_expiry)
    carry = math.exp(-dividend * time_to_expiry)
    return carry * norm_cdf(d1) if is_call else carry * (norm_cdf(d1) - 1.0)


def black_scholes_gamma(
    spot: float,
    strike: float,
    rate: float,
    dividend: float,
    volatility: float,
    time_to_expiry: float,
) -> float:
    """Gamma: d2Price/dSpot2, identical for calls and puts."""
    if time_to_expiry <= 0 or volatility <= 0:
        return 0.0

    d1, _ = d1_d2(spot, strike, rate, dividend, volatility, time_to_expiry)
    carry = math.exp(-dividend * time_to_expiry)
    return carry * norm_pdf(d1) / (spot * volatility * math.sqrt(time_to_expiry))


def black_scholes_vega(
    spot: float,
    strike: float,
    rate: float,
    dividend: float,
    volatility: float,
    time_to_expiry: float,
) -> float:
    """Vega per 0.01 (one vol point) change in volatility."""
    if time_to_expiry <= 0 or volatility <= 0:
        return 0.0

    d1, _ = d1_d2(spot, strike, rate, dividend, volatility, time_to_expiry)
    carry = math.exp(-dividend * time_to_expiry)
    return spot * carry * norm_pdf(d1) * math.sqrt(time_to_expiry) * 0.01
