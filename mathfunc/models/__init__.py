"""Pricing models."""

from .blackscholes import (
    black_scholes_price,
    black_scholes_delta,
    black_scholes_gamma,
    black_scholes_vega,
    d1_d2,
    intrinsic_value,
    norm_cdf,
    norm_pdf,
)

__all__ = [
    "black_scholes_price",
    "black_scholes_delta",
    "black_scholes_gamma",
    "black_scholes_vega",
    "d1_d2",
    "intrinsic_value",
    "norm_cdf",
    "norm_pdf",
]
