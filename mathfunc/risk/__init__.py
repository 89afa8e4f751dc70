"""Risk analysis and sensitivity calculations.

Numerical risk using bump-and-reval: an input attribute is rebound inside
a scenario, the output is read again, and the scenario restores the
original wiring.

Key Functions:
    - sensitivity(): General-purpose sensitivity calculation
    - delta(), gamma(), vega(), theta(), rho(): Option Greeks
    - dv01(), effective_duration(), effective_convexity(): Bond risk

Classes:
    - RiskEngine: Batch risk calculations across instruments

Example:
    from mathfunc import EuropeanOption, risk

    option = EuropeanOption("ATM", maturity=1.0, spot=100.0, strike=100.0)

    print(f"Delta: {risk.delta(option):.4f}")
    print(f"Gamma: {risk.gamma(option):.6f}")

    # Compare with closed-form
    print(f"Closed-form delta: {option.Delta():.4f}")
"""

from .sensitivities import (
    sensitivity,
    bumped_value,
    delta,
    gamma,
    vega,
    theta,
    rho,
    dv01,
    effective_duration,
    effective_convexity,
)
from .engine import RiskEngine

__all__ = [
    # Core sensitivities
    "sensitivity",
    "bumped_value",
    # Option Greeks
    "delta",
    "gamma",
    "vega",
    "theta",
    "rho",
    # Bond risk
    "dv01",
    "effective_duration",
    "effective_convexity",
    # Engine
    "RiskEngine",
]
