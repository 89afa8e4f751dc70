"""
mathfunc - Instruments as graphs of lazily-evaluated formulas.

Every attribute of a MathObject is a zero-argument callable that
recomputes its value from current inputs on each read. Rebinding an
input (to a number, or to another object's attribute) is visible to
everything downstream on the next read.

Submodules:
    mathfunc.core - MathObject, attributes, scenarios and errors
    mathfunc.instruments - Quote, Bond, Option, EuropeanOption
    mathfunc.models - Closed-form pricing models
    mathfunc.risk - Bump-and-reval sensitivities
"""

from .core import (
    DEFAULT,
    MathObject,
    attribute,
    formula,
    scenario,
    wrap,
    MathFuncError,
    ConfigurationError,
    InvalidArgumentError,
    EvaluationError,
    MissingInputError,
    CyclicDependencyError,
    DependencyDepthError,
    FormulaError,
)
from .instruments import Quote, Bond, Option, EuropeanOption
from . import risk

__all__ = [
    # Core
    "MathObject",
    "attribute",
    "formula",
    "wrap",
    "scenario",
    "DEFAULT",
    # Submodules
    "risk",
    # Instruments
    "Quote",
    "Bond",
    "Option",
    "EuropeanOption",
    # Errors
    "MathFuncError",
    "ConfigurationError",
    "InvalidArgumentError",
    "EvaluationError",
    "MissingInputError",
    "CyclicDependencyError",
    "DependencyDepthError",
    "FormulaError",
]

__version__ = "0.1.0"
