"""Lazy-evaluation core: MathObject, attributes, scenarios and errors."""

from .attribute import Attribute, AttributeHandle, attribute, formula
from .computation import DEFAULT, REQUIRED, Constant, MissingInput, to_computation, wrap
from .exceptions import (
    ConfigurationError,
    CyclicDependencyError,
    DependencyDepthError,
    EvaluationError,
    FormulaError,
    InvalidArgumentError,
    MathFuncError,
    MissingInputError,
)
from .mathobject import MathObject
from .scenario import Scenario, current_scenario, scenario

__all__ = [
    # Objects and attributes
    "MathObject",
    "Attribute",
    "AttributeHandle",
    "attribute",
    "formula",
    # Computations
    "Constant",
    "MissingInput",
    "DEFAULT",
    "REQUIRED",
    "wrap",
    "to_computation",
    # Scenarios
    "Scenario",
    "scenario",
    "current_scenario",
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
