"""Exceptions for the mathfunc.core module."""

from typing import Any, Optional, Sequence


class MathFuncError(Exception):
    """Base exception for all mathfunc errors."""

    pass


class ConfigurationError(MathFuncError):
    """An object was wired with inputs it cannot use."""

    pass


class InvalidArgumentError(ConfigurationError, TypeError):
    """Input is neither a number nor a zero-argument computation."""

    def __init__(self, value: Any, attribute: Optional[str] = None):
        self.value = value
        self.attribute = attribute
        target = f" for {attribute}" if attribute else ""
        super().__init__(
            f"Expected a number or a zero-argument callable{target}, "
            f"got {type(value).__name__}: {value!r}"
        )


class EvaluationError(MathFuncError):
    """Reading an attribute failed."""

    pass


class MissingInputError(EvaluationError):
    """A required input was never supplied."""

    def __init__(self, owner: str, attribute: str):
        self.owner = owner
        self.attribute = attribute
        super().__init__(f"{owner}.{attribute} has no value: required input was not supplied")


class CyclicDependencyError(EvaluationError):
    """An attribute depends on itself, directly or transitively."""

    def __init__(self, chain: Sequence[str]):
        self.chain = list(chain)
        super().__init__("Cyclic dependency: " + " -> ".join(self.chain))


class DependencyDepthError(EvaluationError):
    """Dependency chain exceeded the interpreter's recursion limit."""

    def __init__(self, owner: str, attribute: str):
        self.owner = owner
        self.attribute = attribute
        super().__init__(f"Dependency chain too deep while evaluating {owner}.{attribute}")


class FormulaError(EvaluationError, ArithmeticError):
    """Arithmetic failure inside an attribute's computation."""

    def __init__(self, owner: str, attribute: str, cause: ArithmeticError):
        self.owner = owner
        self.attribute = attribute
        self.cause = cause
        super().__init__(f"{owner}.{attribute}: {type(cause).__name__}: {cause}")
