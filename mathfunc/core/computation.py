"""Deferred computations and the input coercion rules.

A deferred computation is any zero-argument callable returning a float.
Inputs to an instrument arrive as one of three things:

    - a number, lifted into a ``Constant``
    - a zero-argument callable (typically another object's attribute),
      used as-is so reads delegate to it
    - ``None`` / ``DEFAULT``, meaning "use the default"

Anything else is a wiring mistake and is rejected immediately.
"""

import inspect
import numbers
from typing import Any, Callable, Optional

from .exceptions import EvaluationError, InvalidArgumentError

Computation = Callable[[], float]


class _Default:
    """Marker for "use the default value"."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "DEFAULT"

    def __bool__(self) -> bool:
        return False


DEFAULT = _Default()

# Sentinel for ``to_computation(default=REQUIRED)``: there is no default.
REQUIRED = object()


class Constant:
    """A computation that always returns the same number."""

    __slots__ = ("value",)

    def __init__(self, value: float):
        self.value = float(value)

    def __call__(self) -> float:
        return self.value

    def __repr__(self) -> str:
        return f"Constant({self.value!r})"


class MissingInput:
    """Placeholder bound to a required input that was not supplied.

    Reading the owning attribute raises ``MissingInputError``.
    """

    __slots__ = ()

    def __call__(self) -> float:
        # MathObject intercepts this before calling; reached only when
        # the placeholder is invoked on its own.
        raise EvaluationError("required input was not supplied")

    def __repr__(self) -> str:
        return "MissingInput()"


def is_number(value: Any) -> bool:
    """True for real numbers. Booleans are not accepted as numbers."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def wrap(value: Any) -> Constant:
    """Lift a plain number into a deferred computation.

    Example:
        f = wrap(100)
        f()  # 100.0
    """
    if not is_number(value):
        raise InvalidArgumentError(value)
    return Constant(value)


def to_computation(value: Any, default: Any = REQUIRED, attribute: Optional[str] = None) -> Computation:
    """
    Convert a loosely-typed input into a deferred computation.

    Args:
        value: A number, a zero-argument callable, or None/DEFAULT
        default: Used when value is absent. May itself be a number or
            a callable. If omitted the input is required.
        attribute: Attribute name, used in error messages

    Returns:
        A zero-argument callable

    Raises:
        InvalidArgumentError: If value (or default) is of any other kind
    """
    if value is None or value is DEFAULT:
        if default is REQUIRED:
            return MissingInput()
        return to_computation(default, attribute=attribute)
    if is_number(value):
        return Constant(value)
    if callable(value):
        if not takes_no_arguments(value):
            raise InvalidArgumentError(value, attribute)
        return value
    raise InvalidArgumentError(value, attribute)


def takes_no_arguments(func: Callable) -> bool:
    """True if ``func`` can be called with no arguments.

    Callables without an introspectable signature (some builtins) are
    given the benefit of the doubt.
    """
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return True
    try:
        signature.bind()
    except TypeError:
        return False
    return True
