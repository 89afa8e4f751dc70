"""MathObject: a named entity exposing lazily-evaluated scalar attributes."""

import logging
import threading
import types
from typing import Any, Dict, List, Optional, Tuple

from .attribute import Attribute
from .computation import DEFAULT, REQUIRED, Computation, MissingInput, to_computation, wrap
from .exceptions import (
    CyclicDependencyError,
    DependencyDepthError,
    EvaluationError,
    FormulaError,
    InvalidArgumentError,
    MathFuncError,
    MissingInputError,
)
from .scenario import current_scenario

logger = logging.getLogger(__name__)

_local = threading.local()


def _evaluation_stack() -> List[Tuple["MathObject", str]]:
    stack = getattr(_local, "stack", None)
    if stack is None:
        stack = _local.stack = []
    return stack


class MathObject:
    """
    Base class for objects whose attributes are deferred computations.

    Subclasses declare attributes with ``attribute()`` (inputs) and
    ``@formula`` (derived values). Each instance owns one slot per
    attribute; reading re-runs the slot's computation every time, so
    rebinding any input is visible downstream on the next read.

    Example:
        bond = Bond("5Y", face=1000, ytm=0.05, maturity=5)
        price = bond.Price
        price()                     # 783.53

        bond.YieldToMaturity = 0.04
        price()                     # 821.93, same handle
    """

    DEFAULT = DEFAULT

    __attributes__: Dict[str, Attribute] = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        attributes: Dict[str, Attribute] = {}
        for klass in reversed(cls.__mro__):
            for key, value in vars(klass).items():
                if isinstance(value, Attribute):
                    attributes[key] = value
                elif key in attributes:
                    del attributes[key]
        cls.__attributes__ = attributes

    def __init__(self, name: str = ""):
        self.name = name
        self._slots: Dict[str, Computation] = {}
        active = current_scenario()
        if active is not None:
            active.adopt(self)
        for attr_name, attr in type(self).__attributes__.items():
            if attr.is_formula:
                self._slots[attr_name] = types.MethodType(attr.formula, self)

    # ==================== Factories ====================

    @staticmethod
    def input(value: Any, default: Any = REQUIRED) -> Computation:
        """
        Convert a constructor argument into a deferred computation.

        Args:
            value: A number, another object's attribute (or any
                zero-argument callable), or None/DEFAULT for the default
            default: Value used when ``value`` is absent. Omit to make
                the input required; reading it then raises
                MissingInputError.

        Raises:
            InvalidArgumentError: If value is of any other kind
        """
        return to_computation(value, default)

    @staticmethod
    def wrap(value: Any) -> Computation:
        """Lift a number into a deferred computation."""
        return wrap(value)

    # ==================== Slots ====================

    @classmethod
    def attribute_names(cls) -> Tuple[str, ...]:
        """Declared attribute names, base classes first."""
        return tuple(cls.__attributes__)

    def has_attribute(self, name: str) -> bool:
        return name in type(self).__attributes__

    def computation(self, name: str) -> Optional[Computation]:
        """The computation bound to ``name``, or None if unbound."""
        self._check_declared(name)
        return self._slots.get(name)

    def bind(self, name: str, value: Any) -> None:
        """
        Replace the computation behind attribute ``name``.

        ``value`` may be a number or a zero-argument callable. Inside an
        active scenario the previous binding is recorded for restore.

        Raises:
            InvalidArgumentError: For anything else, including None; the
                old binding is kept
        """
        self._check_declared(name)
        if value is None or value is DEFAULT:
            raise InvalidArgumentError(value, f"{self.name}.{name}")
        computation = to_computation(value, attribute=f"{self.name}.{name}")
        active = current_scenario()
        if active is not None:
            active.record(self, name, self._slots.get(name))
        self._slots[name] = computation
        logger.debug("Rebound %s.%s to %r", self.name, name, computation)

    def restore(self, name: str, computation: Optional[Computation]) -> None:
        """Reinstate a saved binding without recording it."""
        if computation is None:
            self._slots.pop(name, None)
        else:
            self._slots[name] = computation

    # ==================== Evaluation ====================

    def evaluate(self, name: str) -> float:
        """
        Run the computation bound to ``name`` and return its value.

        Raises:
            MissingInputError: If the attribute was never supplied
            CyclicDependencyError: If the attribute depends on itself
            FormulaError: If the computation hit an arithmetic error
            EvaluationError: If the computation raised any other error
                or produced a non-number
        """
        self._check_declared(name)
        computation = self._slots.get(name)
        if computation is None or isinstance(computation, MissingInput):
            raise MissingInputError(self.name, name)

        stack = _evaluation_stack()
        for index, (owner, attr) in enumerate(stack):
            if owner is self and attr == name:
                chain = [f"{o.name}.{a}" for o, a in stack[index:]]
                chain.append(f"{self.name}.{name}")
                raise CyclicDependencyError(chain)

        stack.append((self, name))
        try:
            result = computation()
        except MathFuncError:
            raise
        except RecursionError as exc:
            raise DependencyDepthError(self.name, name) from exc
        except ArithmeticError as exc:
            raise FormulaError(self.name, name, exc) from exc
        except Exception as exc:
            raise EvaluationError(
                f"{self.name}.{name}: {type(exc).__name__}: {exc}"
            ) from exc
        finally:
            stack.pop()

        try:
            return float(result)
        except (TypeError, ValueError) as exc:
            raise EvaluationError(
                f"{self.name}.{name} produced a non-numeric value: {result!r}"
            ) from exc

    def snapshot(self) -> Dict[str, float]:
        """Read every bound attribute once."""
        return {
            name: self.evaluate(name)
            for name in self.attribute_names()
            if name in self._slots
        }

    def _check_declared(self, name: str) -> None:
        if name not in type(self).__attributes__:
            raise AttributeError(f"{type(self).__name__} has no attribute {name!r}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"
