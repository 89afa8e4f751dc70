"""Temporary rebinding of attributes.

Inside ``with scenario():`` every attribute rebinding is recorded, and the
original bindings are put back when the block exits (normally or via an
exception). Used for bump-and-reval risk.

Example:
    bond = Bond("UST 5Y", face=1000, ytm=0.04, maturity=5, coupon=0.05)
    base = bond.Price()

    with scenario():
        bond.YieldToMaturity = 0.05
        bumped = bond.Price()

    bond.Price() == base  # True
"""

from contextlib import contextmanager
import logging
import threading
import weakref
from typing import TYPE_CHECKING, Any, Callable, Dict, Iterator, List, Optional, Tuple

if TYPE_CHECKING:
    from .attribute import AttributeHandle
    from .mathobject import MathObject

logger = logging.getLogger(__name__)

_state = threading.local()


def _stack() -> List["Scenario"]:
    stack = getattr(_state, "stack", None)
    if stack is None:
        stack = _state.stack = []
    return stack


class Scenario:
    """Bindings replaced inside one ``scenario()`` block."""

    def __init__(self):
        self._saved: Dict[Tuple[int, str], Tuple["MathObject", str, Optional[Callable[[], float]]]] = {}
        self._created: "weakref.WeakSet[MathObject]" = weakref.WeakSet()

    def adopt(self, owner: "MathObject") -> None:
        """Mark an object as built inside this scenario; its bindings are kept on exit."""
        self._created.add(owner)

    def record(self, owner: "MathObject", name: str, previous: Optional[Callable[[], float]]) -> None:
        """Remember a binding before its first change in this scenario."""
        if owner in self._created:
            return
        key = (id(owner), name)
        if key not in self._saved:
            self._saved[key] = (owner, name, previous)

    def set(self, handle: "AttributeHandle", value: Any) -> None:
        """Rebind ``handle`` for the rest of the scenario."""
        handle.set(value)

    def restore(self) -> None:
        """Put back every recorded binding, most recent first."""
        for owner, name, previous in reversed(list(self._saved.values())):
            owner.restore(name, previous)
        if self._saved:
            logger.debug("Scenario restored %d binding(s)", len(self._saved))
        self._saved.clear()

    def __len__(self) -> int:
        return len(self._saved)


def current_scenario() -> Optional[Scenario]:
    """The innermost active scenario on this thread, if any."""
    stack = _stack()
    return stack[-1] if stack else None


@contextmanager
def scenario() -> Iterator[Scenario]:
    """Rebind attributes temporarily; all changes are undone on exit."""
    active = Scenario()
    stack = _stack()
    stack.append(active)
    try:
        yield active
    finally:
        stack.pop()
        active.restore()
