"""Lazily-evaluated attributes.

An attribute is declared on a MathObject subclass and stored per instance
as a slot holding a deferred computation. Reading the attribute returns
an ``AttributeHandle``: a thin proxy that looks the slot up on every
call, so rebinding a slot is seen immediately by every handle ever
handed out.

Example:
    class Rectangle(MathObject):
        Width = attribute("Width of the rectangle.")
        Height = attribute("Height of the rectangle.")

        @formula
        def Area(self) -> float:
            return self.Width() * self.Height()

        def __init__(self, name, width=None, height=None):
            super().__init__(name)
            self.Width = self.input(width, 1.0)
            self.Height = self.input(height, 1.0)

    r = Rectangle("r", width=2.0)
    area = r.Area
    area()          # 2.0
    r.Height = 3.0
    area()          # 6.0
"""

from typing import TYPE_CHECKING, Any, Callable, Optional

if TYPE_CHECKING:
    from .mathobject import MathObject


class AttributeHandle:
    """Callable proxy for one attribute of one MathObject."""

    __slots__ = ("owner", "name")

    def __init__(self, owner: "MathObject", name: str):
        self.owner = owner
        self.name = name

    def __call__(self) -> float:
        return self.owner.evaluate(self.name)

    def set(self, value: Any) -> None:
        """Replace the attribute's computation (number or callable)."""
        self.owner.bind(self.name, value)

    @property
    def computation(self) -> Optional[Callable[[], float]]:
        """The computation currently bound, or None if unbound."""
        return self.owner.computation(self.name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AttributeHandle):
            return NotImplemented
        return self.owner is other.owner and self.name == other.name

    def __hash__(self) -> int:
        return hash((id(self.owner), self.name))

    def __repr__(self) -> str:
        return f"<{type(self.owner).__name__} {self.owner.name!r}.{self.name}>"


class Attribute:
    """
    Descriptor declaring a lazily-evaluated attribute.

    Input attributes have no formula; the constructor binds them.
    Derived attributes carry a formula (an unbound method) that
    MathObject.__init__ binds to each new instance.
    """

    def __init__(self, doc: Optional[str] = None, formula: Optional[Callable[[Any], float]] = None):
        self.name: Optional[str] = None
        self.formula = formula
        self.__doc__ = doc

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, obj: Optional["MathObject"], objtype: Optional[type] = None):
        if obj is None:
            return self
        return AttributeHandle(obj, self.name)

    def __set__(self, obj: "MathObject", value: Any) -> None:
        obj.bind(self.name, value)

    @property
    def is_formula(self) -> bool:
        return self.formula is not None

    def __repr__(self) -> str:
        kind = "formula" if self.is_formula else "attribute"
        return f"<{kind} {self.name}>"


def attribute(doc: Optional[str] = None) -> Attribute:
    """Declare an input attribute."""
    return Attribute(doc)


def formula(func: Callable[[Any], float]) -> Attribute:
    """Declare a derived attribute whose initial computation is ``func``."""
    return Attribute(func.__doc__, formula=func)
