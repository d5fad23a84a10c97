"""Attribute models: resolved attribute definitions and per-type capability tables.

Value types expose read-only properties whose value lives in a private slot by
declaring the slot explicitly:

    @value_type
    @dataclass(frozen=True)
    class Account:
        owner: str
        _balance: int = 0

        @backed_property(slot="_balance")
        def balance(self) -> int:
            return self._balance
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, TypeVar

T = TypeVar("T")


class AttributeKind(Enum):
    """How an attribute is read from and written to a value instance."""

    PROPERTY = auto()  # property with getter and setter
    BACKED_PROPERTY = auto()  # read-only property, written through its backing slot
    FIELD = auto()  # plain data member


class BackedProperty(property):
    """Read-only property that names the slot holding its value."""

    def __init__(
        self,
        fget: Callable[[Any], Any] | None = None,
        fset: Callable[[Any, Any], None] | None = None,
        fdel: Callable[[Any], None] | None = None,
        doc: str | None = None,
        *,
        slot: str | None = None,
    ) -> None:
        super().__init__(fget, fset, fdel, doc)
        self.slot = slot


def backed_property(slot: str) -> Callable[[Callable[[Any], T]], BackedProperty]:
    """Declare a read-only property stored in `slot`.

    Args:
        slot: Name of the data member holding the property's value.

    Returns:
        Decorator turning a getter into a BackedProperty.
    """

    def decorator(fget: Callable[[Any], T]) -> BackedProperty:
        return BackedProperty(fget, slot=slot)

    return decorator


@dataclass(slots=True, frozen=True)
class AttributeDef:
    """A resolved attribute of a value type.

    Attributes:
        name: Public attribute name.
        attribute_type: Declared type annotation, Any when unannotated.
        kind: How the attribute is bound to instances.
        slot: Backing slot for BACKED_PROPERTY attributes, None when none was found.
        slot_declared: True if the slot was declared explicitly or is a data member
            of the type. A conventional slot that is not declared must be present on
            the instance to be written.
    """

    name: str
    attribute_type: Any
    kind: AttributeKind
    slot: str | None = None
    slot_declared: bool = False

    @property
    def is_read_only(self) -> bool:
        """True when the attribute has no public setter."""
        return self.kind is AttributeKind.BACKED_PROPERTY


@dataclass(slots=True, frozen=True)
class ValueTypeMeta:
    """Metadata for registered value types."""

    type_name: str
    backing: Mapping[str, str] = field(default_factory=dict)


class AttributeTable:
    """Ordered, immutable mapping of attribute name to AttributeDef for one type."""

    __slots__ = ("_value_type", "_attributes")

    def __init__(self, value_type: type, attributes: list[AttributeDef]) -> None:
        self._value_type = value_type
        self._attributes: dict[str, AttributeDef] = {a.name: a for a in attributes}

    @property
    def value_type(self) -> type:
        return self._value_type

    def get(self, name: str) -> AttributeDef | None:
        return self._attributes.get(name)

    def names(self) -> tuple[str, ...]:
        """Attribute names in declaration order."""
        return tuple(self._attributes)

    def __contains__(self, name: object) -> bool:
        return name in self._attributes

    def __iter__(self) -> Iterator[AttributeDef]:
        return iter(self._attributes.values())

    def __len__(self) -> int:
        return len(self._attributes)

    def __repr__(self) -> str:
        return f"AttributeTable({self._value_type.__qualname__}, {list(self._attributes)})"
