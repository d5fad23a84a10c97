"""Attribute registry, value type decorator, and name resolution.

Usage:
    @value_type
    @dataclass(frozen=True)
    class Point:
        x: int
        y: int

    registry = get_registry()
    registry.resolve(Point, "x")  # AttributeDef(name="x", kind=FIELD, ...)
    registry.has_attribute(Point, "z")  # False

Resolution order for a name (first match wins, exact match only):
    1. property with getter and setter
    2. read-only property, written through its backing slot
    3. plain data member (dataclass field, pydantic field, __slots__ entry, annotation)
"""

from __future__ import annotations

import dataclasses
import inspect
import logging
import typing
from collections.abc import Callable, Mapping
from dataclasses import is_dataclass
from typing import Any, ClassVar, TypeVar, overload

from domo.config.settings import DomoSettings
from domo.core.attribute.models import (
    AttributeDef,
    AttributeKind,
    AttributeTable,
    BackedProperty,
    ValueTypeMeta,
)
from domo.core.errors import AttributeNotFoundError

logger = logging.getLogger(__name__)

T = TypeVar("T")

_IGNORED_SLOTS = frozenset({"__dict__", "__weakref__"})


def is_pydantic_model(cls: type) -> bool:
    """Check if class is a Pydantic model without importing pydantic.

    Args:
        cls: Class to check.

    Returns:
        True if class inherits from pydantic.BaseModel, False otherwise.
    """
    for base in cls.__mro__:
        if base.__module__.startswith("pydantic") and base.__name__ == "BaseModel":
            return True
    return False


def _is_class_var(annotation: Any) -> bool:
    if isinstance(annotation, str):
        return annotation.startswith(("ClassVar", "typing.ClassVar"))
    return typing.get_origin(annotation) is ClassVar


def _class_hints(cls: type) -> dict[str, Any]:
    """Resolved annotations of cls and its bases, base first.

    Falls back to the raw annotation objects (possibly strings) when forward
    references cannot be resolved.
    """
    try:
        return typing.get_type_hints(cls)
    except (NameError, TypeError):
        hints: dict[str, Any] = {}
        for klass in reversed(cls.__mro__):
            hints.update(klass.__dict__.get("__annotations__", {}))
        return hints


def _return_type(fget: Callable[..., Any] | None) -> Any:
    if fget is None:
        return Any
    try:
        return typing.get_type_hints(fget).get("return", Any)
    except (NameError, TypeError):
        return getattr(fget, "__annotations__", {}).get("return", Any)


def _data_members(cls: type) -> dict[str, Any]:
    """All data members of cls, private ones included, in declaration order."""
    members: dict[str, Any] = {}
    if is_dataclass(cls):
        hints = _class_hints(cls)
        for f in dataclasses.fields(cls):
            members[f.name] = hints.get(f.name, f.type)
        return members
    if is_pydantic_model(cls):
        for name, info in cls.model_fields.items():  # type: ignore[attr-defined]
            members[name] = info.annotation
        for name in getattr(cls, "__private_attributes__", {}):
            members.setdefault(name, Any)
        return members

    for name, annotation in _class_hints(cls).items():
        if not _is_class_var(annotation):
            members[name] = annotation
    for klass in reversed(cls.__mro__):
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name not in _IGNORED_SLOTS:
                members.setdefault(name, Any)
    return members


def _property_names(cls: type) -> list[str]:
    """Names of properties visible on cls, in class body order, base first."""
    names: list[str] = []
    for klass in reversed(cls.__mro__):
        if klass.__module__.startswith("pydantic"):
            continue  # BaseModel's own properties (model_extra, ...)
        for name, attr in klass.__dict__.items():
            if isinstance(attr, property) and name not in names:
                names.append(name)
    # A subclass may shadow a base property with a plain attribute.
    return [n for n in names if isinstance(inspect.getattr_static(cls, n), property)]


class AttributeRegistry:
    """Process-local registry mapping value types to their attribute tables.

    Tables are built once per type on first use and cached; resolution afterwards
    is a dictionary lookup.

    Args:
        settings: Backing slot naming and registration policy. Defaults to
            DomoSettings() loaded from the environment.
    """

    def __init__(self, settings: DomoSettings | None = None) -> None:
        """Initialize empty attribute registry."""
        self._settings = settings or DomoSettings()
        self._by_type: dict[type, ValueTypeMeta] = {}
        self._tables: dict[type, AttributeTable] = {}

    @property
    def settings(self) -> DomoSettings:
        return self._settings

    def register(self, cls: type, backing: Mapping[str, str] | None = None) -> ValueTypeMeta:
        """Register a value type and build its attribute table.

        Args:
            cls: Value type to register.
            backing: Explicit backing slots, read-only property name -> slot name.
                None leaves an existing registration as it is.

        A type with no attributes registers with an empty table.

        Returns:
            Value type metadata.

        Raises:
            TypeError: If a backing entry does not name a read-only property, or
                cls is already registered with a different backing mapping.
        """
        existing = self._by_type.get(cls)
        if existing is not None:
            if backing is not None and dict(backing) != existing.backing:
                raise TypeError(
                    f"{cls.__name__} is already registered with backing "
                    f"{existing.backing!r}, got {dict(backing)!r}"
                )
            return existing

        meta = ValueTypeMeta(
            type_name=f"{cls.__module__}.{cls.__qualname__}",
            backing=dict(backing or {}),
        )
        table = self._build_table(cls, meta)
        for name in meta.backing:
            attr = table.get(name)
            if attr is None or attr.kind is not AttributeKind.BACKED_PROPERTY:
                raise TypeError(
                    f"Backing slot declared for {cls.__name__}.{name}, "
                    f"which is not a read-only property"
                )

        self._by_type[cls] = meta
        self._tables[cls] = table
        logger.debug("Registered value type %s with attributes %s", meta.type_name, table.names())
        return meta

    def get_meta(self, cls: type) -> ValueTypeMeta | None:
        """Get metadata for a registered value type.

        Args:
            cls: Value type to look up.

        Returns:
            Value type metadata if registered, None otherwise.
        """
        return self._by_type.get(cls)

    def is_registered(self, cls: type) -> bool:
        """Check if a type is registered as a value type."""
        return cls in self._by_type

    def table_for(self, cls: type) -> AttributeTable:
        """Get the attribute table for a value type, registering it on first use.

        Args:
            cls: Value type.

        Returns:
            The cached attribute table.

        Raises:
            TypeError: If registration is required and cls was never registered.
        """
        table = self._tables.get(cls)
        if table is not None:
            return table
        if self._settings.require_registration:
            raise TypeError(
                f"{cls.__name__} is not a registered value type. "
                f"Decorate it with @value_type."
            )
        self.register(cls)
        return self._tables[cls]

    def resolve(self, cls: type, name: str) -> AttributeDef:
        """Resolve an attribute name against a value type.

        Raises:
            AttributeNotFoundError: If cls has no attribute called name.
        """
        attr = self.table_for(cls).get(name)
        if attr is None:
            raise AttributeNotFoundError(name, cls)
        return attr

    def has_attribute(self, cls: type, name: str) -> bool:
        """Check if cls has an attribute called name. Side-effect free for registered types."""
        return name in self.table_for(cls)

    def _build_table(self, cls: type, meta: ValueTypeMeta) -> AttributeTable:
        data = _data_members(cls)
        properties = {
            name: self._property_def(cls, name, data, meta)
            for name in _property_names(cls)
            if not name.startswith("_")
        }
        backing_slots = {p.slot for p in properties.values() if p.slot_declared}
        attributes: list[AttributeDef] = []

        for name in [*data, *(p for p in properties if p not in data)]:
            if name.startswith("_") or name in backing_slots:
                continue
            if name in properties:
                attributes.append(properties[name])
            else:
                attributes.append(AttributeDef(name, data[name], AttributeKind.FIELD))
        return AttributeTable(cls, attributes)

    def _property_def(
        self, cls: type, name: str, data: dict[str, Any], meta: ValueTypeMeta
    ) -> AttributeDef:
        prop = inspect.getattr_static(cls, name)
        attribute_type = _return_type(prop.fget)
        if prop.fset is not None:
            return AttributeDef(name, attribute_type, AttributeKind.PROPERTY)

        slot: str | None
        if isinstance(prop, BackedProperty) and prop.slot:
            slot, declared = prop.slot, True
        elif name in meta.backing:
            slot, declared = meta.backing[name], True
        else:
            slot = self._settings.backing_slot_for(name)
            declared = slot is not None and slot in data
        return AttributeDef(
            name, attribute_type, AttributeKind.BACKED_PROPERTY, slot=slot, slot_declared=declared
        )


_registry: AttributeRegistry | None = None


def get_registry() -> AttributeRegistry:
    """Access the global attribute registry, creating it from DomoSettings on first use.

    Returns:
        The process-local AttributeRegistry instance.
    """
    global _registry
    if _registry is None:
        _registry = AttributeRegistry()
    return _registry


@overload
def value_type(cls: type[T]) -> type[T]: ...


@overload
def value_type(
    cls: None = None, *, backing: Mapping[str, str] | None = None
) -> Callable[[type[T]], type[T]]: ...


def value_type(
    cls: type[T] | None = None, *, backing: Mapping[str, str] | None = None
) -> type[T] | Callable[[type[T]], type[T]]:
    """Register a class as a value type usable behind a Model.

    Supports three forms:
        @value_type                                  # bare decorator
        @value_type()                                # parenthesized, no args
        @value_type(backing={"area": "_area"})      # explicit backing slots

    Args:
        cls: The class to register, or None if called with arguments.
        backing: Read-only property name -> backing slot name.

    Returns:
        Decorated class or decorator function.

    Note:
        Apply @value_type AFTER @dataclass:

        >>> @value_type
        ... @dataclass(frozen=True)
        ... class Point:
        ...     x: int
        ...     y: int
    """

    def decorator(c: type[T]) -> type[T]:
        meta = get_registry().register(c, backing=backing)
        c.__domo_meta__ = meta  # type: ignore
        return c

    if cls is None:
        return decorator
    return decorator(cls)
