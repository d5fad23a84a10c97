"""Pure functions for copy-on-write attribute access.

None of these functions mutate their input: writes return a new duplicate with a
single attribute changed, and the caller decides where the duplicate goes.
"""

from __future__ import annotations

import inspect
from typing import Any, TypeVar, cast

from domo.core.attribute.core import is_pydantic_model
from domo.core.attribute.models import AttributeDef, AttributeKind
from domo.core.errors import BackingSlotNotFoundError

T = TypeVar("T")


def _slot_names(cls: type) -> list[str]:
    """Instance slot names along the MRO, mangled the way the interpreter stores them."""
    names: list[str] = []
    for klass in cls.__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ("__dict__", "__weakref__"):
                continue
            if name.startswith("__") and not name.endswith("__"):
                name = f"_{klass.__name__.lstrip('_')}{name}"
            names.append(name)
    return names


def clone_value(value: T) -> T:
    """Shallow, field-for-field duplicate of a value.

    The duplicate is created without running __init__, __post_init__, __copy__
    or validators. Attribute values are shared with the original, not copied.
    Pydantic models use model_copy(), which is the same shallow copy for pydantic
    internal state.

    Args:
        value: Instance to duplicate.

    Returns:
        New instance of the same type holding the same attribute values.
    """
    cls = type(value)
    if is_pydantic_model(cls):
        return cast(T, value.model_copy())  # type: ignore[attr-defined]

    duplicate = cls.__new__(cls)
    state = getattr(value, "__dict__", None)
    if state is not None:
        vars(duplicate).update(state)
    for name in _slot_names(cls):
        try:
            slot_value = object.__getattribute__(value, name)
        except AttributeError:
            continue  # unset slot
        object.__setattr__(duplicate, name, slot_value)
    return cast(T, duplicate)


def read_attribute(value: Any, attr: AttributeDef) -> Any:
    """Read a resolved attribute off a value."""
    return getattr(value, attr.name)


def _has_slot(instance: Any, attr: AttributeDef) -> bool:
    if attr.slot is None:
        return False
    if attr.slot_declared:
        return True
    return attr.slot in getattr(instance, "__dict__", {})


def write_attribute(value: T, attr: AttributeDef, raw: Any) -> T:
    """Duplicate value and set one attribute on the duplicate.

    Args:
        value: Current value. Left untouched.
        attr: Resolved attribute to write.
        raw: New attribute value.

    Returns:
        The duplicate with the attribute set.

    Raises:
        BackingSlotNotFoundError: If attr is a read-only property without a
            backing slot.
    """
    duplicate = clone_value(value)

    if attr.kind is AttributeKind.PROPERTY:
        # The descriptor is called directly: frozen dataclasses reject setattr.
        prop = inspect.getattr_static(type(duplicate), attr.name)
        prop.__set__(duplicate, raw)
    elif attr.kind is AttributeKind.BACKED_PROPERTY:
        if not _has_slot(duplicate, attr):
            raise BackingSlotNotFoundError(attr.name, type(value))
        assert attr.slot is not None
        if is_pydantic_model(type(duplicate)):
            # Pydantic routes private attributes past its frozen check.
            setattr(duplicate, attr.slot, raw)
        else:
            object.__setattr__(duplicate, attr.slot, raw)
    else:
        object.__setattr__(duplicate, attr.name, raw)
    return duplicate
