"""Property descriptors for generic consumers such as property sheets.

A consumer that edits "any object" through a uniform list of named, typed
members can edit a Model the same way, without knowing about identifiers or
repositories.

Usage:
    for descriptor in get_descriptors(model):
        print(descriptor.name, descriptor.get_value(model))

    # Or the plain tuples: (name, type, writable, getter, setter)
    for name, attribute_type, writable, getter, setter in describe(model):
        setter(getter())
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from functools import partial
from typing import Any

from domo.model.model import Model


@dataclass(slots=True, frozen=True)
class AttributeDescriptor:
    """Descriptor for one attribute of a Model's value type.

    Attributes:
        name: Attribute name.
        attribute_type: Declared type of the attribute.
        is_read_only: True for read-only properties. They can still be written
            through their backing slot with set_value().
    """

    name: str
    attribute_type: Any
    is_read_only: bool

    @property
    def component_type(self) -> type:
        return Model

    @property
    def can_reset_value(self) -> bool:
        return False

    @property
    def should_serialize_value(self) -> bool:
        return True

    def get_value(self, component: Model[Any]) -> Any:
        return component.get_attribute(self.name)

    def set_value(self, component: Model[Any], value: Any) -> None:
        component.set_attribute(self.name, value)


type DescriptorTuple = tuple[str, Any, bool, Callable[[], Any], Callable[[Any], None]]


def get_descriptors(model: Model[Any]) -> tuple[AttributeDescriptor, ...]:
    """Descriptors for all attributes of the model's value type, in declaration order.

    Args:
        model: Model whose value type is described.

    Returns:
        One descriptor per attribute, unfiltered.
    """
    table = model.registry.table_for(model.value_type)
    return tuple(
        AttributeDescriptor(
            name=attr.name,
            attribute_type=attr.attribute_type,
            is_read_only=attr.is_read_only,
        )
        for attr in table
    )


def describe(model: Model[Any]) -> list[DescriptorTuple]:
    """(name, type, writable, getter, setter) for each attribute, bound to model."""
    result: list[DescriptorTuple] = []
    for descriptor in get_descriptors(model):
        result.append(
            (
                descriptor.name,
                descriptor.attribute_type,
                not descriptor.is_read_only,
                partial(descriptor.get_value, model),
                partial(descriptor.set_value, model),
            )
        )
    return result
