"""Attribute functionality: models, registry, decorator, and copy-on-write operations."""

from domo.core.attribute.core import (
    AttributeRegistry,
    get_registry,
    is_pydantic_model,
    value_type,
)
from domo.core.attribute.models import (
    AttributeDef,
    AttributeKind,
    AttributeTable,
    BackedProperty,
    ValueTypeMeta,
    backed_property,
)
from domo.core.attribute.operations import (
    clone_value,
    read_attribute,
    write_attribute,
)

__all__ = [
    # Models
    "AttributeDef",
    "AttributeKind",
    "AttributeTable",
    "BackedProperty",
    "ValueTypeMeta",
    "backed_property",
    # Core
    "value_type",
    "get_registry",
    "is_pydantic_model",
    "AttributeRegistry",
    # Operations
    "clone_value",
    "read_attribute",
    "write_attribute",
]
