"""Core functionalities: stateless attribute resolution and copy-on-write primitives.

Architecture Note:
    core/ contains pure, stateless functionalities with no runtime state mutation
    beyond the per-type attribute table cache. For stateful services, see model/
    and storage/.
"""

from domo.core.attribute import (
    AttributeDef,
    AttributeKind,
    AttributeRegistry,
    AttributeTable,
    BackedProperty,
    ValueTypeMeta,
    backed_property,
    clone_value,
    get_registry,
    is_pydantic_model,
    read_attribute,
    value_type,
    write_attribute,
)
from domo.core.errors import (
    AttributeNotFoundError,
    BackingSlotNotFoundError,
    DomoError,
    ValueNotFoundError,
)
from domo.core.types import ModelId, Snapshot, Transform

__all__ = [
    # Types
    "ModelId",
    "Snapshot",
    "Transform",
    # Errors
    "DomoError",
    "AttributeNotFoundError",
    "BackingSlotNotFoundError",
    "ValueNotFoundError",
    # Attribute
    "value_type",
    "backed_property",
    "get_registry",
    "is_pydantic_model",
    "AttributeRegistry",
    "AttributeDef",
    "AttributeKind",
    "AttributeTable",
    "BackedProperty",
    "ValueTypeMeta",
    "clone_value",
    "read_attribute",
    "write_attribute",
]
