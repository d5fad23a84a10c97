"""domo: mutable views over immutable values held in a keyed store.

Usage:
    from dataclasses import dataclass
    from domo import LocalRepository, value_type

    @value_type
    @dataclass(frozen=True)
    class Point:
        x: int
        y: int

    repository = LocalRepository()
    model = repository.model(repository.add(Point(1, 2)))
    model.set_attribute("x", 5)  # repository now holds Point(5, 2)

    point = model.as_dynamic()
    point.y = 9  # repository now holds Point(5, 9)
"""

__version__ = "0.1.0"

# Configuration
from domo.config import DomoSettings

# Core primitives
from domo.core import (
    AttributeDef,
    AttributeKind,
    AttributeNotFoundError,
    AttributeRegistry,
    BackingSlotNotFoundError,
    DomoError,
    ModelId,
    Snapshot,
    ValueNotFoundError,
    backed_property,
    clone_value,
    get_registry,
    value_type,
)

# Model and adapters
from domo.model import (
    AttributeDescriptor,
    ChangeEvent,
    DynamicModel,
    Model,
    describe,
    get_descriptors,
    model_of,
)

# Storage
from domo.storage import (
    LocalRepository,
    Repository,
)

__all__ = [
    # Version
    "__version__",
    # Config
    "DomoSettings",
    # Core
    "ModelId",
    "Snapshot",
    "value_type",
    "backed_property",
    "get_registry",
    "clone_value",
    "AttributeRegistry",
    "AttributeDef",
    "AttributeKind",
    # Errors
    "DomoError",
    "AttributeNotFoundError",
    "BackingSlotNotFoundError",
    "ValueNotFoundError",
    # Model
    "Model",
    "ChangeEvent",
    "DynamicModel",
    "model_of",
    "AttributeDescriptor",
    "get_descriptors",
    "describe",
    # Storage
    "Repository",
    "LocalRepository",
]
