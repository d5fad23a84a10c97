"""Model proxy, attribute syntax adapter, and property descriptors."""

from domo.model.descriptors import AttributeDescriptor, describe, get_descriptors
from domo.model.dynamic import DynamicModel, model_of
from domo.model.model import ChangeEvent, Model

__all__ = [
    "Model",
    "ChangeEvent",
    "DynamicModel",
    "model_of",
    "AttributeDescriptor",
    "get_descriptors",
    "describe",
]
