"""Attribute syntax over a Model.

Usage:
    point = model.as_dynamic()

    point.x  # model.get_attribute("x")
    point.x = 5  # model.set_attribute("x", 5)
    point["y"]  # indexed access, KeyError for unknown names
    point.z  # AttributeError, like any missing attribute

    str(point), point == other, hash(point)  # delegate to the current value

Only the value's attributes are reachable this way; the model, its id and its
repository are not, not even through the mangled slot name. Use model_of() to
get the model back.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from domo.model.model import Model

_MODEL_SLOT = "_DynamicModel__model"


class DynamicModel:
    """Proxy that routes attribute reads and writes to a Model.

    Unknown names raise AttributeError (or KeyError for indexed access),
    never AttributeNotFoundError.

    Args:
        model: Model to route access to.
    """

    __slots__ = ("__model",)

    def __init__(self, model: Model[Any]) -> None:
        object.__setattr__(self, _MODEL_SLOT, model)

    def __getattribute__(self, name: str) -> Any:
        if name == _MODEL_SLOT:
            # Falls through to __getattr__, which reports it missing.
            raise AttributeError(name)
        return object.__getattribute__(self, name)

    def __getattr__(self, name: str) -> Any:
        model = model_of(self)
        if not model.has_attribute(name):
            raise _missing(model, name)
        return model.get_attribute(name)

    def __setattr__(self, name: str, value: Any) -> None:
        model = model_of(self)
        if not model.has_attribute(name):
            raise _missing(model, name)
        model.set_attribute(name, value)

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Cannot delete attribute '{name}' of a model")

    def __getitem__(self, name: str) -> Any:
        model = model_of(self)
        if not model.has_attribute(name):
            raise KeyError(name)
        return model.get_attribute(name)

    def __setitem__(self, name: str, value: Any) -> None:
        model = model_of(self)
        if not model.has_attribute(name):
            raise KeyError(name)
        model.set_attribute(name, value)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and model_of(self).has_attribute(name)

    def __iter__(self) -> Iterator[str]:
        return iter(model_of(self).attribute_names())

    def __len__(self) -> int:
        return len(model_of(self).attribute_names())

    def __dir__(self) -> list[str]:
        return list(model_of(self).attribute_names())

    # Identity operations delegate to the current value, not the proxy.

    def __str__(self) -> str:
        return str(model_of(self).value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DynamicModel):
            other = model_of(other).value
        return bool(model_of(self).value == other)

    def __hash__(self) -> int:
        return hash(model_of(self).value)

    def __repr__(self) -> str:
        return f"DynamicModel({model_of(self).value!r})"


def _missing(model: Model[Any], name: str) -> AttributeError:
    return AttributeError(f"'{model.value_type.__name__}' object has no attribute '{name}'")


def model_of(dynamic: DynamicModel) -> Model[Any]:
    """Return the Model behind a DynamicModel."""
    return object.__getattribute__(dynamic, _MODEL_SLOT)
