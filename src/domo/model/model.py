"""Model: mutable view over an immutable value held in a repository.

Usage:
    repository = LocalRepository()
    point = repository.model(repository.add(Point(x=1, y=2)))

    point.get_attribute("y")  # 2
    point.set_attribute("x", 5)  # stores Point(x=5, y=2), old snapshot untouched
    point.value  # Point(x=5, y=2)

    # Coarse change notification, triggered manually
    unsubscribe = point.subscribe(lambda model, event: refresh())
    point.notify_changed()
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from domo.core.attribute import (
    AttributeRegistry,
    AttributeTable,
    clone_value,
    get_registry,
    read_attribute,
    write_attribute,
)
from domo.core.types import ModelId, Snapshot
from domo.storage.protocol import Repository

if TYPE_CHECKING:
    from domo.model.descriptors import AttributeDescriptor
    from domo.model.dynamic import DynamicModel

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class ChangeEvent:
    """Change signal passed to subscribers.

    property_name is empty: the notification says something changed, not what.
    """

    property_name: str = ""


type ChangeCallback = Callable[[Model[Any], ChangeEvent], None]


class Model[T]:
    """Lens over the value stored for one identifier.

    The value is never cached: every read fetches it from the repository and every
    write replaces it with a new duplicate through a blind overwrite. Concurrent
    writers on the same identifier are last-writer-wins.

    Args:
        model_id: Identifier of the value in the repository.
        repository: Store holding the value. Not owned.
        value_type: Type whose attributes are exposed. Defaults to the type of the
            value read for each call.
        registry: Attribute registry. Defaults to the global registry.
    """

    __slots__ = ("_id", "_repository", "_value_type", "_registry", "_subscribers")

    def __init__(
        self,
        model_id: ModelId,
        repository: Repository[T],
        value_type: type[T] | None = None,
        registry: AttributeRegistry | None = None,
    ) -> None:
        self._id = model_id
        self._repository = repository
        self._value_type = value_type
        self._registry = registry or get_registry()
        self._subscribers: list[ChangeCallback] = []

    @property
    def id(self) -> ModelId:
        """Identifier of the value, fixed for the lifetime of the model."""
        return self._id

    @property
    def repository(self) -> Repository[T]:
        return self._repository

    @property
    def registry(self) -> AttributeRegistry:
        return self._registry

    @property
    def value(self) -> Snapshot[T]:
        """Current value, read fresh from the repository."""
        return self._repository.get_value(self._id)

    @value.setter
    def value(self, new_value: T) -> None:
        # Blind overwrite: whatever is stored now is discarded.
        self._repository.update(self._id, lambda _: new_value)

    @property
    def value_type(self) -> type[T]:
        """Type whose declared attributes this model exposes."""
        if self._value_type is not None:
            return self._value_type
        return type(self.value)

    @property
    def class_name(self) -> str:
        """Fully qualified name of the value type."""
        cls = self.value_type
        return f"{cls.__module__}.{cls.__qualname__}"

    @property
    def component_name(self) -> str:
        """Simple name of the value type."""
        return self.value_type.__name__

    def _table(self) -> AttributeTable:
        # An explicit value type answers without touching the repository.
        return self._registry.table_for(self.value_type)

    def attribute_names(self) -> tuple[str, ...]:
        """Names of all attributes of the value type, in declaration order."""
        return self._table().names()

    def has_attribute(self, name: str) -> bool:
        """Check if the value type has an attribute called name."""
        return name in self._table()

    def get_attribute(self, name: str) -> Any:
        """Read an attribute off the current value.

        Raises:
            AttributeNotFoundError: If the value type has no attribute called name.
            ValueNotFoundError: If the repository no longer holds this model's id.
        """
        value = self.value
        attr = self._registry.resolve(self._value_type or type(value), name)
        return read_attribute(value, attr)

    def set_attribute(self, name: str, new_value: Any) -> None:
        """Replace the stored value with a duplicate that has one attribute changed.

        The value read before the write is left unchanged.

        Raises:
            AttributeNotFoundError: If the value type has no attribute called name.
            BackingSlotNotFoundError: If name is a read-only property without a
                backing slot.
            ValueNotFoundError: If the repository no longer holds this model's id.
        """
        current = self.value
        attr = self._registry.resolve(self._value_type or type(current), name)
        self.value = write_attribute(current, attr, new_value)
        logger.debug("Set %s.%s on model %s", type(current).__name__, name, self._id)

    def clone_value(self) -> T:
        """Shallow duplicate of the current value, detached from the repository."""
        return clone_value(self.value)

    def subscribe(self, callback: ChangeCallback) -> Callable[[], None]:
        """Subscribe to change notifications.

        Args:
            callback: Called with (model, ChangeEvent) on notify_changed().
                Subscribing the same callback twice has no effect.

        Returns:
            Function that unsubscribes the callback.
        """
        if callback not in self._subscribers:
            self._subscribers.append(callback)
        return lambda: self.unsubscribe(callback)

    def unsubscribe(self, callback: ChangeCallback) -> bool:
        """Unsubscribe a callback. Returns True if it was subscribed."""
        if callback in self._subscribers:
            self._subscribers.remove(callback)
            return True
        return False

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def notify_changed(self) -> None:
        """Invoke every subscriber, in subscription order, with an empty ChangeEvent.

        Not called by set_attribute(); callers trigger it when they see fit.
        An exception raised by a subscriber propagates and skips the rest.
        """
        event = ChangeEvent()
        for callback in list(self._subscribers):
            callback(self, event)

    def dispose(self) -> None:
        """Drop all subscribers. Idempotent.

        The model stays usable for reads and writes afterwards.
        """
        self._subscribers.clear()

    def __enter__(self) -> Model[T]:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.dispose()

    def as_dynamic(self) -> DynamicModel:
        """Wrap this model for attribute syntax: `dyn.x`, `dyn.x = 5`."""
        from domo.model.dynamic import DynamicModel

        return DynamicModel(self)

    def get_descriptors(self) -> tuple[AttributeDescriptor, ...]:
        """Descriptors for every attribute of the value type, in declaration order."""
        from domo.model.descriptors import get_descriptors

        return get_descriptors(self)

    def __repr__(self) -> str:
        return f"Model(id={self._id!r})"
