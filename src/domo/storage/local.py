"""Local in-memory repository implementation.

Simple dict-based store suitable for single-process use and testing. Each call
holds one re-entrant lock, so every `update` is atomic; sequences of calls are not.

Usage:
    repository = LocalRepository()
    model_id = repository.add(Point(1, 2))
    repository.update(model_id, lambda p: Point(p.x + 1, p.y))
"""

from __future__ import annotations

import logging
import threading
import uuid
from collections.abc import Iterator
from typing import TYPE_CHECKING

from domo.core.errors import ValueNotFoundError
from domo.core.types import ModelId, Snapshot, Transform

if TYPE_CHECKING:
    from domo.model.model import Model

logger = logging.getLogger(__name__)


class LocalRepository[T]:
    """In-memory store of immutable values keyed by identifier.

    Structure:
        _values[model_id] = value

    Values are stored and returned by reference. They are expected to be treated
    as immutable snapshots; Model never mutates them in place.
    """

    def __init__(self) -> None:
        """Initialize empty repository."""
        self._values: dict[ModelId, T] = {}
        self._lock = threading.RLock()

    def add(self, value: T, model_id: ModelId | None = None) -> ModelId:
        """Store a new value.

        Args:
            value: Value to store.
            model_id: Identifier to store it under. A fresh uuid4 if omitted.

        Returns:
            The identifier of the stored value.

        Raises:
            ValueError: If model_id is already in use.
        """
        if model_id is None:
            model_id = uuid.uuid4()
        with self._lock:
            if model_id in self._values:
                raise ValueError(f"Id {model_id!r} is already in use")
            self._values[model_id] = value
        logger.debug("Added %s under id %s", type(value).__name__, model_id)
        return model_id

    def get_value(self, model_id: ModelId) -> Snapshot[T]:
        """Get the value stored for model_id.

        Raises:
            ValueNotFoundError: If model_id is unknown.
        """
        with self._lock:
            try:
                return self._values[model_id]
            except KeyError:
                raise ValueNotFoundError(model_id) from None

    def update(self, model_id: ModelId, transform: Transform[T]) -> T:
        """Apply transform to the stored value and commit the result atomically.

        Args:
            model_id: Identifier of the value to replace.
            transform: Called with the current value, returns the replacement.

        Returns:
            The committed value.

        Raises:
            ValueNotFoundError: If model_id is unknown.
        """
        with self._lock:
            if model_id not in self._values:
                raise ValueNotFoundError(model_id)
            new_value = transform(self._values[model_id])
            self._values[model_id] = new_value
            return new_value

    def delete(self, model_id: ModelId) -> bool:
        """Remove a value. Returns True if it existed."""
        with self._lock:
            if model_id not in self._values:
                return False
            del self._values[model_id]
            return True

    def exists(self, model_id: ModelId) -> bool:
        """Check if a value is stored for model_id."""
        with self._lock:
            return model_id in self._values

    def all_ids(self) -> Iterator[ModelId]:
        """Iterate over the identifiers of all stored values."""
        with self._lock:
            ids = list(self._values)
        yield from ids

    def model(self, model_id: ModelId, value_type: type[T] | None = None) -> Model[T]:
        """Create a Model bound to model_id in this repository.

        Raises:
            ValueNotFoundError: If model_id is unknown.
        """
        # Import here to avoid circular dependency at module level
        from domo.model.model import Model

        if not self.exists(model_id):
            raise ValueNotFoundError(model_id)
        return Model(model_id, self, value_type=value_type)

    def __contains__(self, model_id: object) -> bool:
        return self.exists(model_id)  # type: ignore[arg-type]

    def __len__(self) -> int:
        with self._lock:
            return len(self._values)
