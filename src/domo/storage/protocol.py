"""Repository protocol: the keyed store a Model reads from and writes to.

The repository owns identifiers, persistence and concurrency control. A Model
only ever calls `get_value` and `update`.

Usage:
    repository = LocalRepository()
    model_id = repository.add(Point(1, 2))
    model = Model(model_id, repository)
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from domo.core.types import ModelId, Transform


@runtime_checkable
class Repository[T](Protocol):
    """Abstract keyed store of immutable values. Implementations handle actual data."""

    def get_value(self, model_id: ModelId) -> T:
        """Get the value currently stored for model_id.

        Raises:
            ValueNotFoundError: If model_id is unknown.
        """
        ...

    def update(self, model_id: ModelId, transform: Transform[T]) -> T:
        """Apply transform to the stored value and commit the result.

        Must be atomic with respect to other calls for the same model_id.

        Returns:
            The committed value.

        Raises:
            ValueNotFoundError: If model_id is unknown.
        """
        ...
