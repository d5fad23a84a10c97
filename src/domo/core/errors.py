"""Error types raised by the attribute layer and the repository boundary."""

from __future__ import annotations

from collections.abc import Hashable


class DomoError(Exception):
    """Base class for all domo errors."""

    pass


class AttributeNotFoundError(DomoError, LookupError):
    """Raised when a name matches no property or data member of a value type.

    Not an AttributeError: dynamic attribute syntax reports a missing name as
    AttributeError, the named API reports it as this.
    """

    def __init__(self, name: str, value_type: type):
        self.name = name
        self.value_type = value_type
        super().__init__(f"{value_type.__qualname__} has no attribute '{name}'")


class BackingSlotNotFoundError(DomoError):
    """Raised when a read-only property has no backing slot to write through."""

    def __init__(self, name: str, value_type: type):
        self.name = name
        self.value_type = value_type
        super().__init__(
            f"Can not set property {value_type.__qualname__}.{name}, "
            f"no backing slot could be found"
        )


class ValueNotFoundError(DomoError, LookupError):
    """Raised by a repository for an unknown identifier."""

    def __init__(self, model_id: Hashable):
        self.model_id = model_id
        super().__init__(f"No value stored for id {model_id!r}")
