"""Core type definitions for domo."""

from collections.abc import Callable, Hashable

type ModelId = Hashable
"""Opaque identifier addressing one value in a repository."""

type Transform[T] = Callable[[T], T]
"""Function applied by a repository to the currently stored value."""

type Snapshot[T] = T
"""Type alias indicating a value is an immutable snapshot read from a repository.

A `Snapshot[T]` is never mutated by domo. Writes go through `Model.set_attribute()`
or `Model.value = new_value`, which replace the stored snapshot with a new one.
"""
