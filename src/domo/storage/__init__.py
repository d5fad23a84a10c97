"""Repository backends."""

from domo.storage.local import LocalRepository
from domo.storage.protocol import Repository

__all__ = [
    "Repository",
    "LocalRepository",
]
