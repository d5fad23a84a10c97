"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from domo import LocalRepository


@pytest.fixture
def repository():
    """Fresh LocalRepository instance."""
    return LocalRepository()
