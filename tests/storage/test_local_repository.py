"""Unit tests for LocalRepository."""

import uuid
from dataclasses import dataclass

import pytest

from domo import LocalRepository, Model, Repository, ValueNotFoundError


@dataclass(frozen=True)
class Task:
    name: str


def test_add_generates_uuid_when_id_omitted(repository):
    model_id = repository.add(Task("one"))

    assert isinstance(model_id, uuid.UUID)
    assert repository.get_value(model_id) == Task("one")


def test_add_with_explicit_id(repository):
    model_id = repository.add(Task("one"), model_id="task-1")

    assert model_id == "task-1"
    assert "task-1" in repository


def test_add_rejects_duplicate_id(repository):
    repository.add(Task("one"), model_id="task-1")

    with pytest.raises(ValueError, match="already in use"):
        repository.add(Task("two"), model_id="task-1")


def test_get_value_returns_stored_reference(repository):
    task = Task("one")
    model_id = repository.add(task)

    assert repository.get_value(model_id) is task


def test_get_unknown_id_raises_value_not_found(repository):
    with pytest.raises(ValueNotFoundError) as info:
        repository.get_value("missing")

    assert info.value.model_id == "missing"
    assert isinstance(info.value, LookupError)


def test_update_applies_transform_to_current_value(repository):
    model_id = repository.add(Task("one"))

    committed = repository.update(model_id, lambda t: Task(t.name + "!"))

    assert committed == Task("one!")
    assert repository.get_value(model_id) == Task("one!")


def test_update_unknown_id_raises_without_calling_transform(repository):
    calls = []

    with pytest.raises(ValueNotFoundError):
        repository.update("missing", lambda t: calls.append(t) or t)

    assert calls == []


def test_delete(repository):
    model_id = repository.add(Task("one"))

    assert repository.delete(model_id)
    assert not repository.delete(model_id)
    assert not repository.exists(model_id)
    with pytest.raises(ValueNotFoundError):
        repository.get_value(model_id)


def test_delete_stored_none(repository):
    model_id = repository.add(None)

    assert repository.delete(model_id)


def test_all_ids_and_len(repository):
    first = repository.add(Task("one"))
    second = repository.add(Task("two"))

    assert list(repository.all_ids()) == [first, second]
    assert len(repository) == 2


def test_model_factory_binds_id_and_repository(repository):
    model_id = repository.add(Task("one"))

    model = repository.model(model_id)

    assert isinstance(model, Model)
    assert model.id == model_id
    assert model.repository is repository


def test_model_factory_unknown_id_raises(repository):
    with pytest.raises(ValueNotFoundError):
        repository.model("missing")


def test_local_repository_satisfies_protocol():
    assert isinstance(LocalRepository(), Repository)
