"""Tests for the property descriptor adapter."""

from dataclasses import dataclass

import pytest

from domo import AttributeDescriptor, Model, describe, get_descriptors, value_type


@value_type
@dataclass(frozen=True)
class Account:
    owner: str
    _balance: int = 0
    limit: int = 100

    @property
    def balance(self) -> int:
        return self._balance


@pytest.fixture
def model(repository) -> Model[Account]:
    return repository.model(repository.add(Account("ada", 10)))


def test_descriptors_match_attribute_names_in_order(model):
    descriptors = get_descriptors(model)

    assert [d.name for d in descriptors] == list(model.attribute_names())
    assert [d.name for d in descriptors] == ["owner", "limit", "balance"]
    assert all(model.has_attribute(d.name) for d in descriptors)


def test_descriptor_metadata(model):
    owner, limit, balance = model.get_descriptors()

    assert owner.attribute_type is str
    assert limit.attribute_type is int
    assert not owner.is_read_only
    assert balance.is_read_only
    assert balance.component_type is Model
    assert not balance.can_reset_value
    assert balance.should_serialize_value


def test_descriptor_get_and_set_route_through_model(model):
    limit = next(d for d in get_descriptors(model) if d.name == "limit")
    old = model.value

    limit.set_value(model, 250)

    assert limit.get_value(model) == 250
    assert model.value.limit == 250
    assert old.limit == 100


def test_read_only_descriptor_writes_backing_slot(model):
    balance = next(d for d in get_descriptors(model) if d.name == "balance")

    balance.set_value(model, 42)

    assert balance.get_value(model) == 42


def test_descriptors_are_shared_across_models(repository, model):
    """Descriptors describe the type; the model is passed at call time."""
    other = repository.model(repository.add(Account("bob", 5)))
    owner = get_descriptors(model)[0]

    assert owner == get_descriptors(other)[0]
    assert owner.get_value(model) == "ada"
    assert owner.get_value(other) == "bob"


def test_describe_binds_thunks_to_model(model):
    rows = describe(model)

    assert [(name, t, writable) for name, t, writable, _, _ in rows] == [
        ("owner", str, True),
        ("limit", int, True),
        ("balance", int, False),
    ]
    _, _, _, get_owner, set_owner = rows[0]
    set_owner("grace")
    assert get_owner() == "grace"
    assert model.value.owner == "grace"


def test_descriptor_is_plain_data():
    descriptor = AttributeDescriptor(name="x", attribute_type=int, is_read_only=False)

    assert descriptor == AttributeDescriptor("x", int, False)


def test_describe_thunks_reject_extra_arguments(model):
    _, _, _, get_owner, set_owner = describe(model)[0]

    with pytest.raises(TypeError):
        get_owner("intruder")
    with pytest.raises(TypeError):
        set_owner("grace", "extra")
    assert model.value.owner == "ada"
