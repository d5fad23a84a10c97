"""Tests for DynamicModel attribute syntax."""

from dataclasses import dataclass

import pytest

from domo import AttributeNotFoundError, DynamicModel, model_of, value_type


@value_type
@dataclass(frozen=True)
class Point:
    x: int
    y: int


@value_type
@dataclass(frozen=True)
class User:
    id: str
    name: str


@dataclass(frozen=True)
class Marker:
    pass


@pytest.fixture
def model(repository):
    return repository.model(repository.add(Point(1, 2)))


@pytest.fixture
def point(model) -> DynamicModel:
    return model.as_dynamic()


def test_attribute_read(point):
    assert point.x == 1
    assert point.y == 2


def test_attribute_write_goes_through_copy_on_write(point, model):
    old = model.value

    point.x = 5

    assert model.value == Point(5, 2)
    assert old == Point(1, 2)


def test_missing_attribute_read_is_attribute_error(point):
    """Attribute syntax reports the host's missing-member error, not AttributeNotFoundError."""
    with pytest.raises(AttributeError, match="'Point' object has no attribute 'z'") as info:
        point.z  # noqa: B018

    assert not isinstance(info.value, AttributeNotFoundError)
    assert not hasattr(point, "z")
    assert getattr(point, "z", "default") == "default"


def test_missing_attribute_write_is_attribute_error(point, model):
    with pytest.raises(AttributeError):
        point.z = 9

    assert model.value == Point(1, 2)


def test_delete_attribute_is_rejected(point):
    with pytest.raises(AttributeError):
        del point.x


def test_unknown_method_call_is_attribute_error(point):
    with pytest.raises(AttributeError):
        point.move(1, 1)


def test_model_identity_is_not_reachable(point):
    for name in ("id", "repository", "value", "set_attribute", "_DynamicModel__model"):
        assert not hasattr(point, name)

    with pytest.raises(AttributeError):
        point._DynamicModel__model = None


def test_type_without_attributes(repository):
    empty = repository.model(repository.add(Marker())).as_dynamic()

    assert not hasattr(empty, "x")
    assert "x" not in empty
    assert list(empty) == []
    with pytest.raises(AttributeError):
        empty.x = 1
    with pytest.raises(KeyError):
        empty["x"]


def test_value_attribute_named_id_shadows_nothing(repository):
    model = repository.model(repository.add(User(id="u-1", name="Ada")))
    user = model.as_dynamic()

    assert user.id == "u-1"
    assert model.id != "u-1"


def test_indexed_access(point, model):
    assert point["x"] == 1

    point["y"] = 7

    assert model.value == Point(1, 7)
    with pytest.raises(KeyError):
        point["z"]
    with pytest.raises(KeyError):
        point["z"] = 1


def test_mapping_protocol_follows_attribute_names(point):
    assert "x" in point
    assert "z" not in point
    assert 1 not in point
    assert list(point) == ["x", "y"]
    assert len(point) == 2
    assert set(dir(point)) == {"x", "y"}


def test_str_delegates_to_current_value(point, model):
    assert str(point) == str(Point(1, 2))

    model.set_attribute("x", 3)

    assert str(point) == str(Point(3, 2))


def test_equality_delegates_to_current_value(point, repository):
    other = repository.model(repository.add(Point(1, 2))).as_dynamic()

    assert point == Point(1, 2)
    assert point != Point(0, 0)
    assert point == other


def test_hash_delegates_to_current_value(point):
    assert hash(point) == hash(Point(1, 2))


def test_model_of_returns_wrapped_model(point, model):
    assert model_of(point) is model


def test_repr_names_value(point):
    assert repr(point) == "DynamicModel(Point(x=1, y=2))"
