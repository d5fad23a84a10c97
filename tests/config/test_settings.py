"""Tests for DomoSettings and its effect on attribute resolution."""

from dataclasses import dataclass

import pytest

from domo import AttributeKind, BackingSlotNotFoundError, DomoSettings, LocalRepository, Model
from domo.core.attribute import AttributeRegistry


@dataclass(frozen=True)
class Circle:
    radius: float
    m_area: float = 0.0

    @property
    def area(self) -> float:
        return self.m_area


def test_defaults():
    settings = DomoSettings()

    assert settings.backing_slot_prefix == "_"
    assert settings.backing_slot_suffix == ""
    assert not settings.require_registration
    assert settings.backing_slot_for("area") == "_area"


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("DOMO_BACKING_SLOT_PREFIX", "m_")
    monkeypatch.setenv("DOMO_REQUIRE_REGISTRATION", "true")

    settings = DomoSettings()

    assert settings.backing_slot_prefix == "m_"
    assert settings.require_registration


def test_custom_prefix_changes_backing_slot():
    registry = AttributeRegistry(settings=DomoSettings(backing_slot_prefix="m_"))
    repository = LocalRepository()
    model = Model(repository.add(Circle(1.0)), repository, registry=registry)

    attr = registry.resolve(Circle, "area")
    model.set_attribute("area", 3.14)

    assert attr.kind is AttributeKind.BACKED_PROPERTY
    assert attr.slot == "m_area"
    assert model.get_attribute("area") == 3.14
    assert not model.has_attribute("m_area")


def test_suffix_only_convention():
    settings = DomoSettings(backing_slot_prefix="", backing_slot_suffix="_value")

    assert settings.backing_slot_for("area") == "area_value"


def test_empty_convention_disables_backing_slot_lookup():
    registry = AttributeRegistry(
        settings=DomoSettings(backing_slot_prefix="", backing_slot_suffix="")
    )
    repository = LocalRepository()
    model = Model(repository.add(Circle(1.0)), repository, registry=registry)

    assert registry.resolve(Circle, "area").slot is None
    with pytest.raises(BackingSlotNotFoundError):
        model.set_attribute("area", 3.14)
