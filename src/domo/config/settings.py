"""Configuration settings using Pydantic Settings.

Provides typed configuration for attribute resolution with environment variable support.

Usage:
    from domo.config import DomoSettings

    # Load from environment variables (DOMO_*)
    settings = DomoSettings()

    # Or override with explicit values
    settings = DomoSettings(backing_slot_prefix="_", backing_slot_suffix="_value")
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class DomoSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the attribute registry.

    Attributes:
        backing_slot_prefix: Prefix decorating a read-only property's name to form
            the name of its backing slot.
        backing_slot_suffix: Suffix decorating a read-only property's name to form
            the name of its backing slot.
        require_registration: If True, only classes decorated with @value_type can
            be used as value types.

    Environment Variables:
        DOMO_BACKING_SLOT_PREFIX
        DOMO_BACKING_SLOT_SUFFIX
        DOMO_REQUIRE_REGISTRATION
    """

    model_config = SettingsConfigDict(
        env_prefix="DOMO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    backing_slot_prefix: str = "_"
    backing_slot_suffix: str = ""
    require_registration: bool = False

    def backing_slot_for(self, name: str) -> str | None:
        """Conventional backing slot name for a property, None if the convention is off."""
        if not self.backing_slot_prefix and not self.backing_slot_suffix:
            return None
        return f"{self.backing_slot_prefix}{name}{self.backing_slot_suffix}"
