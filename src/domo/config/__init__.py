"""Configuration module using Pydantic Settings.

Usage:
    from domo.config import DomoSettings

    settings = DomoSettings(require_registration=True)
"""

from domo.config.settings import DomoSettings

__all__ = [
    "DomoSettings",
]
