"""
Configuration management for the custom resource handler.

Type-safe settings classes via Pydantic, loaded from the environment.
"""

from .settings import DEFAULT_CALLBACK_WARNING, ResourceSettings, Settings, get_settings

__all__ = [
    "DEFAULT_CALLBACK_WARNING",
    "ResourceSettings",
    "Settings",
    "get_settings",
]
