"""
==============================================================================
Configuration Package
==============================================================================

Centralized configuration management using Pydantic Settings.

Usage:
------
    from catalog_service.config import get_settings, Settings

    settings = get_settings()
    print(settings.listen, settings.store)

==============================================================================
"""

from .settings import Settings, StoreBackend, get_settings

__all__ = [
    "Settings",
    "StoreBackend",
    "get_settings",
]
