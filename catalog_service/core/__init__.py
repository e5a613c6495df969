"""
==============================================================================
Core Package
==============================================================================

Core infrastructure for the HTTP surface.

Modules:
--------
- exceptions: AppException class, error factory functions, handlers
- dependencies: FastAPI dependency injection functions

Usage:
------
    from catalog_service.core import exceptions
    raise exceptions.validation_error("Price and stock cannot be negative")

==============================================================================
"""

from .exceptions import (
    AppException,
    register_exception_handlers,
)
from .dependencies import get_catalog_service, get_store

__all__ = [
    # Exceptions
    "AppException",
    "register_exception_handlers",
    # Dependencies
    "get_catalog_service",
    "get_store",
]
