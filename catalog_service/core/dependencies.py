"""
==============================================================================
FastAPI Dependencies Module
==============================================================================

Dependency injection for route handlers.

The CatalogService is built once at application startup and kept on
app.state; handlers receive it through get_catalog_service instead of
reaching for module-level state.

Usage:
------
    @router.get("")
    def list_products(service: CatalogService = Depends(get_catalog_service)):
        return service.get_all_products()

==============================================================================
"""

from __future__ import annotations

from fastapi import Request

from catalog_service.catalog.service import CatalogService
from catalog_service.store.base import ProductStore


def get_catalog_service(request: Request) -> CatalogService:
    """FastAPI dependency returning the application's CatalogService."""
    return request.app.state.catalog_service


def get_store(request: Request) -> ProductStore:
    """FastAPI dependency returning the application's ProductStore."""
    return request.app.state.catalog_service.store
