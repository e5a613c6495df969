"""
==============================================================================
Product Catalog Endpoints
==============================================================================

Endpoints for creating, listing, searching, filtering and sorting products
and for the inventory value aggregate.

Handlers are plain functions so FastAPI runs them in its thread pool; the
store may block on I/O.

==============================================================================
"""

from typing import List

from fastapi import APIRouter, Depends, Query

from catalog_service.catalog.service import (
    AddStatus,
    CatalogService,
    InventoryValueOverflow,
)
from catalog_service.core import exceptions
from catalog_service.core.dependencies import get_catalog_service
from catalog_service.schemas.product import Product, ProductCreate


router = APIRouter(prefix="/products", tags=["Products"])


class ProductController:
    """Controller translating catalog results into HTTP responses."""

    def __init__(self, service: CatalogService):
        self._service = service

    def create(self, payload: ProductCreate) -> Product:
        """Add a product, mapping rejections to HTTP errors."""
        result = self._service.add_product(payload)

        if result.is_ok:
            return result.product
        if result.status is AddStatus.DUPLICATE:
            raise exceptions.duplicate_part_number(payload.part_number)
        raise exceptions.validation_error(result.reason)

    def list_all(self) -> List[Product]:
        return self._service.get_all_products()

    def search(self, name: str) -> List[Product]:
        return self._service.search_by_name(name)

    def filter(self, category: str) -> List[Product]:
        return self._service.filter_by_category(category)

    def sort(self) -> List[Product]:
        return self._service.sort_by_price()

    def inventory_value(self) -> float:
        try:
            return self._service.get_total_inventory_value()
        except InventoryValueOverflow:
            raise exceptions.inventory_value_overflow()


@router.post("", response_model=Product)
def create_product(
    payload: ProductCreate,
    service: CatalogService = Depends(get_catalog_service)
):
    """
    Create a product.

    The part name is stored lowercased. Returns the stored product with
    its assigned id.
    """
    return ProductController(service).create(payload)


@router.get("", response_model=List[Product])
def list_products(service: CatalogService = Depends(get_catalog_service)):
    """List all products."""
    return ProductController(service).list_all()


@router.get("/search", response_model=List[Product])
def search_products(
    name: str = Query(..., description="Case-insensitive name substring"),
    service: CatalogService = Depends(get_catalog_service)
):
    """Search products by name substring; an empty name matches all."""
    return ProductController(service).search(name)


@router.get("/filter", response_model=List[Product])
def filter_products(
    category: str = Query(..., description="Category, matched ignoring case"),
    service: CatalogService = Depends(get_catalog_service)
):
    """Filter products by exact category, ignoring case."""
    return ProductController(service).filter(category)


@router.get("/sort", response_model=List[Product])
def sort_products(service: CatalogService = Depends(get_catalog_service)):
    """List all products by ascending price."""
    return ProductController(service).sort()


@router.get("/inventory/value", response_model=float)
def inventory_value(service: CatalogService = Depends(get_catalog_service)):
    """Total inventory value: sum of price * stock."""
    return ProductController(service).inventory_value()
