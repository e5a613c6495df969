"""
==============================================================================
Catalog Package - Product Management
==============================================================================

Domain layer of the service: validation, normalization, queries and
aggregation over a ProductStore.

Classes:
--------
- CatalogService: Catalog operations
- AddProductResult / AddStatus: Outcome of CatalogService.add_product
- InventoryValueOverflow: Catalog total too large for a float

==============================================================================
"""

from .service import (
    AddProductResult,
    AddStatus,
    CatalogService,
    InventoryValueOverflow,
)

__all__ = [
    "CatalogService",
    "AddProductResult",
    "AddStatus",
    "InventoryValueOverflow",
]
