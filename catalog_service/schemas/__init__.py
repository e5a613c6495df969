"""
==============================================================================
Schemas Package - Pydantic Models
==============================================================================

Product models shared by the store, the catalog service and the API.

==============================================================================
"""

from .product import Product, ProductCreate

__all__ = [
    "Product",
    "ProductCreate",
]
