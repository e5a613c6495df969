"""
==============================================================================
Product Store Interface
==============================================================================

Abstract custody of the product set.

A store enforces two rules:

- part numbers are unique (exact match)
- ids are positive integers starting at 1, allocated on insert and never
  reused

Implementations:
---------------
- InMemoryProductStore: dict guarded by a lock
- SqlProductStore: SQLAlchemy table with a unique constraint

==============================================================================
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from catalog_service.schemas.product import Product, ProductCreate


class StoreError(Exception):
    """Unexpected failure of the backing store."""


class DuplicateKeyError(Exception):
    """A product with the same part number already exists."""

    def __init__(self, part_number: str) -> None:
        self.part_number = part_number
        super().__init__(f"Duplicate part number: {part_number}")


class ProductStore(ABC):
    """Storage contract used by CatalogService."""

    #: Backend name reported by health checks
    backend: str = ""

    @abstractmethod
    def insert(self, draft: ProductCreate) -> int:
        """
        Record a product and return its newly assigned id.

        Raises:
            DuplicateKeyError: If the part number is already stored
            StoreError: On any other backend failure
        """

    @abstractmethod
    def list(self) -> List[Product]:
        """Return a snapshot of all products in insertion order."""

    @abstractmethod
    def exists_by_part_number(self, part_number: str) -> bool:
        """Check whether a product with this exact part number exists."""

    def ping(self) -> bool:
        """Check that the backend is reachable."""
        return True

    def close(self) -> None:
        """Release backend resources."""
