"""
==============================================================================
Catalog Service Module
==============================================================================

Domain operations over a ProductStore.

This module implements:
- CatalogService: validation, normalization, queries and aggregation
- AddProductResult: tagged outcome of add_product

Business Rules:
--------------
- price and stock must be non-negative, stock at most MAX_STOCK, and
  price * stock a finite float
- part number, part name and category must be non-blank
- part numbers are unique (exact match)
- part names are stored lowercased
- name search is a case-insensitive substring match; an empty query
  matches everything
- category filter is a case-insensitive full-string match

Concurrency:
-----------
add_product holds a write lock across the duplicate check and the insert,
so two concurrent adds of one part number cannot both succeed. Queries
take no lock; they work on the snapshot returned by the store.

==============================================================================
"""

from __future__ import annotations

import enum
import logging
import math
import threading
from dataclasses import dataclass
from typing import List, Optional

from catalog_service.schemas.product import MAX_STOCK, Product, ProductCreate
from catalog_service.store.base import DuplicateKeyError, ProductStore


# Module logger
logger = logging.getLogger(__name__)


class InventoryValueOverflow(ArithmeticError):
    """The catalog total does not fit in a float."""


class AddStatus(str, enum.Enum):
    """Outcome kinds of CatalogService.add_product."""

    OK = "ok"
    INVALID = "invalid"
    DUPLICATE = "duplicate"


@dataclass(frozen=True)
class AddProductResult:
    """
    Result of adding a product.

    Exactly one of product (OK) or reason (INVALID, DUPLICATE) is set.
    """

    status: AddStatus
    product: Optional[Product] = None
    reason: Optional[str] = None

    @classmethod
    def ok(cls, product: Product) -> AddProductResult:
        return cls(AddStatus.OK, product=product)

    @classmethod
    def invalid(cls, reason: str) -> AddProductResult:
        return cls(AddStatus.INVALID, reason=reason)

    @classmethod
    def duplicate(cls, part_number: str) -> AddProductResult:
        return cls(
            AddStatus.DUPLICATE,
            reason=f"Duplicate part number not allowed: {part_number}"
        )

    @property
    def is_ok(self) -> bool:
        return self.status is AddStatus.OK


class CatalogService:
    """
    Catalog operations for the product store.

    Attributes:
        _store: Backing ProductStore
        _write_lock: Serializes duplicate check plus insert

    Example:
        >>> service = CatalogService(InMemoryProductStore())
        >>> result = service.add_product(ProductCreate(
        ...     part_number="A1", part_name="Bolt",
        ...     category="Hardware", price=1.5, stock=10
        ... ))
        >>> result.product.part_name
        'bolt'
    """

    def __init__(self, store: ProductStore) -> None:
        self._store = store
        self._write_lock = threading.Lock()

    @property
    def store(self) -> ProductStore:
        """Backing product store."""
        return self._store

    # =========================================================================
    # CREATE OPERATIONS
    # =========================================================================

    @staticmethod
    def validate(draft: ProductCreate) -> Optional[str]:
        """
        Check a submitted product against the business rules.

        Returns:
            Reason string if the product is invalid, otherwise None
        """
        if not math.isfinite(draft.price):
            return "Price must be a finite number"
        if draft.price < 0 or draft.stock < 0:
            return "Price and stock cannot be negative"
        if draft.stock > MAX_STOCK:
            return f"Stock cannot exceed {MAX_STOCK}"
        if not math.isfinite(draft.price * draft.stock):
            return "Inventory value of the product is too large"

        for field, value in (
            ("partNumber", draft.part_number),
            ("partName", draft.part_name),
            ("category", draft.category),
        ):
            if not value.strip():
                return f"{field} must not be empty"

        return None

    def add_product(self, draft: ProductCreate) -> AddProductResult:
        """
        Validate, normalize and store a product.

        Args:
            draft: Product as submitted

        Returns:
            AddProductResult with the stored product, or the rejection

        Raises:
            StoreError: If the backing store fails
        """
        reason = self.validate(draft)
        if reason:
            logger.warning(f"Product rejected ({draft.part_number!r}): {reason}")
            return AddProductResult.invalid(reason)

        normalized = draft.model_copy(update={"part_name": draft.part_name.lower()})

        with self._write_lock:
            if self._store.exists_by_part_number(draft.part_number):
                logger.warning(f"Duplicate part number rejected: {draft.part_number}")
                return AddProductResult.duplicate(draft.part_number)

            try:
                product_id = self._store.insert(normalized)
            except DuplicateKeyError:
                # Another writer sharing the store got there first
                logger.warning(f"Duplicate part number rejected: {draft.part_number}")
                return AddProductResult.duplicate(draft.part_number)

        product = Product.from_draft(normalized, product_id)
        logger.info(f"✅ Product added: {product.part_number} (id: {product.id})")
        return AddProductResult.ok(product)

    # =========================================================================
    # READ OPERATIONS
    # =========================================================================

    def get_all_products(self) -> List[Product]:
        """Get every product, in store order."""
        return self._store.list()

    def search_by_name(self, query: str) -> List[Product]:
        """
        Find products whose name contains query, ignoring case.

        An empty query matches every product.
        """
        needle = query.lower()
        return [
            product for product in self._store.list()
            if needle in product.part_name.lower()
        ]

    def filter_by_category(self, category: str) -> List[Product]:
        """Find products whose category equals category, ignoring case."""
        wanted = category.lower()
        return [
            product for product in self._store.list()
            if product.category.lower() == wanted
        ]

    def sort_by_price(self) -> List[Product]:
        """Get every product ordered by price, ties kept in store order."""
        return sorted(self._store.list(), key=lambda product: product.price)

    def get_total_inventory_value(self) -> float:
        """
        Sum of price * stock over the catalog; 0.0 when empty.

        Raises:
            InventoryValueOverflow: If the total is not a finite float
        """
        try:
            total = math.fsum(product.inventory_value for product in self._store.list())
        except OverflowError as e:
            raise InventoryValueOverflow("Total inventory value overflows") from e

        if not math.isfinite(total):
            raise InventoryValueOverflow("Total inventory value overflows")
        return total
