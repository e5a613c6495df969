"""
==============================================================================
In-Memory Product Store
==============================================================================

Process-local product store: a dict from id to Product plus a set of part
numbers as the unique index. A single lock covers the duplicate check, id
allocation and insert, and readers copy the dict values under the same
lock.

==============================================================================
"""

from __future__ import annotations

import itertools
import logging
import threading
from typing import Dict, List, Set

from catalog_service.schemas.product import Product, ProductCreate
from catalog_service.store.base import DuplicateKeyError, ProductStore


# Module logger
logger = logging.getLogger(__name__)


class InMemoryProductStore(ProductStore):
    """
    Product store backed by a Python dict.

    Example:
        >>> store = InMemoryProductStore()
        >>> store.insert(ProductCreate(part_number="A1", part_name="bolt",
        ...                            category="Hardware", price=1.5, stock=10))
        1
    """

    backend = "memory"

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._products: Dict[int, Product] = {}
        self._part_numbers: Set[str] = set()
        self._ids = itertools.count(1)

    def insert(self, draft: ProductCreate) -> int:
        with self._lock:
            if draft.part_number in self._part_numbers:
                raise DuplicateKeyError(draft.part_number)

            product_id = next(self._ids)
            self._products[product_id] = Product.from_draft(draft, product_id)
            self._part_numbers.add(draft.part_number)

        logger.debug(f"Stored product {product_id} ({draft.part_number})")
        return product_id

    def list(self) -> List[Product]:
        with self._lock:
            # dicts keep insertion order, which is id order here
            return list(self._products.values())

    def exists_by_part_number(self, part_number: str) -> bool:
        with self._lock:
            return part_number in self._part_numbers

    def close(self) -> None:
        logger.debug(f"In-memory store closed with {len(self._products)} products")

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    def __repr__(self) -> str:
        return f"InMemoryProductStore(products={len(self)})"
