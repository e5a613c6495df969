"""
==============================================================================
Store Package
==============================================================================

Custody of the product set behind the ProductStore interface.

Modules:
--------
- base: ProductStore interface and store errors
- memory: InMemoryProductStore
- sql: SqlProductStore (SQLAlchemy)
- factory: create_store(settings)

==============================================================================
"""

from .base import DuplicateKeyError, ProductStore, StoreError
from .factory import create_store
from .memory import InMemoryProductStore
from .sql import SqlProductStore

__all__ = [
    "ProductStore",
    "DuplicateKeyError",
    "StoreError",
    "InMemoryProductStore",
    "SqlProductStore",
    "create_store",
]
