"""
Store factory: builds the product store selected by settings.store.
"""

from __future__ import annotations

import logging

from catalog_service.config.settings import Settings, StoreBackend
from catalog_service.db.database import DatabaseManager
from catalog_service.store.base import ProductStore
from catalog_service.store.memory import InMemoryProductStore
from catalog_service.store.sql import SqlProductStore


# Module logger
logger = logging.getLogger(__name__)


def create_store(settings: Settings) -> ProductStore:
    """
    Create the configured product store.

    Args:
        settings: Application settings

    Returns:
        A ready-to-use ProductStore; the caller owns it and must close it
    """
    if settings.store == StoreBackend.SQL:
        settings.ensure_directories()
        store = SqlProductStore(
            DatabaseManager(settings.database_url, echo=settings.debug)
        )
    else:
        store = InMemoryProductStore()

    logger.info(f"Product store ready: {settings.store.value}")
    return store
