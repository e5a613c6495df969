"""
==============================================================================
SQL Product Store
==============================================================================

Relational product store on SQLAlchemy.

Part number uniqueness is enforced by the database through the
uq_products_part_number constraint, so concurrent inserts from any number
of workers (or processes sharing the database) cannot both commit the same
part number. Each insert runs in its own transaction.

==============================================================================
"""

from __future__ import annotations

import logging
from typing import List

from sqlalchemy import exists, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from catalog_service.db.database import DatabaseManager
from catalog_service.db.models import ProductRecord
from catalog_service.schemas.product import Product, ProductCreate
from catalog_service.store.base import DuplicateKeyError, ProductStore, StoreError


# Module logger
logger = logging.getLogger(__name__)


class SqlProductStore(ProductStore):
    """
    Product store backed by the products table.

    Creates the table on construction if it doesn't exist.

    Example:
        >>> store = SqlProductStore(DatabaseManager("sqlite://"))
        >>> store.exists_by_part_number("A1")
        False
    """

    backend = "sql"

    def __init__(self, db_manager: DatabaseManager) -> None:
        self._db = db_manager
        try:
            self._db.create_tables()
        except SQLAlchemyError as e:
            raise StoreError(f"Could not initialize products table: {e}") from e

    @staticmethod
    def _to_product(record: ProductRecord) -> Product:
        return Product(
            id=record.id,
            part_number=record.part_number,
            part_name=record.part_name,
            category=record.category,
            price=record.price,
            stock=record.stock,
        )

    def insert(self, draft: ProductCreate) -> int:
        record = ProductRecord(
            part_number=draft.part_number,
            part_name=draft.part_name,
            category=draft.category,
            price=draft.price,
            stock=draft.stock,
        )

        try:
            with self._db.session_scope() as session:
                session.add(record)
                session.flush()
                product_id = record.id

        except IntegrityError as e:
            # Only the unique constraint is a duplicate; check constraints
            # and NOT NULL violations are store failures.
            if self.exists_by_part_number(draft.part_number):
                raise DuplicateKeyError(draft.part_number) from e
            raise StoreError(f"Insert rejected by database: {e.orig}") from e

        except SQLAlchemyError as e:
            raise StoreError(f"Insert failed: {e}") from e

        logger.debug(f"Stored product {product_id} ({draft.part_number})")
        return product_id

    def list(self) -> List[Product]:
        try:
            with self._db.session_scope() as session:
                records = session.scalars(
                    select(ProductRecord).order_by(ProductRecord.id)
                ).all()
                return [self._to_product(record) for record in records]
        except SQLAlchemyError as e:
            raise StoreError(f"Listing products failed: {e}") from e

    def exists_by_part_number(self, part_number: str) -> bool:
        try:
            with self._db.session_scope() as session:
                return bool(session.scalar(
                    select(exists().where(ProductRecord.part_number == part_number))
                ))
        except SQLAlchemyError as e:
            raise StoreError(f"Part number lookup failed: {e}") from e

    def ping(self) -> bool:
        return self._db.verify_connection()

    def close(self) -> None:
        self._db.dispose()

    def __repr__(self) -> str:
        return f"SqlProductStore({self._db!r})"
