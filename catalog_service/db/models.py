"""
==============================================================================
SQLAlchemy ORM Models Module
==============================================================================

Database Schema:
---------------

    ┌─────────────────────────────────────────────────────────────────┐
    │                          products                               │
    ├─────────────────────────────────────────────────────────────────┤
    │ id (INTEGER, PK, AUTOINCREMENT)                                 │
    │ part_number (VARCHAR, UNIQUE, NOT NULL)                         │
    │ part_name (VARCHAR, NOT NULL)                                   │
    │ category (VARCHAR, NOT NULL)                                    │
    │ price (FLOAT, NOT NULL, >= 0)                                   │
    │ stock (INTEGER, NOT NULL, >= 0)                                 │
    └─────────────────────────────────────────────────────────────────┘

=============================================================================
"""

from __future__ import annotations

from sqlalchemy import (
    CheckConstraint,
    Column,
    Float,
    Integer,
    String,
    UniqueConstraint,
)

from catalog_service.db.database import Base


class ProductRecord(Base):
    """
    Product row.

    SQLite AUTOINCREMENT guarantees ids are never reused.
    """

    __tablename__ = "products"

    __table_args__ = (
        UniqueConstraint("part_number", name="uq_products_part_number"),
        CheckConstraint("price >= 0", name="ck_price_non_negative"),
        CheckConstraint("stock >= 0", name="ck_stock_non_negative"),
        {"sqlite_autoincrement": True},
    )

    id = Column(
        Integer,
        primary_key=True,
        autoincrement=True,
        doc="Server-assigned product identifier"
    )

    part_number = Column(
        String(255),
        nullable=False,
        doc="Unique part number (business key)"
    )

    part_name = Column(
        String(255),
        nullable=False,
        doc="Product name (lowercase)"
    )

    category = Column(
        String(255),
        nullable=False,
        index=True,
        doc="Product category"
    )

    price = Column(
        Float,
        nullable=False,
        doc="Unit price"
    )

    stock = Column(
        Integer,
        nullable=False,
        doc="Units on hand"
    )

    def __repr__(self) -> str:
        """Detailed string representation for debugging."""
        return (
            f"ProductRecord(id={self.id!r}, "
            f"part_number={self.part_number!r}, "
            f"price={self.price!r}, "
            f"stock={self.stock!r})"
        )
