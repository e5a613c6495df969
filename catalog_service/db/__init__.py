"""
==============================================================================
Database Package
==============================================================================

SQLAlchemy infrastructure for the "sql" product store backend.

Architecture:
------------
├── database.py   - DatabaseManager class, session factory
└── models.py     - ProductRecord ORM model

==============================================================================
"""

from .database import Base, DatabaseManager
from .models import ProductRecord

__all__ = [
    "Base",
    "DatabaseManager",
    "ProductRecord",
]
