"""
Database layer for car rentals.

Structure:
- entities/: Database entity models, one module per table
- repositories/: Data access layer
- utils.py: Engine, session factory and schema helpers
"""

from .base import Base
from .utils import (
    create_all,
    create_engine,
    create_sessionmaker,
    drop_all,
    isolated_schema,
)

__all__ = [
    "Base",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "drop_all",
    "isolated_schema",
]
