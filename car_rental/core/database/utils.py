"""
Database utility functions for engine, session and schema management.

This module provides the core utility functions for creating database engines
and session factories, and for creating or dropping the schema. Built with
async SQLAlchemy.

Functions:
- create_engine: Creates async SQLAlchemy engine with URL normalization
- create_sessionmaker: Creates async session factory with safe defaults
- create_all / drop_all: Create or drop all tables from ORM metadata (for tests/dev)
- isolated_schema: Scoped clean schema that is always dropped on exit
"""

from __future__ import annotations

import logging
import re
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from . import entities  # noqa: F401  registers tables on Base.metadata
from .base import Base

logger = logging.getLogger(__name__)

_POSTGRES_URL = re.compile(r"^postgres(?:ql)?(?:\+[a-z0-9_]+)?://")


def normalize_url(db_url: str) -> str:
    """Rewrite Postgres URLs so the asyncpg driver is used.

    ``postgresql://``, ``postgres://`` and other driver variants such as
    ``postgresql+psycopg://`` all become ``postgresql+asyncpg://``. Other
    URLs are returned unchanged.
    """
    return _POSTGRES_URL.sub("postgresql+asyncpg://", db_url, count=1)


def create_engine(db_url: str, *, echo: bool = False) -> AsyncEngine:
    """Create an async SQLAlchemy engine.

    Args:
        db_url: Database connection URL
        echo: Whether to log emitted SQL

    Returns:
        Configured AsyncEngine instance
    """
    return create_async_engine(normalize_url(db_url), echo=echo, pool_pre_ping=True)


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create an ``async_sessionmaker`` with safe defaults for this project.

    Args:
        engine: Async SQLAlchemy engine

    Returns:
        Configured async session factory
    """
    return async_sessionmaker(engine, expire_on_commit=False)


async def create_all(engine: AsyncEngine) -> None:
    """Create all tables for the current ORM metadata.

    This is mainly intended for tests and local development.

    Args:
        engine: Async SQLAlchemy engine
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_all(engine: AsyncEngine) -> None:
    """Drop all tables of the current ORM metadata.

    Args:
        engine: Async SQLAlchemy engine
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@asynccontextmanager
async def isolated_schema(engine: AsyncEngine) -> AsyncIterator[AsyncEngine]:
    """Provide a freshly created schema that is dropped on every exit path.

    Usage::

        async with isolated_schema(engine):
            ...  # seed and query

    Args:
        engine: Async SQLAlchemy engine

    Yields:
        The same engine, with all tables created
    """
    await create_all(engine)
    logger.debug(f"Created schema on {engine.url.render_as_string(hide_password=True)}")
    try:
        yield engine
    finally:
        await drop_all(engine)
        logger.debug(f"Dropped schema on {engine.url.render_as_string(hide_password=True)}")
