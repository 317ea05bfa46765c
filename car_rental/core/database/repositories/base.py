"""
Base repository interfaces and utilities.

This module provides the repository contracts consumed by callers and the
shared plumbing of the SQL implementations. Callers depend on the
Protocols, never on a concrete persistence class.

Contract guidelines
-------------------

- All methods are async.
- Reads are pure queries: they never commit and never leak sessions.
- A missing record is a domain error (``CarRentalNotFoundError``); driver
  and connectivity failures propagate unchanged.
"""

from __future__ import annotations

from abc import ABC
from typing import Generic, Protocol, Type, TypeVar, Union, runtime_checkable
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlmodel import SQLModel

from ...models.dto import CarRentalDTO

# Generic type for SQLModel entities
EntityType = TypeVar("EntityType", bound=SQLModel)

RentalId = Union[UUID, str]


@runtime_checkable
class CarRentalReadRepositoryInterface(Protocol):
    """Resolve a car rental identity to its snapshot."""

    async def read(self, rental_id: RentalId) -> CarRentalDTO:
        """
        Read a car rental by its identity.

        Args:
            rental_id: The rental identifier.

        Returns:
            The rental snapshot, with the car and car model as currently persisted.

        Raises:
            CarRentalNotFoundError: If no rental has that identity.
        """
        ...


class AsyncReadRepository(ABC, Generic[EntityType]):
    """Base async read repository bound to a session factory and an entity class."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession], model: Type[EntityType]) -> None:
        """Initialize repository with an async session factory and SQLModel entity class.

        Args:
            session_factory: Factory opening one AsyncSession per operation
            model: SQLModel entity class for this repository
        """
        self.session_factory = session_factory
        self.model = model


def coerce_uuid(value: RentalId) -> UUID:
    """Convert an identifier to ``UUID``.

    Raises:
        ValueError: If ``value`` is not a valid UUID.
    """
    if isinstance(value, UUID):
        return value
    return UUID(str(value))
