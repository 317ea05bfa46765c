"""
Customer entity models.

This module contains the database entity for customers. Rentals reference
a customer by identity only; nothing else about the customer is read back.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import DateTime
from sqlmodel import Field

from ..base import Base


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Customer(Base, table=True):
    """Entity for a customer who books rentals.

    Table: customers
    """

    __tablename__ = "customers"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(default="", max_length=120)
    email: Optional[str] = Field(default=None, max_length=254, index=True)
    created_at: datetime = Field(default_factory=_utc_now, sa_type=DateTime(timezone=True))

    def __repr__(self) -> str:
        return f"Customer(id={self.id}, name={self.name})"
