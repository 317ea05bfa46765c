"""
Car rental entity models.

This module contains the database entity for rentals. A rental links a
customer to a car between a pickup and a drop-off instant, together with
the total price agreed at booking time.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from uuid import UUID, uuid4

from sqlalchemy import DateTime
from sqlmodel import Field

from ..base import Base


class CarRental(Base, table=True):
    """Entity for a car rental.

    Timestamps are stored in UTC. SQLite hands them back naive; the DTO
    layer restores the UTC offset.

    Table: car_rentals
    """

    __tablename__ = "car_rentals"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    customer_id: UUID = Field(foreign_key="customers.id", index=True)
    car_id: UUID = Field(foreign_key="cars.id", index=True)

    pickup_datetime: datetime = Field(sa_type=DateTime(timezone=True))
    drop_off_datetime: datetime = Field(sa_type=DateTime(timezone=True))

    total_price: Decimal = Field(ge=0, max_digits=10, decimal_places=2)

    def __repr__(self) -> str:
        return f"CarRental(id={self.id}, car_id={self.car_id}, customer_id={self.customer_id})"
