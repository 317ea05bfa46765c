"""
Car model entity models.

A car model carries the daily rate every car of that model is rented at.
"""

from __future__ import annotations

from decimal import Decimal
from uuid import UUID, uuid4

from sqlmodel import Field

from ..base import Base


class CarModel(Base, table=True):
    """Entity for a car model and its daily rate.

    Table: car_models
    """

    __tablename__ = "car_models"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(default="", max_length=80)
    daily_rate: Decimal = Field(default=Decimal("0"), ge=0, max_digits=10, decimal_places=2)

    def __repr__(self) -> str:
        return f"CarModel(id={self.id}, daily_rate={self.daily_rate})"
