"""
Car entity models.

This module contains the database entity for physical cars. Each car
belongs to exactly one car model.
"""

from __future__ import annotations

from uuid import UUID, uuid4

from sqlmodel import Field

from ..base import Base


class Car(Base, table=True):
    """Entity for a rentable car.

    Table: cars
    """

    __tablename__ = "cars"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    model_id: UUID = Field(foreign_key="car_models.id", index=True)
    registration_number: str = Field(default="", max_length=20)

    def __repr__(self) -> str:
        return f"Car(id={self.id}, model_id={self.model_id})"
