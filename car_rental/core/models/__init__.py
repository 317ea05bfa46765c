"""Domain snapshot models returned across the repository boundary."""

from __future__ import annotations

from .base import BaseSchema
from .dto import CarDTO, CarModelDTO, CarRentalDTO

__all__ = [
    "BaseSchema",
    "CarDTO",
    "CarModelDTO",
    "CarRentalDTO",
]
