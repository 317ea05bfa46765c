"""
Repository layer.

Data access for car rentals. Callers type against
``CarRentalReadRepositoryInterface``; ``SqlCarRentalReadRepository`` is the
SQLModel-backed implementation.
"""

from .base import CarRentalReadRepositoryInterface
from .car_rentals import SqlCarRentalReadRepository, to_car_rental_dto

__all__ = [
    "CarRentalReadRepositoryInterface",
    "SqlCarRentalReadRepository",
    "to_car_rental_dto",
]
