"""
Database entity models.

This package contains the database entity models of the rental store.
Each module represents a single database table:

- customers: People who book rentals
- car_models: Car models and their daily rate
- cars: Physical cars, each of one model
- car_rentals: Rentals linking a customer to a car for a period
"""

from . import car_models, car_rentals, cars, customers
from .car_models import CarModel
from .car_rentals import CarRental
from .cars import Car
from .customers import Customer

__all__ = [
    "Car",
    "CarModel",
    "CarRental",
    "Customer",
    "car_models",
    "car_rentals",
    "cars",
    "customers",
]
