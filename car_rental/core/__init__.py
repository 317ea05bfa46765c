"""
Core of the car rental project.

This package provides the date parser, pricing helpers, domain snapshots,
the database layer and the service registry, along with configuration
and logging utilities.
"""

from car_rental.core.date_parser import DateParser
from car_rental.core.errors import (
    CarRentalError,
    CarRentalNotFoundError,
    InvalidRentalPeriodError,
    UnrecognizedDateExpressionError,
)
from car_rental.core.logging_config import get_logger, setup_logging

__all__ = [
    "CarRentalError",
    "CarRentalNotFoundError",
    "DateParser",
    "InvalidRentalPeriodError",
    "UnrecognizedDateExpressionError",
    "get_logger",
    "setup_logging",
]
