"""Error types for the car rental domain.

Purpose:
- Provide typed exceptions raised by the date parser, the pricing helpers
  and the car rental repositories.
- Keep domain failures apart from infrastructure failures: database or
  driver errors are never wrapped and reach callers unchanged.

Usage:
- Catch `CarRentalError` for any domain failure.
- Catch `CarRentalNotFoundError` when a lookup by identity has no match.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any


class CarRentalError(Exception):
    """Base error for car rental domain failures."""


class UnrecognizedDateExpressionError(CarRentalError):
    """Raised when a relative date expression matches none of the known forms.

    Args:
        expression: The raw expression that could not be parsed.
    """

    def __init__(self, expression: str) -> None:
        super().__init__(f"Unrecognized date expression: {expression!r}")
        self.expression = expression


class InvalidRentalPeriodError(CarRentalError, ValueError):
    """Raised when a drop-off instant precedes the pickup instant."""

    def __init__(self, pickup: datetime, drop_off: datetime) -> None:
        super().__init__(f"Drop-off {drop_off.isoformat()} precedes pickup {pickup.isoformat()}")
        self.pickup = pickup
        self.drop_off = drop_off


class CarRentalNotFoundError(CarRentalError):
    """Raised when no car rental exists for the requested identity.

    Args:
        rental_id: The identifier that was not found.
    """

    def __init__(self, rental_id: Any) -> None:
        super().__init__(f"Car rental not found: {rental_id}")
        self.rental_id = rental_id
