"""
Car rental data transfer objects.

These are the immutable snapshots a read repository hands back to callers.
They carry the rental identity, the customer reference, the car with its
nested model and daily rate, the stored total price and the pickup and
drop-off instants.

Timestamps are normalized to aware UTC on construction, so snapshots built
from SQLite rows (naive) and PostgreSQL rows (aware) compare equal when
they describe the same instants.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any, Dict
from uuid import UUID

from pydantic import Field, field_validator, model_validator

from ..date_parser import ensure_utc
from ..errors import InvalidRentalPeriodError
from ..pricing import compute_total_price, rental_days
from .base import BaseSchema


class CarModelDTO(BaseSchema):
    """A car model and the rate charged per rental day."""

    id: UUID
    daily_rate: Decimal = Field(ge=0, alias="dailyRate", description="Price per billable day")


class CarDTO(BaseSchema):
    """A physical car and the model it belongs to."""

    id: UUID
    model: CarModelDTO


class CarRentalDTO(BaseSchema):
    """
    Snapshot of a single car rental.

    ``total_price`` is the amount stored with the rental. It is not
    recomputed here; use ``expected_total_price`` or ``is_price_consistent``
    to compare it against ``rental_days × daily_rate``.
    """

    id: UUID
    customer_id: UUID = Field(alias="customerId")
    car: CarDTO
    total_price: Decimal = Field(ge=0, alias="totalPrice")
    pickup_datetime: datetime = Field(alias="pickupDateTime")
    drop_off_datetime: datetime = Field(alias="dropOffDateTime")

    @field_validator("pickup_datetime", "drop_off_datetime")
    @classmethod
    def _normalize_to_utc(cls, value: datetime) -> datetime:
        return ensure_utc(value)

    @model_validator(mode="after")
    def _check_period(self) -> "CarRentalDTO":
        if self.drop_off_datetime < self.pickup_datetime:
            raise InvalidRentalPeriodError(self.pickup_datetime, self.drop_off_datetime)
        return self

    @property
    def rental_days(self) -> int:
        """Billable days between pickup and drop-off."""
        return rental_days(self.pickup_datetime, self.drop_off_datetime)

    def expected_total_price(self) -> Decimal:
        """Price derived from the rental period and the car model's daily rate."""
        return compute_total_price(self.car.model.daily_rate, self.pickup_datetime, self.drop_off_datetime)

    def is_price_consistent(self) -> bool:
        """Whether the stored total price equals the derived one."""
        return self.expected_total_price() == self.total_price

    def to_dict(self) -> Dict[str, Any]:
        """Dump the snapshot using the camelCase field names."""
        return self.model_dump(by_alias=True)
