"""Rental duration and price derivation."""

from __future__ import annotations

from datetime import datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Union

from .date_parser import ensure_utc
from .errors import InvalidRentalPeriodError

CENTS = Decimal("0.01")

_ONE_DAY = timedelta(days=1)


def rental_days(pickup: datetime, drop_off: datetime) -> int:
    """Billable whole days between pickup and drop-off.

    A started day is billed in full and every rental costs at least one day.

    Raises:
        InvalidRentalPeriodError: If drop-off precedes pickup.
    """
    start, end = ensure_utc(pickup), ensure_utc(drop_off)
    if end < start:
        raise InvalidRentalPeriodError(pickup, drop_off)
    days, remainder = divmod(end - start, _ONE_DAY)
    if remainder:
        days += 1
    return max(1, days)


def compute_total_price(daily_rate: Union[Decimal, int, str], pickup: datetime, drop_off: datetime) -> Decimal:
    """Price of a rental: billable days times the daily rate, in cents."""
    rate = Decimal(str(daily_rate))
    return (rate * rental_days(pickup, drop_off)).quantize(CENTS, rounding=ROUND_HALF_UP)
