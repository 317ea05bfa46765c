"""
Car rental read repository implementation.

This module resolves a rental identity to a ``CarRentalDTO`` with a single
query joining the rental, its car and the car's model. Built on SQLModel
statements executed through async SQLAlchemy sessions.
"""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlmodel import select

from ...errors import CarRentalNotFoundError
from ...models.dto import CarDTO, CarModelDTO, CarRentalDTO
from ..entities.car_models import CarModel
from ..entities.car_rentals import CarRental
from ..entities.cars import Car
from .base import AsyncReadRepository, RentalId, coerce_uuid

logger = logging.getLogger(__name__)


def to_car_rental_dto(rental: CarRental, car: Car, model: CarModel) -> CarRentalDTO:
    """Assemble the rental snapshot from its persisted rows."""
    return CarRentalDTO(
        id=rental.id,
        customer_id=rental.customer_id,
        car=CarDTO(
            id=car.id,
            model=CarModelDTO(id=model.id, daily_rate=model.daily_rate),
        ),
        total_price=rental.total_price,
        pickup_datetime=rental.pickup_datetime,
        drop_off_datetime=rental.drop_off_datetime,
    )


class SqlCarRentalReadRepository(AsyncReadRepository[CarRental]):
    """Read car rentals from a SQL store using SQLModel."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize repository with a session factory.

        Args:
            session_factory: Async session factory; each read opens its own session
        """
        super().__init__(session_factory, CarRental)

    async def read(self, rental_id: RentalId) -> CarRentalDTO:
        """Read a car rental by its ID.

        Args:
            rental_id: Rental ID, as ``UUID`` or its string form

        Returns:
            CarRentalDTO reflecting the current rows of the rental, car and model

        Raises:
            CarRentalNotFoundError: If no rental has that ID
        """
        try:
            key = coerce_uuid(rental_id)
        except ValueError:
            logger.info(f"Car rental lookup with malformed id {rental_id!r}")
            raise CarRentalNotFoundError(rental_id) from None

        logger.debug(f"Reading car rental {key}")
        stmt = (
            select(self.model, Car, CarModel)
            .join(Car, self.model.car_id == Car.id)
            .join(CarModel, Car.model_id == CarModel.id)
            .where(self.model.id == key)
            .execution_options(populate_existing=True)
        )
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            row = result.one_or_none()

        if row is None:
            logger.info(f"Car rental {key} not found")
            raise CarRentalNotFoundError(rental_id)

        rental, car, model = row
        return to_car_rental_dto(rental, car, model)
