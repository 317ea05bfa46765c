"""Explicit wiring of the car rental services.

This module replaces lookup-by-name dependency resolution with a typed
registry built once at process start. Callers pass what they want to
override (settings, clock, engine) and get back concrete collaborators
typed by their interfaces.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine

from .config import Settings
from .config import settings as default_settings
from .database.repositories import CarRentalReadRepositoryInterface, SqlCarRentalReadRepository
from .database.utils import create_engine, create_sessionmaker
from .date_parser import Clock, DateParser

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ServiceRegistry:
    """Bundle of the services an application or test needs."""

    date_parser: DateParser
    car_rental_read_repository: CarRentalReadRepositoryInterface
    engine: AsyncEngine
    owns_engine: bool = True

    async def aclose(self) -> None:
        """Dispose the engine if this registry created it."""
        if self.owns_engine:
            await self.engine.dispose()


def build_registry(
    *,
    settings: Optional[Settings] = None,
    clock: Optional[Clock] = None,
    engine: Optional[AsyncEngine] = None,
    configure_logging: bool = False,
) -> ServiceRegistry:
    """Build a ``ServiceRegistry``.

    Args:
        settings: Settings to read the database URL from. Defaults to the global settings.
        clock: Clock for the date parser. Defaults to UTC now.
        engine: Existing engine to use instead of creating one from settings.
        configure_logging: Whether to run ``setup_logging`` from the settings first.

    Returns:
        Registry holding the date parser and the car rental read repository
    """
    cfg = settings or default_settings

    if configure_logging:
        from .logging_config import setup_logging

        setup_logging(
            log_level=cfg.log_level,
            log_format=cfg.log_format,
            enable_file=cfg.enable_file_logging,
            log_file_dir=cfg.log_file_dir if cfg.enable_file_logging else None,
        )

    owns_engine = engine is None
    if engine is None:
        engine = create_engine(cfg.database_url, echo=cfg.database_echo)
    logger.info(f"Building service registry on {engine.url.render_as_string(hide_password=True)}")

    return ServiceRegistry(
        date_parser=DateParser(clock=clock),
        car_rental_read_repository=SqlCarRentalReadRepository(create_sessionmaker(engine)),
        engine=engine,
        owns_engine=owns_engine,
    )
