from __future__ import annotations

from datetime import datetime, timezone
from typing import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from support.settings import test_settings

from car_rental.core.database.utils import create_engine, create_sessionmaker, isolated_schema
from car_rental.core.date_parser import DateParser

REFERENCE_INSTANT = datetime(2026, 10, 19, 9, 30, 15, 250000, tzinfo=timezone.utc)


@pytest.fixture(scope="session")
def test_config():
    """Fixture providing test configuration from Pydantic settings model.

    Returns:
        TestSettings: Test configuration with all environment variables loaded
    """
    return test_settings


@pytest.fixture
def reference_instant() -> datetime:
    """Fixed instant every relative date in a test is anchored to."""
    return REFERENCE_INSTANT


@pytest.fixture
def date_parser(reference_instant: datetime) -> DateParser:
    """Date parser whose clock is frozen at ``reference_instant``."""
    return DateParser.frozen(reference_instant)


@pytest.fixture
async def db_engine(test_config) -> AsyncGenerator[AsyncEngine, None]:
    """Engine on a clean schema that is dropped after the test, whatever its outcome."""
    engine = create_engine(test_config.database.url)
    try:
        async with isolated_schema(engine):
            yield engine
    finally:
        await engine.dispose()


@pytest.fixture
def session_factory(db_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test database."""
    return create_sessionmaker(db_engine)
