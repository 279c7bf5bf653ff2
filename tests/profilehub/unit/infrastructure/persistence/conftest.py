"""
Fixtures for SQLAlchemy repository tests.

Each test gets its own SQLite file database below tmp_path, created
fresh and disposed afterwards.
"""

import pytest_asyncio

from profilehub.infrastructure.persistence.sqlalchemy import (
    SQLAlchemyRepositoryFactory,
    create_engine,
    create_session_maker,
    create_tables,
)
from tests.shared.fixtures.factories import make_account


@pytest_asyncio.fixture
async def async_engine(tmp_path):
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'profilehub.db'}")
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def repositories(async_engine) -> SQLAlchemyRepositoryFactory:
    return SQLAlchemyRepositoryFactory(create_session_maker(async_engine))


@pytest_asyncio.fixture
async def account(repositories):
    """An account row so dependent rows have an owner."""
    account = make_account()
    await repositories.account_repository().create(account)
    return account
