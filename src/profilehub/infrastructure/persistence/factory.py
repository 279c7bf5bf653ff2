"""Storage backend selection at startup."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from profilehub.infrastructure.persistence.memory import MemoryRepositoryFactory
from profilehub.infrastructure.persistence.sqlalchemy import (
    SQLAlchemyRepositoryFactory,
    create_engine,
    create_session_maker,
    create_tables,
)

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncEngine

    from profilehub.application.factories import RepositoryFactory
    from profilehub_config import Settings

logger = logging.getLogger(__name__)


async def create_repository_factory(
    settings: Settings,
) -> tuple[RepositoryFactory, AsyncEngine | None]:
    """Build the repositories selected by ``settings.storage_backend``.

    Returns the factory and, for the SQLAlchemy backend, the engine the
    caller must dispose of on shutdown.
    """
    if settings.storage_backend == "sqlalchemy":
        engine = create_engine(settings.database_url, echo=settings.debug)
        await create_tables(engine)
        logger.info("Using SQLAlchemy storage")
        return SQLAlchemyRepositoryFactory(create_session_maker(engine)), engine

    logger.info("Using in-memory storage; data is lost on restart")
    return MemoryRepositoryFactory(), None
