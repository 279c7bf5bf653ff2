from profilehub.infrastructure.persistence.sqlalchemy.database import (
    create_engine,
    create_session_maker,
    create_tables,
    drop_tables,
)
from profilehub.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)

__all__ = [
    "SQLAlchemyRepositoryFactory",
    "create_engine",
    "create_session_maker",
    "create_tables",
    "drop_tables",
]
