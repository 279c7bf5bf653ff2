"""profilehub - accounts, profiles, settings and file records.

Layers:
    domain/          # Aggregates, value objects, repository interfaces
    application/     # Stores and the aggregation service
    infrastructure/  # In-memory and SQLAlchemy persistence, file storage
    presentation/    # FastAPI app and Typer CLI
"""

__version__ = "0.1.0"
