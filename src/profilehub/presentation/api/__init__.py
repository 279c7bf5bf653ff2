"""REST API presentation layer for profilehub.

Structure:
    api/
    ├── app.py                # FastAPI application factory
    ├── dependencies.py       # Dependency injection
    ├── exception_handlers.py # Domain/auth exception to HTTP mapping
    ├── routers/              # API route handlers
    └── schemas/              # Pydantic request/response schemas
"""

from profilehub.presentation.api.app import create_app

__all__ = ["create_app"]
