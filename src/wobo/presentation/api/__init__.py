"""REST API presentation layer for Wobo.

This package provides a FastAPI-based REST API for user accounts.

Structure:
    api/
    ├── app.py                # FastAPI application factory
    ├── dependencies.py       # Dependency injection
    ├── exception_handlers.py # Failure to HTTP mapping
    ├── routers/              # API route handlers
    └── schemas/              # Pydantic request/response schemas
"""

from wobo.presentation.api.app import create_app

__all__ = ["create_app"]
