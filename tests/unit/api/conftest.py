"""Fixtures for route tests: a bare app over an in-memory database."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from courseapi.api.dependencies import get_database
from courseapi.api.errors import register_exception_handlers
from courseapi.api.routes import courses, registrations, students, system
from courseapi.store import Database


@pytest.fixture
def app(database: Database):
    """Create a test FastAPI app with the database dependency overridden."""
    app = FastAPI()

    app.dependency_overrides[get_database] = lambda: database

    register_exception_handlers(app)

    app.include_router(system.router, prefix="/api")
    app.include_router(courses.router, prefix="/api")
    app.include_router(students.router, prefix="/api")
    app.include_router(registrations.router, prefix="/api")

    return app


@pytest.fixture
def client(app: FastAPI):
    """Create a test client."""
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client
