"""Shared pytest fixtures and configuration."""

import pytest

from courseapi.store import Database


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")


# Shared fixtures


@pytest.fixture
def database():
    """Create an in-memory Database with tables."""
    db = Database("sqlite:///:memory:")
    db.create_tables()
    yield db
    db.close()
