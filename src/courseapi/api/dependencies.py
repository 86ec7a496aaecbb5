"""FastAPI dependencies for dependency injection.

The Database handle is created by the application lifespan and kept on
app.state; repositories are built per request around that shared handle.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from courseapi.config import Settings
from courseapi.store import (
    CourseRepository,
    Database,
    RegistrationManager,
    StudentRepository,
)


def get_database(request: Request) -> Database:
    """Dependency that provides the Database handle."""
    database = getattr(request.app.state, "database", None)
    if database is None:
        raise RuntimeError("Database not initialized. Start the app through its lifespan.")
    return database


DatabaseDep = Annotated[Database, Depends(get_database)]


def get_settings(request: Request) -> Settings:
    """Dependency that provides the application settings."""
    settings = getattr(request.app.state, "settings", None)
    return settings if settings is not None else Settings()


SettingsDep = Annotated[Settings, Depends(get_settings)]


def get_course_repository(database: DatabaseDep) -> CourseRepository:
    """Dependency that provides a CourseRepository."""
    return CourseRepository(database)


CourseRepositoryDep = Annotated[CourseRepository, Depends(get_course_repository)]


def get_student_repository(database: DatabaseDep) -> StudentRepository:
    """Dependency that provides a StudentRepository."""
    return StudentRepository(database)


StudentRepositoryDep = Annotated[StudentRepository, Depends(get_student_repository)]


def get_registration_manager(
    database: DatabaseDep, courses: CourseRepositoryDep
) -> RegistrationManager:
    """Dependency that provides a RegistrationManager."""
    return RegistrationManager(database, courses)


RegistrationManagerDep = Annotated[RegistrationManager, Depends(get_registration_manager)]
