"""REST API for the course registration service."""

from courseapi.api.app import app, create_app
from courseapi.api.models import (
    CourseCreate,
    CourseResponse,
    CourseUpdate,
    RegistrationRequest,
    StudentCreate,
    StudentResponse,
)

__all__ = [
    "CourseCreate",
    "CourseResponse",
    "CourseUpdate",
    "RegistrationRequest",
    "StudentCreate",
    "StudentResponse",
    "app",
    "create_app",
]
