"""Store - persistence for courses, students and their registrations."""

from courseapi.store.courses import CourseRepository
from courseapi.store.database import Database
from courseapi.store.exceptions import (
    AlreadyRegisteredError,
    ConflictError,
    CourseCodeExistsError,
    CourseNotFoundError,
    NotFoundError,
    StoreError,
    StudentNotFoundError,
    ValidationError,
)
from courseapi.store.models import Course, Registration, Student
from courseapi.store.registrations import RegistrationManager
from courseapi.store.seed import SEED_COURSES, SEED_STUDENTS, seed_database
from courseapi.store.students import StudentRepository

__all__ = [
    "SEED_COURSES",
    "SEED_STUDENTS",
    "AlreadyRegisteredError",
    "ConflictError",
    "Course",
    "CourseCodeExistsError",
    "CourseNotFoundError",
    "CourseRepository",
    "Database",
    "NotFoundError",
    "Registration",
    "RegistrationManager",
    "StoreError",
    "Student",
    "StudentNotFoundError",
    "StudentRepository",
    "ValidationError",
    "seed_database",
]
