"""Custom exceptions for the course registration store."""


class StoreError(Exception):
    """Base exception for store errors."""


class ValidationError(StoreError):
    """A required field is missing or empty."""


class NotFoundError(StoreError):
    """No entity matches the given id or code."""

    def __init__(self, entity: str, message: str | None = None) -> None:
        self.entity = entity
        super().__init__(message or f"{entity} not found")


class CourseNotFoundError(NotFoundError):
    """Course with given id or code does not exist."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__("Course", message)


class StudentNotFoundError(NotFoundError):
    """Student with given id does not exist."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__("Student", message)


class ConflictError(StoreError):
    """A unique key or registration already exists."""


class CourseCodeExistsError(ConflictError):
    """Course with given code already exists."""


class AlreadyRegisteredError(ConflictError):
    """Student is already registered for the course."""
