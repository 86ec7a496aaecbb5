"""Pydantic models for the REST API.

Responses are raw documents with camelCase keys. Requests accept camelCase or
snake_case keys. Required fields are optional here so that the repositories can
report them as missing with their own messages.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DocumentModel(BaseModel):
    """Base for all request/response bodies."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class OkResponse(BaseModel):
    """Acknowledgement body for deletes, seeding and heartbeat."""

    ok: bool = True


class ErrorResponse(BaseModel):
    """Body returned for every error status."""

    error: str


# Course models


class CourseCreate(DocumentModel):
    """Request model for creating a course."""

    title: str | None = None
    code: str | None = None


class CourseUpdate(DocumentModel):
    """Request model for updating a course by code."""

    title: str | None = None
    code: str | None = None
    credit_nbr: int | None = None


class CourseResponse(DocumentModel):
    """Response model for a course."""

    id: str
    title: str
    code: str
    credit_nbr: int | None = None


def course_to_response(course: Any) -> CourseResponse:
    """Convert a Course model to CourseResponse."""
    return CourseResponse.model_validate(course)


# Student models


class StudentCreate(DocumentModel):
    """Request model for creating or replacing a student."""

    name: str | None = None
    email: str | None = None


StudentUpdate = StudentCreate


class RegistrationResponse(DocumentModel):
    """Response model for a registration embedded in a student."""

    course_id: str
    title: str
    code: str
    registered_at: datetime


class StudentResponse(DocumentModel):
    """Response model for a student."""

    id: str
    name: str
    email: str | None = None
    registered_courses: list[RegistrationResponse] = []


def student_to_response(student: Any) -> StudentResponse:
    """Convert a Student model to StudentResponse."""
    return StudentResponse.model_validate(student)


# Registration models


class RegistrationRequest(DocumentModel):
    """Request model for register/unregister."""

    course_id: str | None = None
