"""Registration endpoints (register/unregister a student for a course)."""

from fastapi import APIRouter

from courseapi.api.dependencies import RegistrationManagerDep
from courseapi.api.models import (
    RegistrationRequest,
    StudentResponse,
    student_to_response,
)

router = APIRouter(prefix="/students", tags=["registrations"])


@router.post("/{student_id}/register", response_model=StudentResponse)
def register(
    student_id: str, body: RegistrationRequest, registrations: RegistrationManagerDep
) -> StudentResponse:
    """Register a student for a course."""
    student = registrations.register(student_id, body.course_id)
    return student_to_response(student)


@router.post("/{student_id}/unregister", response_model=StudentResponse)
def unregister(
    student_id: str, body: RegistrationRequest, registrations: RegistrationManagerDep
) -> StudentResponse:
    """Unregister a student from a course. No-op if not registered."""
    student = registrations.unregister(student_id, body.course_id)
    return student_to_response(student)
