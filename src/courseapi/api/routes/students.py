"""Student CRUD endpoints."""

from fastapi import APIRouter, status

from courseapi.api.dependencies import StudentRepositoryDep
from courseapi.api.models import (
    OkResponse,
    StudentCreate,
    StudentResponse,
    StudentUpdate,
    student_to_response,
)

router = APIRouter(prefix="/students", tags=["students"])


@router.get("", response_model=list[StudentResponse])
def list_students(
    students: StudentRepositoryDep, name: str | None = None
) -> list[StudentResponse]:
    """List students, optionally filtered by a case-insensitive name fragment."""
    return [student_to_response(s) for s in students.list_students(name)]


@router.get("/{student_id}", response_model=StudentResponse)
def get_student(student_id: str, students: StudentRepositoryDep) -> StudentResponse:
    """Get a student by ID."""
    return student_to_response(students.get_student(student_id))


@router.post(
    "",
    response_model=StudentResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_student(student: StudentCreate, students: StudentRepositoryDep) -> StudentResponse:
    """Create a new student with no registrations."""
    created = students.create_student(name=student.name, email=student.email)
    return student_to_response(created)


@router.put("/{student_id}", response_model=StudentResponse)
def update_student(
    student_id: str, student: StudentUpdate, students: StudentRepositoryDep
) -> StudentResponse:
    """Replace a student's name and email."""
    updated = students.update_student(student_id, name=student.name, email=student.email)
    return student_to_response(updated)


@router.delete("/{student_id}", response_model=OkResponse)
def delete_student(student_id: str, students: StudentRepositoryDep) -> OkResponse:
    """Delete a student."""
    students.delete_student(student_id)
    return OkResponse()
