"""Course endpoints."""

from fastapi import APIRouter, status

from courseapi.api.dependencies import CourseRepositoryDep, RegistrationManagerDep
from courseapi.api.models import (
    CourseCreate,
    CourseResponse,
    CourseUpdate,
    OkResponse,
    course_to_response,
)

router = APIRouter(prefix="/courses", tags=["courses"])


@router.get("", response_model=list[CourseResponse])
def list_courses(courses: CourseRepositoryDep) -> list[CourseResponse]:
    """List all courses."""
    return [course_to_response(c) for c in courses.list_courses()]


@router.get("/{code}", response_model=CourseResponse | None)
def get_course_by_code(code: str, courses: CourseRepositoryDep) -> CourseResponse | None:
    """Get a course by code. Returns null when no course has that code."""
    course = courses.find_course_by_code(code)
    return course_to_response(course) if course is not None else None


@router.put("/{code}", response_model=CourseResponse | None)
def update_course_by_code(
    code: str, course: CourseUpdate, courses: CourseRepositoryDep
) -> CourseResponse | None:
    """Update title, code and credit number of the course with the given code."""
    updated = courses.update_course_by_code(
        code,
        title=course.title,
        new_code=course.code,
        credit_nbr=course.credit_nbr,
    )
    return course_to_response(updated) if updated is not None else None


@router.post(
    "",
    response_model=CourseResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_course(course: CourseCreate, courses: CourseRepositoryDep) -> CourseResponse:
    """Create a new course."""
    created = courses.create_course(title=course.title, code=course.code)
    return course_to_response(created)


@router.delete("/{course_id}", response_model=OkResponse)
def delete_course(course_id: str, registrations: RegistrationManagerDep) -> OkResponse:
    """Delete a course and remove it from every student's registrations."""
    registrations.delete_course(course_id)
    return OkResponse()
