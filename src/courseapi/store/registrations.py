"""RegistrationManager - binds students to courses.

Registrations are embedded in the student: each one is a snapshot of the course's
title and code at the time of registration. A student holds at most one
registration per course, enforced by a pre-check and by a unique constraint on the
insert itself, so two concurrent registrations for the same pair cannot both land.
"""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from courseapi.logging import get_logger
from courseapi.store.courses import CourseRepository
from courseapi.store.database import Database
from courseapi.store.exceptions import (
    AlreadyRegisteredError,
    CourseNotFoundError,
    StudentNotFoundError,
)
from courseapi.store.models import Course, Registration, Student
from courseapi.store.students import load_student
from courseapi.store.validation import require

logger = get_logger("store.registrations")


def _is_registered(session: Session, student_id: str, course_id: str) -> bool:
    stmt = select(Registration.id).where(
        Registration.student_id == student_id,
        Registration.course_id == course_id,
    )
    return session.execute(stmt).first() is not None


class RegistrationManager:
    """Register/unregister students and purge registrations of deleted courses."""

    def __init__(self, database: Database, courses: CourseRepository | None = None) -> None:
        self._db = database
        self._courses = courses if courses is not None else CourseRepository(database)

    def register(self, student_id: str, course_id: str | None) -> Student:
        """Register a student for a course.

        Args:
            student_id: The student's ID
            course_id: The course's ID

        Returns:
            The updated Student with the new registration appended

        Raises:
            ValidationError: If course_id is missing
            StudentNotFoundError: If student doesn't exist
            CourseNotFoundError: If course doesn't exist
            AlreadyRegisteredError: If the student already holds this course
        """
        require("courseId is required", course_id)

        session = self._db.get_session()
        try:
            student = session.get(Student, student_id)
            course = session.get(Course, course_id)
            if student is None:
                raise StudentNotFoundError()
            if course is None:
                raise CourseNotFoundError()

            if _is_registered(session, student_id, course.id):
                raise AlreadyRegisteredError("Already registered")

            session.add(Registration.snapshot(student_id, course))
            try:
                session.commit()
            except IntegrityError as e:
                # Lost the race against a concurrent registration for the same pair
                session.rollback()
                raise AlreadyRegisteredError("Already registered") from e

            logger.info("Registered student %s for course %s", student_id, course.code)
            return load_student(session, student_id)  # type: ignore[return-value]
        finally:
            session.close()

    def unregister(self, student_id: str, course_id: str | None) -> Student:
        """Remove a student's registrations for a course.

        Unregistering a course the student does not hold is a no-op.

        Raises:
            ValidationError: If course_id is missing
            StudentNotFoundError: If student doesn't exist
        """
        require("courseId is required", course_id)

        session = self._db.get_session()
        try:
            if session.get(Student, student_id) is None:
                raise StudentNotFoundError()

            result = session.execute(
                delete(Registration).where(
                    Registration.student_id == student_id,
                    Registration.course_id == course_id,
                )
            )
            session.commit()
            if result.rowcount:
                logger.info("Unregistered student %s from course %s", student_id, course_id)
            return load_student(session, student_id)  # type: ignore[return-value]
        finally:
            session.close()

    def purge_course(self, course_id: str) -> int:
        """Remove every registration referencing a course, across all students.

        Returns:
            Number of registrations removed
        """
        session = self._db.get_session()
        try:
            result = session.execute(
                delete(Registration).where(Registration.course_id == str(course_id))
            )
            session.commit()
            return result.rowcount or 0
        finally:
            session.close()

    def delete_course(self, course_id: str) -> int:
        """Delete a course and cascade to the registrations that reference it.

        The course is deleted first; a failure during the sweep leaves the course
        gone and some registrations in place.

        Returns:
            Number of registrations removed

        Raises:
            CourseNotFoundError: If course doesn't exist
        """
        self._courses.delete_course(course_id)
        removed = self.purge_course(course_id)
        logger.info("Course %s deleted, removed %d registrations", course_id, removed)
        return removed
