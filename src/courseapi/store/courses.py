"""CourseRepository - CRUD operations over course documents."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from courseapi.logging import get_logger
from courseapi.store.database import Database
from courseapi.store.exceptions import (
    CourseCodeExistsError,
    CourseNotFoundError,
    ValidationError,
)
from courseapi.store.models import Course
from courseapi.store.validation import is_blank, require

logger = get_logger("store.courses")


def _find_by_code(session: Session, code: str) -> Course | None:
    return session.execute(select(Course).where(Course.code == code)).scalar_one_or_none()


class CourseRepository:
    """CRUD over courses. Course codes are unique.

    Deleting a course here does not touch student registrations; use
    RegistrationManager.delete_course for the cascading delete.
    """

    def __init__(self, database: Database) -> None:
        self._db = database

    def list_courses(self) -> list[Course]:
        """List all courses.

        Returns:
            All courses, in no particular order.
        """
        session = self._db.get_session()
        try:
            return list(session.execute(select(Course)).scalars().all())
        finally:
            session.close()

    def find_course_by_code(self, code: str) -> Course | None:
        """Get course by code, or None if no course has that code."""
        session = self._db.get_session()
        try:
            return _find_by_code(session, code)
        finally:
            session.close()

    def create_course(self, title: str | None, code: str | None) -> Course:
        """Create a new course.

        Args:
            title: Display name
            code: Unique course code

        Returns:
            Created Course object with generated ID

        Raises:
            ValidationError: If title or code is missing
            CourseCodeExistsError: If a course with the same code already exists
        """
        require("title and code are required", title, code)

        session = self._db.get_session()
        try:
            if _find_by_code(session, code) is not None:  # type: ignore[arg-type]
                raise CourseCodeExistsError("Course code already exists")

            course = Course(title=title, code=code)  # type: ignore[arg-type]
            session.add(course)
            session.commit()
            session.refresh(course)
            logger.info("Created course %s (%s)", course.code, course.id)
            return course
        except IntegrityError as e:
            session.rollback()
            raise CourseCodeExistsError("Course code already exists") from e
        finally:
            session.close()

    def update_course_by_code(
        self,
        code: str,
        title: str | None = None,
        new_code: str | None = None,
        credit_nbr: int | None = None,
    ) -> Course | None:
        """Update the course identified by code. Only provided fields are updated.

        Existing registrations keep the title/code they were created with.

        Args:
            code: Current code of the course
            title: New title (optional)
            new_code: New code (optional)
            credit_nbr: New credit number (optional)

        Returns:
            The updated Course, or None if no course has that code

        Raises:
            ValidationError: If title or new_code is given but empty
            CourseCodeExistsError: If new_code belongs to another course
        """
        if title is not None and is_blank(title):
            raise ValidationError("title must not be empty")
        if new_code is not None and is_blank(new_code):
            raise ValidationError("code must not be empty")

        session = self._db.get_session()
        try:
            course = _find_by_code(session, code)
            if course is None:
                return None

            if new_code is not None and new_code != course.code:
                if _find_by_code(session, new_code) is not None:
                    raise CourseCodeExistsError("Course code already exists")
                course.code = new_code
            if title is not None:
                course.title = title
            if credit_nbr is not None:
                course.credit_nbr = credit_nbr

            session.commit()
            session.refresh(course)
            logger.info("Updated course %s (%s)", course.code, course.id)
            return course
        except IntegrityError as e:
            session.rollback()
            raise CourseCodeExistsError("Course code already exists") from e
        finally:
            session.close()

    def delete_course(self, course_id: str) -> None:
        """Delete a course document.

        Raises:
            CourseNotFoundError: If course doesn't exist
        """
        session = self._db.get_session()
        try:
            course = session.get(Course, course_id)
            if course is None:
                raise CourseNotFoundError("Not found")

            session.delete(course)
            session.commit()
            logger.info("Deleted course %s (%s)", course.code, course_id)
        finally:
            session.close()
