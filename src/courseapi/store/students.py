"""StudentRepository - CRUD operations over student documents."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from courseapi.logging import get_logger
from courseapi.store.database import Database
from courseapi.store.exceptions import StudentNotFoundError
from courseapi.store.models import Student
from courseapi.store.validation import is_blank, require

logger = get_logger("store.students")


def load_student(session: Session, student_id: str) -> Student | None:
    """Load a student with a freshly read registeredCourses list."""
    stmt = (
        select(Student)
        .where(Student.id == student_id)
        .execution_options(populate_existing=True)
    )
    return session.execute(stmt).scalar_one_or_none()


def _normalize_email(email: str | None) -> str | None:
    return None if is_blank(email) else email


class StudentRepository:
    """CRUD over students. Registrations are managed by RegistrationManager."""

    def __init__(self, database: Database) -> None:
        self._db = database

    def list_students(self, name: str | None = None) -> list[Student]:
        """List students, optionally filtered by name.

        Args:
            name: Case-insensitive substring to match against the student name

        Returns:
            Matching students, ordered by name
        """
        session = self._db.get_session()
        try:
            stmt = select(Student)
            if name:
                stmt = stmt.where(Student.name.icontains(name, autoescape=True))
            stmt = stmt.order_by(Student.name)
            return list(session.execute(stmt).scalars().all())
        finally:
            session.close()

    def get_student(self, student_id: str) -> Student:
        """Get student by ID.

        Raises:
            StudentNotFoundError: If student doesn't exist
        """
        session = self._db.get_session()
        try:
            student = load_student(session, student_id)
            if student is None:
                raise StudentNotFoundError("Not found")
            return student
        finally:
            session.close()

    def create_student(self, name: str | None, email: str | None = None) -> Student:
        """Create a new student with no registrations.

        Raises:
            ValidationError: If name is missing
        """
        require("name is required", name)

        session = self._db.get_session()
        try:
            student = Student(name=name, email=_normalize_email(email))  # type: ignore[arg-type]
            session.add(student)
            session.commit()
            logger.info("Created student %s", student.id)
            return load_student(session, student.id)  # type: ignore[return-value]
        finally:
            session.close()

    def update_student(
        self, student_id: str, name: str | None, email: str | None = None
    ) -> Student:
        """Replace a student's name and email.

        An omitted email clears the stored one.

        Raises:
            ValidationError: If name is missing
            StudentNotFoundError: If student doesn't exist
        """
        require("name is required", name)

        session = self._db.get_session()
        try:
            student = session.get(Student, student_id)
            if student is None:
                raise StudentNotFoundError("Not found")

            student.name = name  # type: ignore[assignment]
            student.email = _normalize_email(email)
            session.commit()
            return load_student(session, student_id)  # type: ignore[return-value]
        finally:
            session.close()

    def delete_student(self, student_id: str) -> None:
        """Delete a student together with their registrations.

        Raises:
            StudentNotFoundError: If student doesn't exist
        """
        session = self._db.get_session()
        try:
            student = session.get(Student, student_id)
            if student is None:
                raise StudentNotFoundError("Not found")

            session.delete(student)
            session.commit()
            logger.info("Deleted student %s", student_id)
        finally:
            session.close()
