"""SQLAlchemy models for the course registration store."""

from __future__ import annotations

import uuid
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import (
    DateTime,
    ForeignKey,
    Integer,
    String,
    TypeDecorator,
    UniqueConstraint,
)
from sqlalchemy.orm import (
    DeclarativeBase,
    Mapped,
    mapped_column,
    relationship,
)


def generate_uuid() -> str:
    """Generate a new UUID string."""
    return str(uuid.uuid4())


def utcnow() -> datetime:
    """Current time in UTC."""
    return datetime.now(UTC)


class UTCDateTime(TypeDecorator[datetime]):
    """Timestamp stored as naive UTC and loaded back as an aware UTC datetime."""

    impl = DateTime
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect: Any) -> datetime | None:
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(UTC).replace(tzinfo=None)
        return value

    def process_result_value(self, value: datetime | None, dialect: Any) -> datetime | None:
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class Course(Base):
    """Course model - a course students can register for."""

    __tablename__ = "courses"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    code: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    credit_nbr: Mapped[int | None] = mapped_column(Integer, nullable=True)

    def __init__(
        self,
        title: str,
        code: str,
        id: str | None = None,
        credit_nbr: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.id = id if id is not None else generate_uuid()
        self.title = title
        self.code = code
        self.credit_nbr = credit_nbr

    def __repr__(self) -> str:
        return f"<Course(id={self.id!r}, code={self.code!r}, title={self.title!r})>"


class Student(Base):
    """Student model - owns its registrations."""

    __tablename__ = "students"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # Embedded registrations, kept in insertion order
    registered_courses: Mapped[list[Registration]] = relationship(
        "Registration",
        back_populates="student",
        cascade="all, delete-orphan",
        order_by="Registration.id",
        lazy="selectin",
    )

    def __init__(
        self,
        name: str,
        id: str | None = None,
        email: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.id = id if id is not None else generate_uuid()
        self.name = name
        self.email = email

    def __repr__(self) -> str:
        return f"<Student(id={self.id!r}, name={self.name!r})>"


class Registration(Base):
    """Registration model - a student's snapshot of a course at registration time.

    course_id has no foreign key; dangling registrations are removed
    by the registration manager when a course is deleted. title and code are copied
    from the course and do not follow later course edits.
    """

    __tablename__ = "student_registrations"
    __table_args__ = (UniqueConstraint("student_id", "course_id", name="uq_student_course"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    student_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("students.id", ondelete="CASCADE"), nullable=False
    )
    course_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    code: Mapped[str] = mapped_column(String(50), nullable=False)
    registered_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)

    # Relationships
    student: Mapped[Student] = relationship("Student", back_populates="registered_courses")

    def __init__(
        self,
        student_id: str,
        course_id: str,
        title: str,
        code: str,
        registered_at: datetime | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.student_id = student_id
        self.course_id = course_id
        self.title = title
        self.code = code
        self.registered_at = registered_at if registered_at is not None else utcnow()

    @classmethod
    def snapshot(cls, student_id: str, course: Course) -> Registration:
        """Build a registration copying the course's current title and code."""
        return cls(
            student_id=student_id,
            course_id=str(course.id),
            title=course.title,
            code=course.code,
        )

    def __repr__(self) -> str:
        return (
            f"<Registration(student_id={self.student_id!r}, course_id={self.course_id!r}, "
            f"code={self.code!r})>"
        )
