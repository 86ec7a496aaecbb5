"""Integration tests for concurrent writes against a file-backed store."""

import threading
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest
from sqlalchemy import func, select

from courseapi.store import (
    AlreadyRegisteredError,
    CourseCodeExistsError,
    CourseRepository,
    Database,
    Registration,
    RegistrationManager,
    StudentRepository,
)

WORKERS = 8


@pytest.fixture
def file_database(tmp_path: Path):
    """A database backed by a temporary SQLite file."""
    db = Database(f"sqlite:///{tmp_path / 'concurrent.db'}")
    db.create_tables()
    yield db
    db.close()


def run_concurrently(operation, count: int = WORKERS) -> list[str]:
    """Run operation from count threads released together; collect 'ok' or the error name."""
    barrier = threading.Barrier(count)

    def attempt() -> str:
        barrier.wait()
        try:
            operation()
        except (AlreadyRegisteredError, CourseCodeExistsError) as e:
            return type(e).__name__
        return "ok"

    with ThreadPoolExecutor(max_workers=count) as pool:
        futures = [pool.submit(attempt) for _ in range(count)]
        return [f.result() for f in futures]


@pytest.mark.integration
class TestConcurrentWrites:
    """Racing writers leave exactly one row behind."""

    def test_concurrent_register_keeps_single_registration(
        self, file_database: Database
    ) -> None:
        """One register call wins; the rest see AlreadyRegisteredError."""
        course = CourseRepository(file_database).create_course(title="Intro", code="CS101")
        student = StudentRepository(file_database).create_student(name="Alice")
        manager = RegistrationManager(file_database)

        outcomes = run_concurrently(lambda: manager.register(student.id, course.id))

        assert outcomes.count("ok") == 1
        assert outcomes.count("AlreadyRegisteredError") == WORKERS - 1

        session = file_database.get_session()
        try:
            rows = session.execute(select(func.count(Registration.id))).scalar_one()
        finally:
            session.close()
        assert rows == 1

    def test_concurrent_create_course_keeps_single_course(
        self, file_database: Database
    ) -> None:
        """One create_course call wins; the rest see CourseCodeExistsError."""
        courses = CourseRepository(file_database)

        outcomes = run_concurrently(lambda: courses.create_course(title="Intro", code="CS101"))

        assert outcomes.count("ok") == 1
        assert outcomes.count("CourseCodeExistsError") == WORKERS - 1
        assert len(courses.list_courses()) == 1
