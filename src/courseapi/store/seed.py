"""Fixed seed data for demos and manual testing."""

from __future__ import annotations

from sqlalchemy import delete

from courseapi.logging import get_logger
from courseapi.store.database import Database
from courseapi.store.models import Course, Registration, Student

logger = get_logger("store.seed")

SEED_COURSES: list[dict[str, str]] = [
    {"title": "Intro to Programming", "code": "CS101"},
    {"title": "Data Structures", "code": "CS201"},
    {"title": "Web Development", "code": "WEB101"},
    {"title": "Databases", "code": "DB101"},
    {"title": "Operating Systems", "code": "OS201"},
]

SEED_STUDENTS: list[dict[str, str]] = [
    {"name": "Alice Johnson", "email": "alice@example.com"},
    {"name": "Bob Smith", "email": "bob@example.com"},
    {"name": "Carla Haddad", "email": "carla@example.com"},
]


def seed_database(database: Database) -> None:
    """Wipe courses, students and registrations, then insert the seed set.

    Runs in a single transaction: either the store ends up holding exactly the
    seed set or it is left untouched.
    """
    session = database.get_session()
    try:
        session.execute(delete(Registration))
        session.execute(delete(Student))
        session.execute(delete(Course))
        session.add_all(Course(**course) for course in SEED_COURSES)
        session.add_all(Student(**student) for student in SEED_STUDENTS)
        session.commit()
        logger.info(
            "Seeded %d courses and %d students", len(SEED_COURSES), len(SEED_STUDENTS)
        )
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
