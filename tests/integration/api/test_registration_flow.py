"""Integration tests for the full application over a SQLite file."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from courseapi.api.app import create_app
from courseapi.config import Settings


@pytest.fixture
def client(tmp_path: Path):
    """Create a test client over a temporary database file."""
    settings = Settings(database_url=f"sqlite:///{tmp_path / 'courseapi.db'}")
    app = create_app(settings)
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client


@pytest.mark.integration
class TestRegistrationFlow:
    """End-to-end registration scenario."""

    def test_register_then_delete_course(self, client: TestClient) -> None:
        """Create course and student, register, delete course, registration gone."""
        course = client.post("/api/courses", json={"title": "Intro", "code": "CS101"})
        assert course.status_code == 201
        course_id = course.json()["id"]

        student = client.post("/api/students", json={"name": "Alice"})
        assert student.status_code == 201
        assert student.json()["registeredCourses"] == []
        student_id = student.json()["id"]

        registered = client.post(
            f"/api/students/{student_id}/register", json={"courseId": course_id}
        )
        assert registered.status_code == 200
        entries = registered.json()["registeredCourses"]
        assert len(entries) == 1
        assert entries[0]["courseId"] == course_id
        assert entries[0]["title"] == "Intro"
        assert entries[0]["code"] == "CS101"
        assert entries[0]["registeredAt"]

        deleted = client.delete(f"/api/courses/{course_id}")
        assert deleted.status_code == 200
        assert deleted.json() == {"ok": True}

        fetched = client.get(f"/api/students/{student_id}")
        assert fetched.json()["registeredCourses"] == []

        assert client.delete(f"/api/courses/{course_id}").status_code == 404

    def test_seed_then_register(self, client: TestClient) -> None:
        """Seeded data can be registered against."""
        assert client.post("/api/seed").json() == {"ok": True}

        course = client.get("/api/courses/CS201").json()
        alice = client.get("/api/students", params={"name": "alice"}).json()[0]

        response = client.post(
            f"/api/students/{alice['id']}/register", json={"course_id": course["id"]}
        )

        assert response.status_code == 200
        assert response.json()["registeredCourses"][0]["code"] == "CS201"

    def test_heartbeat_and_landing_page(self, client: TestClient) -> None:
        """Heartbeat answers and the landing page carries the API URL."""
        assert client.get("/api/heartbeat").json() == {"ok": True}

        page = client.get("/")
        assert page.status_code == 200
        assert 'window.API_URL = "http://localhost:3000/api";' in page.text

    def test_openapi_docs(self, client: TestClient) -> None:
        """OpenAPI schema lists the API routes."""
        schema = client.get("/openapi.json").json()

        assert "/api/courses" in schema["paths"]
        assert "/api/students/{student_id}/register" in schema["paths"]
