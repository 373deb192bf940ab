"""
Tests for the project endpoints.
"""

import pytest
from unittest.mock import AsyncMock
from fastapi.testclient import TestClient
from datetime import date, datetime, timezone

from api.dependencies import get_project_service
from modules.projects.exceptions import ProjectNotFoundError
from modules.projects.models import Project, ProjectDeletion

from tests.conftest import ADMIN_ID


@pytest.fixture
def mock_service(app):
    service = AsyncMock()
    app.dependency_overrides[get_project_service] = lambda: service
    return service


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def project() -> Project:
    return Project(
        id="project-1",
        name="Harvest",
        starting_date=date(2025, 6, 1),
        created_by=ADMIN_ID,
        created_at=datetime(2025, 5, 1, tzinfo=timezone.utc),
    )


class TestProjects:
    def test_worker_lists(self, client, mock_service, worker_headers, project):
        mock_service.list_projects.return_value = [project]

        response = client.get("/api/projects", headers=worker_headers)

        assert response.status_code == 200
        assert response.json()[0]["starting_date"] == "2025-06-01"

    def test_admin_creates(self, client, mock_service, admin_headers, project):
        mock_service.create_project.return_value = project

        response = client.post(
            "/api/projects",
            json={"name": "Harvest", "starting_date": "2025-06-01"},
            headers=admin_headers,
        )

        assert response.status_code == 201
        request, created_by = mock_service.create_project.call_args[0]
        assert request.name == "Harvest"
        assert created_by == ADMIN_ID

    def test_worker_cannot_create(self, client, mock_service, worker_headers):
        response = client.post(
            "/api/projects",
            json={"name": "Harvest", "starting_date": "2025-06-01"},
            headers=worker_headers,
        )
        assert response.status_code == 403

    def test_blank_name(self, client, mock_service, admin_headers):
        response = client.post(
            "/api/projects",
            json={"name": "  ", "starting_date": "2025-06-01"},
            headers=admin_headers,
        )
        assert response.status_code == 422

    def test_delete(self, client, mock_service, admin_headers):
        mock_service.delete_project.return_value = ProjectDeletion(
            project_id="project-1", slots_removed=3, reservations_removed=5
        )

        response = client.delete("/api/projects/project-1", headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["reservations_removed"] == 5

    def test_get_missing(self, client, mock_service, worker_headers):
        mock_service.get_project.side_effect = ProjectNotFoundError("nope")

        response = client.get("/api/projects/nope", headers=worker_headers)

        assert response.status_code == 404
        assert response.json()["code"] == "PROJECT_NOT_FOUND"
