"""
Unit tests for api/routers.

Tests that routers are correctly configured and wired into the application.
"""

import pytest
from fastapi.testclient import TestClient

from api.deps import get_current_user, get_plan_repo
from backend.main import create_app
from backend.settings import Settings
from tests.fakes import FakePlanRepository


@pytest.fixture
def test_app():
    settings = Settings(environment="test", _env_file=None)
    return create_app(settings=settings)


@pytest.fixture
def client(test_app):
    return TestClient(test_app)


@pytest.mark.unit
class TestRouterInclusion:
    """Test that all routers are correctly included in the app."""

    @pytest.mark.parametrize("path,method,tag", [
        ("/health", "get", "Health"),
        ("/plans/generate", "post", "Plans"),
        ("/plans/week", "get", "Plans"),
        ("/plans/{plan_id}", "get", "Plans"),
        ("/plans/{plan_id}/exercises/{index}/alternatives", "get", "Plans"),
        ("/plans/{plan_id}/exercises/{index}", "put", "Plans"),
        ("/sessions", "post", "Sessions"),
        ("/sessions/{session_id}", "get", "Sessions"),
        ("/sessions/{session_id}", "delete", "Sessions"),
        ("/sessions/{session_id}/input", "put", "Sessions"),
        ("/sessions/{session_id}/complete-set", "post", "Sessions"),
        ("/sessions/{session_id}/tick", "post", "Sessions"),
        ("/sessions/{session_id}/finish", "post", "Sessions"),
        ("/exercise-logs", "get", "Exercise Logs"),
        ("/exercise-logs/best", "get", "Exercise Logs"),
    ])
    def test_route_registered_with_tag(self, test_app, path, method, tag):
        operation = test_app.openapi()["paths"][path][method]
        assert tag in operation["tags"]

    def test_week_route_not_shadowed_by_plan_lookup(self, test_app):
        """/plans/week answers with the weekly view, not a 404 for plan id "week"."""
        async def mock_user():
            return "test_user"

        test_app.dependency_overrides[get_current_user] = mock_user
        test_app.dependency_overrides[get_plan_repo] = lambda: FakePlanRepository()

        response = TestClient(test_app).get("/plans/week", params={"day": "2024-05-15"})

        test_app.dependency_overrides.clear()
        assert response.status_code == 200
        assert len(response.json()["days"]) == 7


@pytest.mark.unit
class TestHealthRouter:
    """Test health router endpoints."""

    def test_health_returns_ok_status(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_health_needs_no_auth(self, client):
        response = client.get("/health", headers={"Authorization": "garbage"})
        assert response.status_code == 200

    def test_health_method_not_allowed(self, client):
        response = client.post("/health")
        assert response.status_code == 405


@pytest.mark.unit
class TestAuthRequired:
    """Domain endpoints reject unauthenticated requests."""

    @pytest.mark.parametrize("method,path", [
        ("get", "/plans/week"),
        ("get", "/plans/plan-1"),
        ("get", "/sessions/abc"),
        ("get", "/exercise-logs"),
    ])
    def test_returns_401_without_credentials(self, client, method, path):
        response = getattr(client, method)(path)
        assert response.status_code == 401
