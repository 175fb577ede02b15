"""
Smoke tests for health checks and critical endpoint availability.

Quick tests to verify basic functionality.
"""

from fastapi.testclient import TestClient
from gymdesk.main import app


class TestHealthChecks:
    """Tests for health check endpoints."""

    def test_health_endpoint(self):
        """`/health` returns 200."""
        client = TestClient(app)
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_root_endpoint(self):
        """`/` returns the landing message for visitors."""
        client = TestClient(app)
        response = client.get("/")
        assert response.status_code == 200
        data = response.json()
        assert "message" in data
        assert "Gymdesk" in data["message"]

    def test_critical_endpoints_respond(self):
        """Key endpoints return expected status codes."""
        client = TestClient(app, follow_redirects=False)
        # OpenAPI schema
        response = client.get("/openapi.json")
        assert response.status_code == 200
        assert "Bearer" in response.json()["components"]["securitySchemes"]

        # Pages send anonymous callers to the login page
        for path in ("/dashboard", "/admin"):
            response = client.get(path)
            assert response.status_code == 303
            assert response.headers["location"] == "/auth/login"
