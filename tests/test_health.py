"""
Tests for root, health, version and documentation endpoints.
"""

from datetime import datetime

from fastapi.testclient import TestClient

from app.core.config import Settings, settings
from main import create_app


class TestServiceEndpoints:
    """Tests for the service information endpoints"""

    def test_root(self, client):
        """Test the plain text root message"""
        response = client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == "Recruiter Platform API is running!"

    def test_health(self, client):
        """Test the health payload"""
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "Healthy"
        assert data["timestamp"].endswith("Z")
        assert datetime.fromisoformat(data["timestamp"].replace("Z", "+00:00"))

    def test_version(self, client):
        """Test version and environment reporting"""
        response = client.get("/api/version")

        assert response.status_code == 200
        assert response.json() == {
            "version": "1.0.0",
            "environment": settings.ENVIRONMENT,
        }


class TestDocumentation:
    """Tests for the interactive API documentation"""

    def _client(self, environment):
        config = Settings(_env_file=None, ENVIRONMENT=environment)
        return TestClient(create_app(config))

    def test_docs_served_in_development(self):
        """Test that Swagger UI and the OpenAPI document are served in Development"""
        with self._client("Development") as client:
            docs = client.get("/api-docs")
            info = client.get("/openapi.json").json()["info"]

        assert docs.status_code == 200
        assert "swagger" in docs.text.lower()
        assert info["title"] == "Recruiter Platform API"
        assert info["version"] == "v1"
        assert info["description"] == (
            "A modern internal recruiter platform API following Clean Architecture principles"
        )
        assert info["contact"] == {
            "name": "Development Team",
            "email": "dev@recruiterplatform.com",
        }

    def test_docs_hidden_in_production(self):
        """Test that no documentation is served outside Development"""
        with self._client("Production") as client:
            assert client.get("/api-docs").status_code == 404
            assert client.get("/openapi.json").status_code == 404

    def test_version_reports_app_environment(self):
        """Test that /api/version reports the environment the app was built for"""
        with self._client("Production") as client:
            response = client.get("/api/version")

        assert response.json() == {"version": "1.0.0", "environment": "Production"}

    def test_production_app_serves_jobs(self):
        """Test that the job API works the same without docs"""
        with self._client("Production") as client:
            response = client.get("/api/jobs")

        assert response.status_code == 200
        assert isinstance(response.json(), list)
