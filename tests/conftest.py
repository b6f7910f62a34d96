"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- An isolated in-memory job registry per test
- FastAPI test client wired to that registry
- Sample job payloads
"""

import pytest
from fastapi.testclient import TestClient

from app.core.deps import get_job_registry
from app.crud.job import JobRegistry
from main import app


@pytest.fixture
def registry():
    """
    Fresh job registry for each test, so tests never see each other's jobs.
    """
    return JobRegistry()


@pytest.fixture
def client(registry):
    """
    FastAPI test client with overridden registry dependency.
    """
    app.dependency_overrides[get_job_registry] = lambda: registry

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def sample_job_data():
    """Sample job data for testing"""
    return {
        "title": "Senior Python Developer",
        "description": """
        We are looking for a Senior Python Developer with 5+ years of experience.

        Requirements:
        - Expert knowledge of Python and FastAPI
        - Experience with Docker and containerization
        """,
        "company": "Acme Corp",
        "location": "San Francisco, CA (Remote)",
        "salaryRange": "$150k - $180k"
    }


@pytest.fixture
def minimal_job_data():
    """Job payload without the optional salary range"""
    return {
        "title": "Engineer",
        "description": "Build things",
        "company": "Acme",
        "location": "Remote"
    }
