"""
FastAPI dependencies shared by the API endpoints.
"""

from fastapi import Request

from app.core.config import Settings
from app.crud.job import JobRegistry, job_registry


def get_job_registry() -> JobRegistry:
    """
    Dependency returning the process-wide job registry.

    Override with app.dependency_overrides[get_job_registry] to use an
    isolated registry (tests do this).
    """
    return job_registry


def get_settings(request: Request) -> Settings:
    """Settings the running application was built with."""
    return request.app.state.settings
