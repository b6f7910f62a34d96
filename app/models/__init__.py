"""
Domain models package.
"""

from app.models.job import Job, JobStatus, parse_status

__all__ = ["Job", "JobStatus", "parse_status"]
