"""
Data access layer for domain models.

This layer provides a clean separation between API routes and storage,
following the Repository pattern.
"""

from app.crud import job

__all__ = ["job"]
