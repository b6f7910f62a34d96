"""
Tests for the in-memory job registry.
"""

import uuid
from concurrent.futures import ThreadPoolExecutor

import pytest

from app.core.exceptions import JobValidationError
from app.crud.job import JobRegistry
from app.models.job import JobStatus
from app.schemas.job import JobCreateRequest


def make_request(**overrides) -> JobCreateRequest:
    data = {
        "title": "Engineer",
        "description": "Build things",
        "company": "Acme",
        "location": "Remote",
    }
    data.update(overrides)
    return JobCreateRequest(**data)


class TestRegistryCreate:
    """Tests for JobRegistry.create"""

    def test_create_stores_job(self, registry):
        job = registry.create(make_request(salary_range="100k"))

        assert registry.get_by_id(job.id) is job
        assert job.salary_range == "100k"
        assert registry.count() == 1

    def test_create_invalid_job_is_not_stored(self, registry):
        with pytest.raises(JobValidationError):
            registry.create(make_request(title=" "))

        assert registry.count() == 0

    def test_registries_are_isolated(self, registry):
        registry.create(make_request())

        assert JobRegistry().count() == 0


class TestRegistryQueries:
    """Tests for JobRegistry.get_by_id and get_multi"""

    def test_get_unknown_id(self, registry):
        assert registry.get_by_id(uuid.uuid4()) is None

    def test_get_multi_keeps_insertion_order(self, registry):
        jobs = [registry.create(make_request(title=f"Job {i}")) for i in range(5)]

        assert registry.get_multi() == jobs

    def test_get_multi_returns_copy(self, registry):
        registry.create(make_request())

        listing = registry.get_multi()
        listing.clear()

        assert registry.count() == 1


class TestRegistryUpdateStatus:
    """Tests for JobRegistry.update_status"""

    def test_update_status(self, registry):
        job = registry.create(make_request())

        updated = registry.update_status(job.id, JobStatus.Filled)

        assert updated is job
        assert registry.get_by_id(job.id).status == JobStatus.Filled

    def test_reopen_filled_job(self, registry):
        job = registry.create(make_request())
        registry.update_status(job.id, JobStatus.Filled)

        registry.update_status(job.id, JobStatus.Open)

        assert registry.get_by_id(job.id).status == JobStatus.Open

    def test_update_unknown_id(self, registry):
        assert registry.update_status(uuid.uuid4(), JobStatus.Closed) is None


class TestRegistryConcurrency:
    """Tests for concurrent access from the request thread pool"""

    def test_concurrent_creates(self, registry):
        with ThreadPoolExecutor(max_workers=8) as pool:
            jobs = list(pool.map(lambda i: registry.create(make_request(title=f"Job {i}")), range(200)))

        assert registry.count() == 200
        assert {job.id for job in registry.get_multi()} == {job.id for job in jobs}

    def test_concurrent_status_updates(self, registry):
        job = registry.create(make_request())
        statuses = list(JobStatus) * 50

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda s: registry.update_status(job.id, s), statuses))

        assert all(result is job for result in results)
        assert registry.get_by_id(job.id).status in set(JobStatus)
