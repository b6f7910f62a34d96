"""
In-memory registry for Job entities.

Implements the Repository pattern over a process-local collection, giving the
API layer list/get/create/update-status without any storage backend.
"""

from threading import Lock
from typing import Dict, List, Optional
from uuid import UUID

from app.core.logging_config import get_logger
from app.models.job import Job, JobStatus
from app.schemas.job import JobCreateRequest

logger = get_logger(__name__)


class JobRegistry:
    """
    Owns every Job for the lifetime of the process.

    Jobs are kept in insertion order. A single lock guards each operation,
    since FastAPI runs sync endpoints on a thread pool.
    """

    def __init__(self) -> None:
        self._jobs: Dict[UUID, Job] = {}
        self._lock = Lock()

    def create(self, job_data: JobCreateRequest) -> Job:
        """
        Create a job and add it to the registry.

        Args:
            job_data: Parsed job creation request

        Returns:
            Created Job instance

        Raises:
            JobValidationError: If a required field is empty
        """
        job = Job.create(
            title=job_data.title,
            description=job_data.description,
            company=job_data.company,
            location=job_data.location,
            salary_range=job_data.salary_range,
        )

        with self._lock:
            self._jobs[job.id] = job

        logger.info(f"Created job {job.id}: {job.title} at {job.company}")
        return job

    def get_by_id(self, job_id: UUID) -> Optional[Job]:
        """
        Retrieve a job by its ID.

        Returns:
            Job instance if found, None otherwise
        """
        with self._lock:
            return self._jobs.get(job_id)

    def get_multi(self) -> List[Job]:
        """Return all jobs in the order they were added."""
        with self._lock:
            return list(self._jobs.values())

    def update_status(self, job_id: UUID, status: JobStatus) -> Optional[Job]:
        """
        Set a job's status. Any status is accepted from any other.

        Returns:
            Updated Job instance if found, None otherwise
        """
        with self._lock:
            job = self._jobs.get(job_id)
            if job is None:
                return None
            previous = job.status
            job.update_status(status)

        logger.info(f"Job {job_id} status changed: {previous.value} -> {status.value}")
        return job

    def count(self) -> int:
        with self._lock:
            return len(self._jobs)


# Process-wide registry used by the API; tests build their own
job_registry = JobRegistry()
