from typing import List, Optional
from uuid import UUID
from fastapi import APIRouter, Body, Depends, Query, Response, status

from app.core.config import settings
from app.core.deps import get_job_registry
from app.core.exceptions import JobNotFoundError
from app.crud.job import JobRegistry
from app.models.job import Job, parse_status
from app.schemas.job import JobCreateRequest, JobResponse, JobStatusUpdateRequest, MessageResponse

router = APIRouter(prefix="/jobs", tags=["Jobs"])


def _find_job(registry: JobRegistry, job_id: str) -> Job:
    """Look up a job, treating a malformed id as an unknown one."""
    try:
        parsed_id = UUID(job_id)
    except ValueError:
        raise JobNotFoundError(job_id)

    job = registry.get_by_id(parsed_id)
    if job is None:
        raise JobNotFoundError(job_id)
    return job


@router.get("", response_model=List[JobResponse], summary="Get all jobs")
def list_jobs(registry: JobRegistry = Depends(get_job_registry)):
    """
    Retrieve all job postings in the order they were created.
    """
    return [JobResponse.from_job(job) for job in registry.get_multi()]


@router.get(
    "/{job_id}",
    response_model=JobResponse,
    responses={404: {"model": MessageResponse}},
    summary="Get job by ID",
)
def get_job(job_id: str, registry: JobRegistry = Depends(get_job_registry)):
    """
    Retrieve a specific job posting by its unique identifier.
    """
    return JobResponse.from_job(_find_job(registry, job_id))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=JobResponse,
    responses={400: {"model": MessageResponse}},
    summary="Create a new job",
)
def create_job(
    request: JobCreateRequest,
    response: Response,
    registry: JobRegistry = Depends(get_job_registry)
):
    """
    Create a new job posting.

    The job starts with status=Open. Title, description, company and location
    must be non-empty; otherwise a 400 names the offending field.
    The Location header points at the new job.
    """
    job = registry.create(request)
    response.headers["Location"] = f"{settings.API_PREFIX}{router.prefix}/{job.id}"
    return JobResponse.from_job(job)


@router.put(
    "/{job_id}/status",
    response_model=JobResponse,
    responses={400: {"model": MessageResponse}, 404: {"model": MessageResponse}},
    summary="Update job status",
)
def update_job_status(
    job_id: str,
    new_status: Optional[str] = Query(None, alias="newStatus"),
    body: Optional[JobStatusUpdateRequest] = Body(None),
    registry: JobRegistry = Depends(get_job_registry)
):
    """
    Update the status of an existing job posting.

    The status may be passed as the `newStatus` query parameter or as a
    `{"status": ...}` body; a blank query value falls back to the body.
    Any status is accepted, whatever the current one.
    """
    job = _find_job(registry, job_id)

    # A blank query value counts as absent so a body status can still apply
    if new_status is not None and new_status.strip():
        raw_status = new_status
    else:
        raw_status = body.status if body else new_status
    updated = registry.update_status(job.id, parse_status(raw_status))
    if updated is None:
        raise JobNotFoundError(job_id)

    return JobResponse.from_job(updated)
