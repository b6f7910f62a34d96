from pydantic import BaseModel, Field, StrictInt, StrictStr
from pydantic.alias_generators import to_camel
from typing import Optional, Union
from datetime import datetime
from uuid import UUID

from app.models.job import Job


class JobCreateRequest(BaseModel):
    """
    Schema for creating a new job.

    Required fields default to "" so that a missing field is rejected by
    Job.create with a 400 naming the field, like an empty one.
    """
    title: Optional[str] = ""
    description: Optional[str] = ""
    company: Optional[str] = ""
    location: Optional[str] = ""
    salary_range: Optional[str] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class JobStatusUpdateRequest(BaseModel):
    """Schema for updating a job's status (name in any case, or 0-3)"""
    status: Union[StrictStr, StrictInt, None] = None


class JobResponse(BaseModel):
    """Schema for job response"""
    id: UUID
    title: str
    description: str
    company: str
    location: str
    published_at: datetime
    status: str = Field(..., description="Open, Closed, OnHold or Filled")
    salary_range: Optional[str] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    @classmethod
    def from_job(cls, job: Job) -> "JobResponse":
        """Map a Job entity to its transfer representation."""
        return cls(
            id=job.id,
            title=job.title,
            description=job.description,
            company=job.company,
            location=job.location,
            published_at=job.published_at,
            status=job.status.value,
            salary_range=job.salary_range,
        )


class MessageResponse(BaseModel):
    """Error body returned for 400/404 responses"""
    message: str
