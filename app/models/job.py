import enum
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from app.core.exceptions import JobValidationError


class JobStatus(str, enum.Enum):
    """
    Job posting status enum.

    - Open: Job is open for applications
    - Closed: Job is closed for applications
    - OnHold: Job is on hold
    - Filled: Job has been filled

    Status is advisory; any status can follow any other.
    """
    Open = "Open"
    Closed = "Closed"
    OnHold = "OnHold"
    Filled = "Filled"

    @classmethod
    def _missing_(cls, value):
        # Accept case-insensitive names and the ordinals 0..3
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.strip().lower():
                    return member
            if value.strip().isdigit():
                value = int(value.strip())
        if isinstance(value, int) and not isinstance(value, bool):
            members = list(cls)
            if 0 <= value < len(members):
                return members[value]
        return None


# (field, message) in the order fields are checked
_REQUIRED_FIELDS = (
    ("title", "Job title cannot be empty"),
    ("description", "Job description cannot be empty"),
    ("company", "Company name cannot be empty"),
    ("location", "Job location cannot be empty"),
)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


@dataclass
class Job:
    """
    A job posting held by the registry.

    Build instances with Job.create(); only the status changes afterwards.
    """

    id: uuid.UUID
    title: str
    description: str
    company: str
    location: str
    published_at: datetime
    status: JobStatus = JobStatus.Open
    salary_range: Optional[str] = None

    @classmethod
    def create(
        cls,
        title: str,
        description: str,
        company: str,
        location: str,
        salary_range: Optional[str] = None
    ) -> "Job":
        """
        Validate the input and build a new open job.

        Raises:
            JobValidationError: If title, description, company or location
                is missing, empty or whitespace-only
        """
        values = {
            "title": title,
            "description": description,
            "company": company,
            "location": location,
        }
        for field, message in _REQUIRED_FIELDS:
            if _is_blank(values[field]):
                raise JobValidationError(field, message)

        return cls(
            id=uuid.uuid4(),
            title=title,
            description=description,
            company=company,
            location=location,
            salary_range=salary_range,
            published_at=datetime.now(timezone.utc),
            status=JobStatus.Open,
        )

    def update_status(self, new_status: JobStatus) -> None:
        """Overwrite the status. No transition rules apply."""
        self.status = new_status

    def __repr__(self):
        return f"<Job(id={self.id}, title='{self.title}', status={self.status.value})>"


def parse_status(value) -> JobStatus:
    """
    Parse a status from request input.

    Accepts the status name in any case or its ordinal (0=Open .. 3=Filled).

    Raises:
        JobValidationError: If the value is missing or not a known status
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise JobValidationError("status", "Job status is required")
    try:
        return JobStatus(value)
    except ValueError:
        raise JobValidationError("status", f"'{value}' is not a valid job status")
