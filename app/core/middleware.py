import re
import time
from typing import Optional
from fastapi import FastAPI, Request

from app.core.logging_config import get_logger

logger = get_logger(__name__)

_JOB_PATH = re.compile(r"/jobs/(?P<job_id>[^/]+)")


def job_id_from_path(path: str) -> Optional[str]:
    """Return the job id segment of a /jobs/{id}... path, if any."""
    match = _JOB_PATH.search(path)
    return match.group("job_id") if match else None


def register_request_logging(app: FastAPI) -> None:
    """Log every request once, tagged with the job it targets."""

    @app.middleware("http")
    async def log_request(request: Request, call_next):
        started = time.perf_counter()
        fields = {
            "client": request.client.host if request.client else "-",
            "method": request.method,
            "path": request.url.path,
            "job_id": job_id_from_path(request.url.path),
        }

        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            fields["status_code"] = status_code
            fields["duration_ms"] = round((time.perf_counter() - started) * 1000.0, 2)
            log = logger.info if status_code < 500 else logger.error
            log(
                "%s %s -> %s (%.2f ms)%s",
                fields["method"], fields["path"], status_code, fields["duration_ms"],
                f" job={fields['job_id']}" if fields["job_id"] else "",
                extra=fields,
            )
