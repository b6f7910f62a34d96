"""
Domain errors and their HTTP mapping.

Every failing request answers with a JSON body of the form {"message": ...}:
- JobValidationError -> 400
- JobNotFoundError -> 404
- request parsing errors -> 400
- anything unexpected -> 500
"""

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.logging_config import get_logger

logger = get_logger(__name__)


class JobValidationError(ValueError):
    """A required job field is missing, empty or whitespace-only."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{message} (field '{field}')")


class JobNotFoundError(LookupError):
    """No job exists with the requested id."""

    def __init__(self, job_id=None):
        self.job_id = job_id
        super().__init__("Job not found")


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(JobValidationError)
    async def job_validation_handler(request: Request, exc: JobValidationError):
        logger.warning(
            "Job validation failed path=%s field=%s message=%s",
            request.url.path, exc.field, exc.message
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": str(exc)},
        )

    @app.exception_handler(JobNotFoundError)
    async def job_not_found_handler(request: Request, exc: JobNotFoundError):
        logger.warning("Job not found path=%s job_id=%s", request.url.path, exc.job_id)
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"message": str(exc)},
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.warning(
            "Request validation failed path=%s errors=%s",
            request.url.path, exc.errors()
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Invalid request", "errors": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail) if exc.detail else "HTTP error"},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error at path=%s", request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal server error"},
        )
