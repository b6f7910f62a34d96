from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from contextlib import asynccontextmanager

from app.core.config import Settings, settings
from app.core.deps import get_job_registry
from app.core.exceptions import register_exception_handlers
from app.core.logging_config import get_logger, setup_logging
from app.core.middleware import register_request_logging
from app.api.endpoints import health, jobs

setup_logging(
    log_level=settings.LOG_LEVEL,
    json_logs=settings.JSON_LOGS,
    environment=settings.ENVIRONMENT,
)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    """
    config: Settings = app.state.settings
    logger.info(f"Starting up {config.PROJECT_NAME} ({config.ENVIRONMENT})...")
    if config.DOCS_ENABLED:
        logger.info("API documentation available at /api-docs")

    yield

    registry = app.dependency_overrides.get(get_job_registry, get_job_registry)()
    logger.info(f"Shutting down {config.PROJECT_NAME}, discarding {registry.count()} in-memory jobs...")


def root():
    """Returns a simple message indicating the API is running"""
    return "Recruiter Platform API is running!"


def create_app(config: Settings = settings) -> FastAPI:
    """
    Build the FastAPI application for the given settings.

    Swagger UI (/api-docs) and the OpenAPI document are only served in Development.
    """
    application = FastAPI(
        title=config.PROJECT_NAME,
        version=config.OPENAPI_VERSION,
        description=config.DESCRIPTION,
        contact={
            "name": "Development Team",
            "email": "dev@recruiterplatform.com",
        },
        docs_url="/api-docs" if config.DOCS_ENABLED else None,
        redoc_url=None,
        openapi_url="/openapi.json" if config.DOCS_ENABLED else None,
        lifespan=lifespan
    )
    application.state.settings = config

    # Configure CORS
    application.add_middleware(
        CORSMiddleware,
        allow_origins=config.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_request_logging(application)
    register_exception_handlers(application)

    # Include routers
    application.include_router(health.router)
    application.include_router(jobs.router, prefix=config.API_PREFIX)
    application.add_api_route(
        "/", root, methods=["GET"], response_class=PlainTextResponse, summary="API root endpoint"
    )

    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.ENVIRONMENT == "Development",
        log_level=settings.LOG_LEVEL.lower()
    )
