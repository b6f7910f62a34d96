from pydantic_settings import BaseSettings
from typing import List, Union
from pydantic import field_validator
import json


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # API Settings
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "Recruiter Platform API"
    VERSION: str = "1.0.0"
    # OpenAPI document version, distinct from the release version above
    OPENAPI_VERSION: str = "v1"
    DESCRIPTION: str = "A modern internal recruiter platform API following Clean Architecture principles"

    # Hosting environment name, reported by /api/version
    ENVIRONMENT: str = "Development"

    # Server Settings (used when running main.py directly)
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # Logging Settings
    LOG_LEVEL: str = "INFO"
    JSON_LOGS: bool = False

    # CORS Settings - can be set as JSON string in .env
    BACKEND_CORS_ORIGINS: Union[List[str], str] = ["http://localhost:5173", "http://localhost:3000"]

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: Union[List[str], str]) -> List[str]:
        """Parse CORS origins from JSON string or list"""
        if isinstance(v, str):
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                # If not valid JSON, split by comma
                return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @property
    def DOCS_ENABLED(self) -> bool:
        return self.ENVIRONMENT == "Development"

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
