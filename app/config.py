"""Application configuration using Pydantic Settings."""

from typing import Annotated, Any, List

from pydantic import BeforeValidator, Field
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


def parse_list_of_strings(v: Any) -> List[str]:
    """Parse comma-separated string to list of strings."""
    if isinstance(v, str):
        return [x.strip() for x in v.split(",") if x.strip()]
    if isinstance(v, list):
        return v
    return [v]


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "DevConnector API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    RELOAD: bool = True

    # MongoDB
    MONGODB_URI: str = Field(default="mongodb://localhost:27017")
    MONGODB_DATABASE: str = "devconnector"
    MONGODB_MAX_POOL_SIZE: int = 10
    MONGODB_SERVER_SELECTION_TIMEOUT_MS: int = 5000

    # JWT
    SECRET_KEY: str = Field(default="change-this-secret-key-in-production")
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_SECONDS: int = 360000  # 100 hours

    # GitHub
    GITHUB_API_URL: str = "https://api.github.com"
    GITHUB_CLIENT_ID: str = ""
    GITHUB_SECRET: str = ""
    GITHUB_REPOS_PER_PAGE: int = 5
    GITHUB_TIMEOUT_SECONDS: float = 10.0

    # CORS
    CORS_ORIGINS: Annotated[List[str], NoDecode, BeforeValidator(parse_list_of_strings)] = ["*"]

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"

    # Monitoring
    SENTRY_DSN: str = ""
    SENTRY_ENVIRONMENT: str = "production"
    SENTRY_TRACES_SAMPLE_RATE: float = 0.1

    # Client
    API_BASE_URL: str = "http://localhost:5000"
    ALERT_TIMEOUT_SECONDS: float = 3.0


# Create global settings instance
settings = Settings()
