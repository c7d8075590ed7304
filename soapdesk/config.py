"""Application configuration settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional
import json


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    MONGODB_URL: str = "mongodb://localhost:27017"
    DATABASE_NAME: str = "soapdesk"

    # OpenAI - coding suggestions are disabled when no key is configured
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_MODEL: str = "gpt-4o"

    # Application
    APP_NAME: str = "SoapDesk"
    API_PREFIX: str = "/api"
    PORT: int = 8000

    # CORS
    BACKEND_CORS_ORIGINS: str = '["http://localhost:3000", "http://localhost:5173"]'

    # File storage
    UPLOAD_DIR: str = "/tmp/soapdesk_uploads"
    MAX_UPLOAD_SIZE_MB: int = 25

    # Auth
    JWT_SECRET_KEY: str = "change-me-in-production"
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 12
    PORTAL_TOKEN_EXPIRE_MINUTES: int = 60 * 2

    # Environment
    ENVIRONMENT: str = "development"
    DEBUG: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def cors_origins(self) -> List[str]:
        """Parse CORS origins from JSON string."""
        try:
            return json.loads(self.BACKEND_CORS_ORIGINS)
        except json.JSONDecodeError:
            return ["http://localhost:3000"]

    @property
    def max_upload_bytes(self) -> int:
        return self.MAX_UPLOAD_SIZE_MB * 1024 * 1024


settings = Settings()
