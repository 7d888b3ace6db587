"""
Configuration for Rendermark.
Loads settings from environment variables with sensible defaults.
"""

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings

# Load environment variables from .env file (local development only)
load_dotenv()

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings with validation"""

    # Deployment Environment
    DEPLOYMENT_ENV: str = os.getenv("DEPLOYMENT_ENV", "local")  # local or cloud

    @property
    def IS_CLOUD(self) -> bool:
        return self.DEPLOYMENT_ENV == "cloud"

    # Document Settings
    # Relative URLs are resolved against the page URL, like a browser fetch would
    DOCUMENT_URL: str = os.getenv("DOCUMENT_URL", "README.md")
    DOCUMENT_PATH: str = os.getenv("DOCUMENT_PATH", "./README.md")
    FETCH_TIMEOUT: Optional[float] = None  # None = wait forever
    PAGE_TITLE: str = os.getenv("PAGE_TITLE", "README")

    @field_validator("FETCH_TIMEOUT", mode="before")
    @classmethod
    def blank_timeout_is_none(cls, value):
        # FETCH_TIMEOUT= in .env means no timeout
        if isinstance(value, str) and not value.strip():
            return None
        return value

    # Logging Settings
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_TO_FILE: bool = os.getenv("LOG_TO_FILE", "false").lower() == "true"
    LOG_DIRECTORY: str = os.getenv("LOG_DIRECTORY", "./logs")

    # ===== FastAPI Settings =====
    APP_NAME: str = "Rendermark"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8080"))

    @property
    def DOCUMENT_ROUTE(self) -> str:
        """Path the raw document is served under, e.g. /README.md"""
        return "/" + os.path.basename(self.DOCUMENT_PATH)

    def validate_config(self) -> bool:
        """Validate required configuration"""
        if not self.DOCUMENT_URL.strip():
            raise ValueError("DOCUMENT_URL must be set")

        if self.FETCH_TIMEOUT is not None and self.FETCH_TIMEOUT <= 0:
            raise ValueError("FETCH_TIMEOUT must be a positive number of seconds")

        if self.LOG_LEVEL.upper() not in VALID_LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}, got {self.LOG_LEVEL}"
            )

        return True

    def get_deployment_info(self) -> dict:
        """Get deployment environment info for debugging"""
        return {
            "environment": self.DEPLOYMENT_ENV,
            "is_cloud": self.IS_CLOUD,
            "document_url": self.DOCUMENT_URL,
            "document_path": self.DOCUMENT_PATH,
            "fetch_timeout": self.FETCH_TIMEOUT,
            "log_level": self.LOG_LEVEL,
            "log_to_file": self.LOG_TO_FILE,
            "debug": self.DEBUG,
        }

    class Config:
        case_sensitive = True


# Global settings instance
settings = Settings()

# Validate on import
settings.validate_config()
