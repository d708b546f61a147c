"""Configuration Management."""

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Builder settings from environment."""

    model_config = SettingsConfigDict(
        env_prefix="WB_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Backend
    backend_url: str = Field(default="http://localhost:5000/api", description="Backend API base URL")
    backend_timeout: float = Field(default=10.0, gt=0, description="Backend request timeout")
    export_timeout: float = Field(default=60.0, gt=0, description="Export request timeout")
    api_token: str = Field(default="", description="Bearer token for the backend API")

    # Circuit breaker
    breaker_fail_max: int = Field(default=5, gt=0, description="Failures before the breaker opens")
    breaker_reset_timeout: int = Field(default=30, gt=0, description="Seconds before a half-open retry")

    # Export
    export_credit_cost: int = Field(default=200, ge=0, description="Credits charged per export")
    default_framework: str = Field(default="tailwind", description="Default export CSS framework")

    # History
    history_limit: int = Field(default=200, ge=1, description="Max undo snapshots per session")

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=False, description="Use JSON log format")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
