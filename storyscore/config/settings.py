"""
Configuration settings for the application.
Loads environment variables and provides type-safe configuration.
"""

from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # API Configuration
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=3001, description="API port")
    environment: str = Field(default="production", description="Environment (development/production)")
    log_level: str = Field(default="INFO", description="Logging level")
    cors_allow_origins: List[str] = Field(default=["*"], description="Origins allowed to call the API")

    # Scoring
    scoring_config_path: Optional[str] = Field(
        default=None,
        description="JSON file overriding default thresholds, keywords, weights and readiness bands"
    )


# Global settings instance
settings = Settings()
