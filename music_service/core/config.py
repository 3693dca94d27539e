"""
Application settings loaded from the environment.
"""

from typing import List, Optional

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEV_JWT_SECRET = "dev-secret-key-never-use-in-production"


class Settings(BaseSettings):
    """Configuration values for the music service."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = "Music Service API"
    environment: str = "development"

    # Database
    database_url: str = "sqlite:///./music_service.db"
    database_echo: bool = False

    # JWT
    jwt_secret: str = DEV_JWT_SECRET
    jwt_algorithm: str = "HS256"
    jwt_expiration: int = 3600  # seconds

    # Spotify catalog (client credentials flow)
    spotify_client_id: str = ""
    spotify_client_secret: str = ""
    catalog_timeout: float = 10.0

    # CORS
    cors_origins: List[str] = ["http://localhost:3000"]

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @model_validator(mode="after")
    def check_production_secret(self) -> "Settings":
        if self.environment == "production" and self.jwt_secret == DEV_JWT_SECRET:
            raise ValueError("jwt_secret must be set in production")
        return self


def get_settings() -> Settings:
    """Build settings from the current environment."""
    return Settings()
