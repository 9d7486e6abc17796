"""
Application configuration and settings.
Centralized configuration management using Pydantic Settings.
"""
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parents[2]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Load .env first, then .env.local (so .env.local overrides)
    model_config = SettingsConfigDict(
        extra="ignore",
        case_sensitive=False,
        env_file=[".env", ".env.local"],
        frozen=True,
    )

    # Application settings
    app_name: str = "MiniMax Proxy"
    environment: str = Field(default="local")
    debug: bool = Field(default=False)

    # Server settings
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8080)

    # Upstream settings
    openai_api_key: str = Field(default="")
    upstream_timeout: float = Field(default=300.0)

    # Frontend settings
    frontend_dir: str = Field(default="frontend")
    frontend_index: str = Field(default="simple_frontend.html")

    # Logging settings
    log_level: str = Field(default="INFO")

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_local(self) -> bool:
        """Check if running in local development environment."""
        return self.environment == "local"

    @property
    def frontend_path(self) -> Path:
        """Frontend directory, resolved against the project root when relative."""
        path = Path(self.frontend_dir)
        if not path.is_absolute():
            path = PROJECT_ROOT / path
        return path


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
