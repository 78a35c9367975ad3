"""Application settings loaded from environment variables and .env file."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import DEFAULT_CONCURRENCY, DEFAULT_PER_PAGE


class Settings(BaseSettings):
    """Settings for the ghctl command line."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    ghctl_token: str | None = None
    github_token: str | None = None
    ghctl_concurrency: int = Field(default=DEFAULT_CONCURRENCY, ge=1)
    ghctl_per_page: int = Field(default=DEFAULT_PER_PAGE, ge=1, le=100)

    @property
    def token(self) -> str | None:
        """GHCTL_TOKEN wins over GITHUB_TOKEN; empty values are skipped."""
        return self.ghctl_token or self.github_token or None


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
