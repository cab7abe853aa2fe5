"""Application settings using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from docview.core.models.origin import HostingConfig


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # General
    environment: str = "development"
    log_level: str = "INFO"

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_workers: int = 1
    api_docs: bool = True
    cors_origins: list[str] = Field(default_factory=list)

    # Hosting service
    canonical_host: str = "github.com"
    raw_host: str = "raw.githubusercontent.com"
    ref_prefix: str = "refs/heads/"

    # Fetching
    fetch_timeout: float = 15.0

    # Viewer used for PDF pages
    pdf_viewer_url: str = "https://docs.google.com/viewer"

    @property
    def hosting(self) -> HostingConfig:
        return HostingConfig(
            canonical_host=self.canonical_host,
            raw_host=self.raw_host,
            ref_prefix=self.ref_prefix,
        )

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
