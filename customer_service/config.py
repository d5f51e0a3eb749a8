"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables or .env
    - get_settings() is cached (lru_cache): single instance per process

Design Decisions:
    - Defaults provided for every setting so docker-compose works out of the box;
      the OAuth2 client secret default is for local development only
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://customers:customers@db:5432/customers"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting platforms hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # OAuth2 client credentials (in-memory client registration)
    oauth2_client_id: str = "clientId"
    oauth2_client_secret: str = "clientSecret"
    oauth2_scopes: list[str] = ["read", "write"]
    oauth2_token_ttl_seconds: int = 43_200

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
