"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All connection strings come from environment variables (prefix CHECKLIST_)
    - get_settings() is cached (lru_cache): single instance per process
    - Cache TTLs are positive integers of seconds

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support (ADR: developer UX)
    - Defaults provided for all settings: works out-of-the-box with docker-compose
    - Audit stream may live on a different Redis than the cache (audit_redis_url);
      empty means "same as redis_url"
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="CHECKLIST_", case_sensitive=False,
    )

    # Database (authoritative store)
    database_url: str = (
        "postgresql+asyncpg://checklist:checklist@db:5432/checklist"
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

    # Cache
    redis_url: str = "redis://redis:6379/0"
    redis_socket_timeout_seconds: float = Field(0.5, gt=0)
    cache_item_ttl_seconds: int = Field(60, gt=0)
    cache_list_ttl_seconds: int = Field(15, gt=0)

    # Audit
    audit_enabled: bool = True
    audit_redis_url: str = ""
    audit_stream: str = "checklist:audit"
    audit_stream_maxlen: int = Field(10_000, gt=0)

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def effective_audit_redis_url(self) -> str:
        return self.audit_redis_url or self.redis_url


@lru_cache
def get_settings() -> Settings:
    return Settings()
