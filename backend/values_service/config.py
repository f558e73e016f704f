"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - All connection parameters come from environment variables or .env
    - get_settings() is cached (lru_cache), single instance per process
    - The original PG*/REDIS_* variable names are accepted as aliases

Design Decisions:
    - Store URL assembled with sqlalchemy URL.create so passwords are escaped
    - DATABASE_URL, when set, overrides the individual PG* parts
"""

from functools import lru_cache

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


def _env(*names: str) -> AliasChoices:
    return AliasChoices(*names)


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, populate_by_name=True,
    )

    # Durable store
    pg_host: str = Field("postgres", validation_alias=_env("pghost", "pg_host"))
    pg_port: int = Field(5432, validation_alias=_env("pgport", "pg_port"))
    pg_user: str = Field("postgres", validation_alias=_env("pguser", "pg_user"))
    pg_password: str = Field(
        "postgres_password",
        validation_alias=_env("pgpassword", "pg_password"),
    )
    pg_database: str = Field(
        "postgres", validation_alias=_env("pgdatabase", "pg_database"),
    )
    database_url: str | None = None
    database_connect_timeout: float = 10.0
    database_pool_size: int = 20
    database_max_overflow: int = 10

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str | None) -> str | None:
        """Hosted providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v or None

    # Cache and notification channel
    redis_host: str = "redis"
    redis_port: int = 6379
    redis_timeout: float = 10.0

    # Startup resilience
    startup_max_attempts: int = Field(10, ge=1)
    startup_retry_delay_ms: int = Field(2000, ge=0)

    # API
    host: str = "0.0.0.0"
    port: int = 5000
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def store_url(self) -> str:
        """Async SQLAlchemy URL for the durable store."""
        if self.database_url:
            return self.database_url
        return URL.create(
            "postgresql+asyncpg",
            username=self.pg_user,
            password=self.pg_password,
            host=self.pg_host,
            port=self.pg_port,
            database=self.pg_database,
        ).render_as_string(hide_password=False)


@lru_cache
def get_settings() -> Settings:
    return Settings()
