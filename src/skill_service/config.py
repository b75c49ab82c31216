"""Configuration settings for Skill Service."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # PostgreSQL
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "skillapi"
    postgres_password: str = "skillapi"
    postgres_db: str = "skill"
    database_url: str | None = None  # overrides the postgres_* fields
    db_pool_size: int = 10
    db_max_overflow: int = 20

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8080
    api_prefix: str = "/api/v1"
    debug: bool = False
    log_level: str = "INFO"

    # Service
    service_name: str = "skill-service"
    service_version: str = "0.1.0"

    @property
    def postgres_url(self) -> str:
        """Get PostgreSQL connection URL."""
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
