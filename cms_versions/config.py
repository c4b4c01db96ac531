"""Configuration management using pydantic-settings."""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Database settings
    db_server: str = "localhost"
    db_name: str = "cms"
    db_user: str = "cms"
    db_password: str = ""
    db_port: int = 5432
    db_pool_size: int = 10
    db_max_overflow: int = 20
    sql_echo: bool = False

    # Full SQLAlchemy URL; takes precedence over the db_* parts when set
    database_url_override: Optional[str] = None

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000

    # Redis settings (ARQ job queue)
    redis_url: str = "redis://localhost:6379/0"

    # ARQ Worker settings
    # Version cleanup job: runs at these hours (comma-separated, 24h format)
    # Default "3" = once a day at 03:00
    # Set to empty string "" to use arq_cleanup_minutes instead
    arq_cleanup_hours: str = "3"

    # Version cleanup job: runs at these minutes (comma-separated, 0-59)
    # Only used if arq_cleanup_hours is empty
    arq_cleanup_minutes: str = ""

    @property
    def database_url(self) -> str:
        """Build PostgreSQL async connection string."""
        if self.database_url_override:
            return self.database_url_override
        from urllib.parse import quote_plus
        return (
            f"postgresql+asyncpg://{self.db_user}:{quote_plus(self.db_password)}"
            f"@{self.db_server}:{self.db_port}/{self.db_name}"
        )

    @property
    def sync_database_url(self) -> str:
        """Build PostgreSQL sync connection string for Alembic."""
        from urllib.parse import quote_plus
        return (
            f"postgresql+psycopg2://{self.db_user}:{quote_plus(self.db_password)}"
            f"@{self.db_server}:{self.db_port}/{self.db_name}"
        )


# Global settings instance
settings = Settings()
