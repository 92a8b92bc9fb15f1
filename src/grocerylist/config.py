"""Application configuration using pydantic-settings."""

from datetime import date, datetime, timezone
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

EPOCH = date(1970, 1, 1)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GROCERYLIST_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Selection
    default_limit: int = Field(7, ge=0)
    seed: int | None = Field(None, ge=0)  # None means the weekly seed
    serving_size: int | None = Field(None, ge=0)

    # Discovery
    accepted_extensions: str = "md,txt"
    ignored_files: str = "README.md"

    # Application
    verbosity: int = Field(1, ge=0, le=5)

    @property
    def extensions(self) -> tuple[str, ...]:
        """Accepted file extensions, lower-cased and without dots."""
        return tuple(
            ext.strip().lstrip(".").lower()
            for ext in self.accepted_extensions.split(",")
            if ext.strip()
        )

    @property
    def ignored(self) -> tuple[str, ...]:
        """File names skipped while walking directories."""
        return tuple(name.strip() for name in self.ignored_files.split(",") if name.strip())


def weekly_seed(today: date | None = None) -> int:
    """Number of whole weeks since the UNIX epoch (January 1st 1970)."""
    if today is None:
        today = datetime.now(timezone.utc).date()
    return (today - EPOCH).days // 7


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
