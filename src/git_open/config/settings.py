"""Application settings using Pydantic Settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from ``GIT_OPEN_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GIT_OPEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = "WARNING"
    json_logs: bool = False

    # Git
    git_binary: str = "git"
    git_timeout: float | None = None  # seconds, None waits forever
    remote: str | None = None  # None lets git pick the default remote

    # Behaviour
    user_providers: bool = True  # merge [open "<url>"] entries from the global git config
    open_browser: bool = True


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
