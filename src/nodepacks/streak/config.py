"""Streak node pack settings using pydantic-settings."""
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StreakSettings(BaseSettings):
    """Streak API settings with environment variable loading."""

    model_config = SettingsConfigDict(
        env_prefix="STREAK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    base_url: str = Field(
        default="https://api.streak.com/api",
        description="Streak API root, without the version segment",
    )
    page_size: int = Field(
        default=100,
        description="Page size used when returnAll paginates",
    )
    max_pages: int = Field(
        default=1000,
        description="Safety cap on pages fetched by a single paginated call",
    )
    default_limit: int = Field(
        default=50,
        description="Limit used when a list operation does not set one",
    )

    @field_validator("page_size", "max_pages", "default_limit")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate that paging values are positive."""
        if v <= 0:
            raise ValueError("paging values must be positive")
        return v

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


_settings: StreakSettings | None = None


def get_streak_settings() -> StreakSettings:
    """Get or create the global Streak settings instance."""
    global _settings
    if _settings is None:
        _settings = StreakSettings()
    return _settings


def reset_streak_settings() -> None:
    """Reset settings (useful for testing)."""
    global _settings
    _settings = None
