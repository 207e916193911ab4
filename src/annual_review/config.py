"""Application configuration with structured settings groups."""
from functools import lru_cache

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class AnnualReviewSettings(BaseModel):
    """
    Annual review validation settings.

    due_date_format: strptime format used for both the due date and the
        last review date. Clients supply dates as DD/MM/YYYY.
    """

    due_date_format: str = "%d/%m/%Y"


class Settings(BaseSettings):
    """
    Application settings with nested configuration groups.

    Environment variables use double underscore as delimiter for nested values.
    Example: LOG_LEVEL=DEBUG, ANNUAL_REVIEW__DUE_DATE_FORMAT=%d-%m-%Y
    """

    # Application metadata
    app_name: str = "Annual Review Domain"
    app_version: str = "1.0.0"

    log_level: str = "INFO"

    # Nested settings groups
    annual_review: AnnualReviewSettings = AnnualReviewSettings()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
