"""Centralized configuration for locale-index-of using Pydantic Settings."""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Strictly typed configuration loaded from ``LOCALE_INDEX_OF_*`` variables.

    Only process-wide defaults live here. Per-search collation options are
    passed explicitly by callers and never read from the environment.
    """

    model_config = SettingsConfigDict(
        env_prefix="LOCALE_INDEX_OF_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    default_locale: str = Field(
        default="",
        description="BCP 47 tag used when a search names no locale (empty = ICU default locale)",
    )
    segmenter: Literal["icu", "naive"] = Field(
        default="icu",
        description="Grapheme segmenter: ICU break iterator, or one cluster per code point",
    )

    # Logging
    log_level: str = Field(default="info", description="Logging level")
    log_json: bool = Field(default=True, description="Emit structured JSON logs")

    # Tracing
    service_name: str = Field(default="locale-index-of", description="OpenTelemetry service.name")

    @field_validator("default_locale")
    @classmethod
    def _strip_locale(cls, value: str) -> str:
        return value.strip()

    def get_default_locales(self) -> list[str]:
        """Get the configured default locale as a request list (empty when unset)."""
        if not self.default_locale:
            return []
        return [tag.strip() for tag in self.default_locale.split(",") if tag.strip()]
