"""Application settings management leveraging pydantic v2."""

from __future__ import annotations

import os
from functools import lru_cache
from typing import List

from dotenv import load_dotenv
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

if os.getenv("ENV", "development") in {"development", "dev", "local"}:
    load_dotenv(override=False)


class AppSettings(BaseSettings):
    """Typed configuration sourced from environment variables."""

    app_name: str = Field(
        default="Featherweight",
        validation_alias=AliasChoices("APP_NAME", "FEATHERWEIGHT_APP_NAME"),
    )
    environment: str = Field(
        default="development",
        validation_alias=AliasChoices("ENVIRONMENT", "FEATHERWEIGHT_ENVIRONMENT"),
    )
    cors_allow_origins: str = Field(
        default="http://localhost:3000,http://127.0.0.1:3000",
        validation_alias=AliasChoices("CORS_ALLOW_ORIGINS", "FEATHERWEIGHT_CORS_ALLOW_ORIGINS"),
    )
    # Upper bound on records (entries, messages, events, practices,
    # synchronicities) accepted in a single analysis request.
    max_history_records: int = Field(
        default=5000,
        ge=1,
        validation_alias=AliasChoices("MAX_HISTORY_RECORDS", "FEATHERWEIGHT_MAX_HISTORY_RECORDS"),
    )

    model_config = SettingsConfigDict(
        env_file=(".env", "featherweight/.env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def allowed_origins(self) -> List[str]:
        """Split the configured CORS origins."""

        return [origin.strip() for origin in self.cors_allow_origins.split(",") if origin.strip()]


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Load environment variables and return a cached settings instance."""

    return AppSettings()


__all__ = ["AppSettings", "get_settings"]
