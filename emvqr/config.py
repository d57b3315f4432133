"""Application configuration utilities."""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO", description="Root logger level")
    json_logs: bool = Field(default=True, description="Enable JSON formatted logs")


class Settings(BaseSettings):
    """Central application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=(Path(__file__).resolve().parent.parent / ".env"),
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    app_name: str = Field(default="emvqr")
    environment: Literal["development", "staging", "production"] = Field(default="development")
    api_key: str = Field(default="dev-secret-key")
    default_merchant_guid: str = Field(default="A000000677010111", min_length=1, max_length=32)
    default_country_code: str = Field(default="SN", min_length=2, max_length=2)
    default_currency_code: str = Field(default="952", pattern=r"^[0-9]{3}$")
    default_merchant_category_code: str = Field(default="5999", pattern=r"^[0-9]{4}$")
    qr_error_correction: Literal["L", "M", "Q", "H"] = Field(default="M")
    qr_box_size: int = Field(default=10, ge=1, le=40)
    qr_border: int = Field(default=4, ge=0, le=20)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return memoized application settings."""

    return Settings()


settings = get_settings()
