"""
Configuration settings for the personnel toolkit.

Uses Pydantic Settings to load environment variables for logging, the
persistence backend, the notification channel and report defaults. Business
rates live in `personnel.policies` and are passed to collaborators explicitly.
"""
from __future__ import annotations

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Persistence collaborator
    db_backend: str = Field("memory", alias="DB_BACKEND")
    db_host: str = Field("localhost", alias="DB_HOST")
    db_port: int = Field(3306, alias="DB_PORT")
    db_user: str = Field("personnel", alias="DB_USER")
    db_password: str = Field("personnel", alias="DB_PASSWORD")
    db_name: str = Field("personnel", alias="DB_NAME")

    # Notification channel
    smtp_host: str = Field("smtp.company.local", alias="SMTP_HOST")
    smtp_port: int = Field(587, alias="SMTP_PORT")
    smtp_username: str = Field("hr-bot", alias="SMTP_USERNAME")
    smtp_password: str = Field("", alias="SMTP_PASSWORD")

    # Reports
    report_default_format: str = Field("CSV", alias="REPORT_DEFAULT_FORMAT")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
