"""Configuration management for Day Tally."""

import os
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env" if os.getenv("ENVIRONMENT") != "test" else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="allow"
    )

    # Application
    app_name: str = "Day Tally"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Database
    database_url: str = "sqlite+aiosqlite:///./day_tally.db"
    database_echo: bool = False

    # Statistics chart
    date_label_format: str = Field(
        default="%d/%m",
        description="strftime format used to derive a counter's axis label from its date",
    )
    chart_min_labels: int = Field(default=2, ge=0)
    chart_label_angle: int = 35
    chart_label_height: int = 70
    chart_label_text_size: float = 30.0

    # Task fields
    task_enable_priority: bool = True
    task_enable_icon: bool = True
    task_default_priority: int = 0
    task_default_icon: Optional[int] = None

    # Feature Flags
    enable_metrics: bool = False

    @field_validator("database_url", mode="before")
    @classmethod
    def validate_database_url(cls, v):
        # Bare sqlite URLs get the async driver
        url = str(v)
        if url.startswith("sqlite://"):
            return "sqlite+aiosqlite://" + url[len("sqlite://"):]
        return url

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v):
        return str(v).upper()


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
