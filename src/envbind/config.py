"""Configuration management for the envbind command line tool."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Tool settings."""

    log_level: str = Field(default="INFO", description="Log level")
    log_format: Literal["console", "json"] = Field(default="console", description="Log output format")

    class Config:
        env_prefix = "ENVBIND_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Global settings instance
settings = Settings()
