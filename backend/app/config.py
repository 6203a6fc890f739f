"""
Configuration settings using Pydantic BaseSettings.

Stargate astronaut duty tracker - configuration module
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import Literal


class Settings(BaseSettings):
    """Application configuration settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application
    app_name: str = "Stargate Astronaut Career Tracking System"
    app_version: str = "1.0.0"
    debug: bool = True

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "info"

    # Database
    database_url: str = "sqlite:///./stargate.db"

    # CORS
    cors_origins: list[str] = [
        "http://localhost:4200",
        "http://localhost:3000",
        "http://127.0.0.1:4200",
        "http://127.0.0.1:3000"
    ]

    # Duty rules
    retired_duty_title: str = "RETIRED"
    # "chronological": a later-starting duty supersedes the open one
    # "strict": any open non-retired duty blocks a new assignment
    duty_conflict_policy: Literal["chronological", "strict"] = "chronological"

    # Audit
    audit_actor: str = "System"
    audit_page_size: int = 100


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
