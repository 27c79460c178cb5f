"""
Environment configuration for lifecycle hooks.

Loads configuration from environment variables using pydantic-settings.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="LIFECYCLE_HOOKS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging level"
    )
    log_format: Literal["text", "json"] = Field(
        default="text", description="Logging format - text for human-readable, json for structured logs"
    )

    # Feature gates, e.g. "LifecycleHandlerHTTPS=false"
    feature_gates: str = Field(default="", description="Comma separated Name=bool pairs")

    # HTTP hooks
    default_http_port: int = Field(default=80, ge=1, le=65535)
    default_https_port: int = Field(default=443, ge=1, le=65535)
    http_connect_timeout: float = Field(default=5.0, gt=0, description="Connect timeout in seconds")
    http_read_timeout: float = Field(default=30.0, gt=0, description="Read timeout in seconds")
    http_verify_tls: bool = Field(default=False, description="Verify hook server certificates")
    user_agent: str = Field(default="")

    # Exec hooks
    exec_timeout: float = Field(default=0, ge=0, description="Exec hook timeout in seconds, 0 for no bound")
    docker_url: str = Field(default="unix:///var/run/docker.sock")


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
