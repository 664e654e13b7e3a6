"""Application settings using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """TokenVest configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra env vars
    )

    # Application
    app_name: str = Field(default="TokenVest", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Minimum log level"
    )

    # Server
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, ge=1, le=65535, description="Server port")

    # Persistent store
    store_backend: Literal["memory", "file"] = Field(
        default="memory", description="Registry store backend: memory or file"
    )
    store_path: str | None = Field(
        default=None, description="JSON file location for the file backend"
    )

    # Registry bootstrap
    registry_admin: str | None = Field(
        default=None,
        description="Admin address used to initialize an uninitialized registry at startup",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        """Accept lower-case level names from the environment."""
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("registry_admin")
    @classmethod
    def validate_registry_admin(cls, v: str | None) -> str | None:
        """Treat a blank admin as unset."""
        if v is None:
            return None
        return v.strip() or None

    @model_validator(mode="after")
    def validate_store_path(self) -> "Settings":
        """File backend needs a path."""
        if self.store_backend == "file" and not (self.store_path and self.store_path.strip()):
            raise ValueError("store_path is required when store_backend is 'file'")
        return self


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
