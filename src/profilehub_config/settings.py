"""Application settings loaded from environment variables.

Configuration file discovery (in priority order):
1. OS environment variables (always highest priority)
2. PROFILEHUB_ENV_FILE environment variable (path to .env file)
3. config/.env.dev - local development
4. config/.env - production/Docker

Uses pydantic-settings for automatic type coercion and validation.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

from pydantic import SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE_VARIABLE = "PROFILEHUB_ENV_FILE"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _find_project_root() -> Path:
    """Walk up from this file to the first directory holding config/ or .git."""
    here = Path(__file__).resolve()
    for parent in here.parents:
        if (parent / "config").is_dir() or (parent / ".git").is_dir():
            return parent
    return here.parents[2]


def get_config_dir() -> Path:
    return _find_project_root() / "config"


def _resolve_env_file_path() -> Path | None:
    """Return the first existing env file, or None to use the environment only."""
    candidates: list[Path] = []

    explicit = os.environ.get(ENV_FILE_VARIABLE)
    if explicit:
        path = Path(explicit)
        candidates.append(path if path.is_absolute() else _find_project_root() / path)

    config_dir = get_config_dir()
    candidates += [config_dir / ".env.dev", config_dir / ".env"]

    return next((path for path in candidates if path.is_file()), None)


class Settings(BaseSettings):
    """Application configuration loaded from environment variables.

    Values are loaded from:
    1. OS environment variables (highest priority)
    2. .env file (config/.env.dev or config/.env)
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Security (MUST be set - app fails without it)
    jwt_secret_key: SecretStr

    # Application
    app_name: str = "profilehub"
    debug: bool = False

    # Persistence
    storage_backend: Literal["memory", "sqlalchemy"] = "memory"
    database_url: str = "sqlite+aiosqlite:///./data/profilehub.db"

    # API (API_ prefix)
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_cors_origins: str = ""  # Empty = no CORS allowed

    # JWT
    jwt_access_token_expire_hours: int = 24

    # Password hashing
    bcrypt_rounds: int = 12

    # Uploads
    upload_dir: str = "./data/uploads"
    upload_max_bytes: int = 5 * 1024 * 1024
    upload_allowed_mime_prefixes: str = "image/"
    public_base_url: str = "http://localhost:8000"

    # Initial administrator (created once on startup when a password is set)
    initial_admin_email: str = "admin@system.com"
    initial_admin_name: str = "Administrator"
    initial_admin_password: SecretStr | None = None

    # Logging
    log_level: str = "INFO"

    @field_validator("api_cors_origins", mode="before")
    @classmethod
    def _join_cors_origins(cls, v: Any) -> str:
        if isinstance(v, list):
            return ",".join(v)
        return str(v) if v else ""

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            msg = f"log_level must be one of {', '.join(LOG_LEVELS)}"
            raise ValueError(msg)
        return level

    @field_validator("bcrypt_rounds")
    @classmethod
    def _validate_bcrypt_rounds(cls, v: int) -> int:
        # bcrypt accepts cost factors 4..31
        if not 4 <= v <= 31:
            msg = "bcrypt_rounds must be between 4 and 31"
            raise ValueError(msg)
        return v

    @field_validator("upload_max_bytes")
    @classmethod
    def _validate_upload_max_bytes(cls, v: int) -> int:
        if v <= 0:
            msg = "upload_max_bytes must be positive"
            raise ValueError(msg)
        return v

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins(self) -> list[str]:
        """Parse CORS origins from comma-separated string."""
        return [o.strip() for o in self.api_cors_origins.split(",") if o.strip()]

    @property
    def allowed_mime_prefixes(self) -> tuple[str, ...]:
        """Parse allowed upload MIME prefixes; empty means any type."""
        return tuple(
            p.strip() for p in self.upload_allowed_mime_prefixes.split(",") if p.strip()
        )


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings.

    The required jwt_secret_key must be provided via environment
    variables or .env file.
    """
    return Settings()  # type: ignore[call-arg]  # pydantic-settings loads from env


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
