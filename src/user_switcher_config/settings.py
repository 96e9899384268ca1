"""Application settings loaded from environment variables.

Configuration file discovery (in priority order):
1. OS environment variables (always highest priority)
2. USER_SWITCHER_ENV_FILE environment variable (path to .env file)
3. config/.env.dev - local development
4. config/.env - deployment

Uses pydantic-settings for automatic type coercion and validation.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _find_project_root() -> Path:
    """Find the project root directory."""
    current = Path(__file__).resolve().parent

    for parent in [current, *current.parents]:
        if (parent / "config").is_dir():
            return parent
        if (parent / ".git").is_dir():
            return parent

    return Path(__file__).resolve().parents[2]


def get_config_dir() -> Path:
    """Get the config directory path."""
    return _find_project_root() / "config"


def _resolve_env_file_path() -> Path | None:
    """Resolve the .env file path.

    Priority:
    1. USER_SWITCHER_ENV_FILE env var (full path)
    2. config/.env.dev (local development)
    3. config/.env (deployment)
    """
    env_file_path = os.environ.get("USER_SWITCHER_ENV_FILE")
    if env_file_path:
        path = Path(env_file_path)
        if not path.is_absolute():
            path = _find_project_root() / path
        if path.exists():
            return path

    config_dir = get_config_dir()

    dev_env = config_dir / ".env.dev"
    if dev_env.exists():
        return dev_env

    prod_env = config_dir / ".env"
    if prod_env.exists():
        return prod_env

    return None


class Settings(BaseSettings):
    """User switcher configuration loaded from environment variables.

    Values are loaded from:
    1. OS environment variables (highest priority)
    2. .env file (config/.env.dev or config/.env)
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        env_prefix="USER_SWITCHER_",
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"

    # Localization
    locale: str = "en"
    fallback_locale: str = "en"
    strings_file: Path | None = None  # JSON string table merged over defaults

    @field_validator("locale", "fallback_locale")
    @classmethod
    def _validate_locale(cls, v: str) -> str:
        """Strip whitespace and reject empty locale tags."""
        v = v.strip()
        if not v:
            msg = "Locale cannot be empty"
            raise ValueError(msg)
        return v


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
