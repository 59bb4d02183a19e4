"""Core configuration.

Environment variables are read through pydantic-settings so that adapters
(HTTP client, CLI) share a single typed contract.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

import typer
from dotenv import set_key
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://popcorn-time.ga"


def get_user_config_dir() -> Path:
    """Per-user configuration directory, following each platform's convention."""

    return Path(typer.get_app_dir("popcorn-catalog"))


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def write_user_env_vars(values: dict[str, str], *, env_path: Path | None = None) -> Path:
    """Write or update variables in the user's global .env, keeping other keys."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)
    env_path.touch(exist_ok=True)
    for key, value in values.items():
        if value is not None:
            set_key(str(env_path), key, value, quote_mode="never")
    return env_path


class AppSettings(BaseSettings):
    """Central application settings.

    Sources, in order: the project `.env`, then the user config `.env`,
    with real environment variables taking precedence over both.
    """

    model_config = SettingsConfigDict(
        env_prefix="POPCORN_",
        extra="ignore",
        case_sensitive=False,
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        min_length=8,
        description="Base URL of the catalog API (no trailing slash).",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Per-request timeout (seconds).",
    )
    user_agent: str = Field(
        default="popcorn-catalog/0.1",
        min_length=1,
        description="User-Agent sent with every catalog request.",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Root log level used by the CLI.",
    )
