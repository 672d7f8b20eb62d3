"""Core configuration.

Why here:
- Centralises environment variables (pydantic-settings) without leaking
  them into the CLI or the API layer.
- Lets adapters (HTTP transport) and services read config consistently.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Per-user config directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "lc-scout"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "lc-scout"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "lc-scout"
    return Path.home() / ".config" / "lc-scout"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Central application settings.

    Why pydantic-settings:
    - Typed and validated at the edge (env vars) without polluting the core.
    - A single configuration contract shared by CLI, API and adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="LC_SCOUT_",
        extra="ignore",
        case_sensitive=False,
        # Project .env first (dev), then the per-user config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    base_url: str = Field(
        default="https://leetcode.com",
        min_length=8,
        description="Base URL of the upstream GraphQL host.",
    )
    graphql_path: str = Field(
        default="/graphql",
        min_length=1,
        description="Path of the GraphQL endpoint, relative to base_url.",
    )
    referer: str = Field(
        default="https://leetcode.com",
        min_length=1,
        description="Referer header sent with every upstream request.",
    )
    user_agent: str = Field(
        default="Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36",
        min_length=1,
        description="Browser-like User-Agent for upstream requests.",
    )
    http_timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        description="Timeout per upstream call (seconds).",
    )

    search_max_concurrency: int = Field(
        default=10,
        ge=1,
        le=50,
        description="Maximum in-flight upstream calls during a keyword search.",
    )
    search_max_candidates: int = Field(
        default=200,
        ge=1,
        le=200,
        description="Maximum number of username candidates tried per search.",
    )
    search_prefilter_case_variants: bool = Field(
        default=False,
        description="Drop candidates that only differ by letter case before dispatch.",
    )

    log_level: str = Field(
        default="INFO",
        min_length=1,
        description="Loguru level for stderr output.",
    )
    api_host: str = Field(
        default="127.0.0.1",
        min_length=1,
        description="Bind address for `lc-scout serve`.",
    )
    api_port: int = Field(
        default=8080,
        ge=1,
        le=65535,
        description="Bind port for `lc-scout serve`.",
    )
