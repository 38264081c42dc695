"""Configuration Model - Pydantic models for trellokit configuration.

This module defines the configuration schema for trellokit, including:
- API settings (base URL, app key, user token, timeouts)
- Synchronization settings (how long fetched data stays fresh, entity cache)
- Request settings (error propagation, how long callers wait on the queue)

Configuration is loaded from `.trellokit/config.json` in the working directory.
Environment variables can override specific settings.

Environment Variable Mapping:
| Config Key                     | Environment Variable        |
|--------------------------------|-----------------------------|
| api.app_key                    | TRELLO_APP_KEY              |
| api.user_token                 | TRELLO_USER_TOKEN           |
| api.base_url                   | TRELLOKIT_BASE_URL          |
| api.timeout_seconds            | TRELLOKIT_TIMEOUT           |
| sync.refresh_interval_seconds  | TRELLOKIT_REFRESH_INTERVAL  |
"""

from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from trellokit.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = ".trellokit"
CONFIG_FILE_NAME = "config.json"

# =============================================================================
# Configuration Sub-Models
# =============================================================================


class APIConfig(BaseModel):
    """API configuration settings.

    The app key identifies the application; the user token authorizes it to
    act for a member. Both can be set via config file or environment variables.
    """

    base_url: str = Field(
        default="https://api.trello.com/1",
        description="Trello REST API base URL. Overridden by TRELLOKIT_BASE_URL.",
    )
    app_key: str | None = Field(
        default=None,
        description="Application key. Overridden by TRELLO_APP_KEY env var.",
    )
    user_token: str | None = Field(
        default=None,
        description="User token. Overridden by TRELLO_USER_TOKEN env var.",
    )
    timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="HTTP timeout per request in seconds. Overridden by TRELLOKIT_TIMEOUT.",
    )
    user_agent: str = Field(
        default="trellokit/0.4",
        min_length=1,
        description="User-Agent header sent with every request.",
    )


class SyncConfig(BaseModel):
    """Synchronization settings for lazily refreshed entity data."""

    refresh_interval_seconds: float = Field(
        default=30.0,
        ge=0,
        description="Seconds fetched data stays fresh before the next read refreshes it. "
        "Overridden by TRELLOKIT_REFRESH_INTERVAL.",
    )
    enable_cache: bool = Field(
        default=True,
        description="Reuse one entity instance per id across collections and references.",
    )


class RequestConfig(BaseModel):
    """Request queue settings."""

    throw_on_error: bool = Field(
        default=True,
        description="Raise service errors. When false they are logged and the call yields None.",
    )
    response_timeout_seconds: float | None = Field(
        default=60.0,
        gt=0,
        description="Seconds a caller waits for a queued request (null waits forever).",
    )
    start_active: bool = Field(
        default=True,
        description="Whether a new request processor dispatches immediately.",
    )


# =============================================================================
# Main Configuration Model
# =============================================================================


class TrelloKitConfig(BaseModel):
    """Main configuration model for trellokit.

    Example config.json:
    ```json
    {
      "version": "1.0",
      "api": {
        "base_url": "https://api.trello.com/1",
        "app_key": null,
        "user_token": null,
        "timeout_seconds": 30.0,
        "user_agent": "trellokit/0.4"
      },
      "sync": {
        "refresh_interval_seconds": 30.0,
        "enable_cache": true
      },
      "requests": {
        "throw_on_error": true,
        "response_timeout_seconds": 60.0,
        "start_active": true
      }
    }
    ```
    """

    version: str = Field(
        default="1.0",
        description="Configuration schema version.",
    )
    api: APIConfig = Field(
        default_factory=APIConfig,
        description="API configuration (URL, credentials, timeouts).",
    )
    sync: SyncConfig = Field(
        default_factory=SyncConfig,
        description="Synchronization and caching settings.",
    )
    requests: RequestConfig = Field(
        default_factory=RequestConfig,
        description="Request queue settings.",
    )


# =============================================================================
# Default Configuration Generator
# =============================================================================


def generate_default_config() -> TrelloKitConfig:
    """Generate a default configuration with all standard values.

    Returns:
        TrelloKitConfig with all default values populated.
    """
    return TrelloKitConfig()


def generate_default_config_dict() -> dict[str, Any]:
    """Generate default configuration as a dictionary.

    Returns:
        Dictionary representation of the default configuration.
    """
    return generate_default_config().model_dump()


def generate_default_config_json(indent: int = 2) -> str:
    """Generate default configuration as a formatted JSON string.

    Args:
        indent: Number of spaces for JSON indentation.

    Returns:
        JSON string representation of the default configuration.
    """
    return generate_default_config().model_dump_json(indent=indent)


# =============================================================================
# Loading and Saving
# =============================================================================

ENV_OVERRIDES: list[tuple[str, str, str]] = [
    ("TRELLO_APP_KEY", "api", "app_key"),
    ("TRELLO_USER_TOKEN", "api", "user_token"),
    ("TRELLOKIT_BASE_URL", "api", "base_url"),
    ("TRELLOKIT_TIMEOUT", "api", "timeout_seconds"),
    ("TRELLOKIT_REFRESH_INTERVAL", "sync", "refresh_interval_seconds"),
]


def get_config_path(base_dir: Path | None = None) -> Path:
    """Get the path of the config file for a directory (default: cwd)."""
    return (base_dir or Path.cwd()) / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Overlay environment variables onto a raw configuration dictionary.

    Args:
        data: Raw configuration data (as read from config.json).

    Returns:
        The same dictionary with overridden values applied.
    """
    for env_var, section, key in ENV_OVERRIDES:
        value = os.environ.get(env_var)
        if value:
            data.setdefault(section, {})[key] = value
    return data


def load_config(path: Path | None = None) -> TrelloKitConfig:
    """Load configuration from file and environment.

    A missing file is not an error; defaults plus environment overrides apply.

    Args:
        path: Config file path. Defaults to `get_config_path()`.

    Returns:
        The validated configuration.

    Raises:
        ConfigError: If the file contains invalid JSON or fails validation.
    """
    config_path = path or get_config_path()
    data: dict[str, Any] = {}

    if config_path.exists():
        try:
            data = json.loads(config_path.read_text())
        except json.JSONDecodeError as e:
            raise ConfigError(
                f"Config file {config_path} contains invalid JSON",
                f"JSON parse error at line {e.lineno}, column {e.colno}: {e.msg}",
            ) from e
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {config_path} must contain a JSON object")
        logger.debug(f"Loaded config from {config_path}")

    apply_env_overrides(data)

    try:
        return TrelloKitConfig(**data)
    except ValidationError as e:
        problems = [
            f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}" for error in e.errors()
        ]
        raise ConfigError("Configuration has invalid values", "; ".join(problems)) from e


def save_config(config: TrelloKitConfig, path: Path | None = None) -> Path:
    """Write configuration to disk as JSON.

    Returns:
        The path written.
    """
    config_path = path or get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(config.model_dump_json(indent=2) + "\n")
    return config_path


# =============================================================================
# Active Configuration
# =============================================================================

_active_config: TrelloKitConfig | None = None
_config_lock = threading.Lock()


def get_config() -> TrelloKitConfig:
    """Get the process-wide configuration, loading it on first use."""
    global _active_config
    with _config_lock:
        if _active_config is None:
            _active_config = load_config()
        return _active_config


def set_config(config: TrelloKitConfig) -> None:
    """Replace the process-wide configuration."""
    global _active_config
    with _config_lock:
        _active_config = config


def reset_config() -> None:
    """Forget the process-wide configuration so the next access reloads it."""
    global _active_config
    with _config_lock:
        _active_config = None
