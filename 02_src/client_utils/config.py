"""Library-level configuration loaded from the environment."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from dotenv import load_dotenv

PathLike = Union[str, Path]

ENV_PREFIX = "CLIENT_UTILS_"

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_DEBOUNCE_MS = 250
DEFAULT_RETRIES = 10
DEFAULT_RETRY_INTERVAL_MS = 10
DEFAULT_RETRY_TIMEOUT_MS = 1000


@dataclass
class Settings:
    """Runtime settings for client_utils helpers."""

    log_level: str = DEFAULT_LOG_LEVEL
    log_file: str | None = None
    debounce_ms: int = DEFAULT_DEBOUNCE_MS
    retries: int = DEFAULT_RETRIES
    retry_interval_ms: int = DEFAULT_RETRY_INTERVAL_MS
    retry_timeout_ms: int = DEFAULT_RETRY_TIMEOUT_MS


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(ENV_PREFIX + name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from e


def load_settings(env_file: PathLike | None = None) -> Settings:
    """
    Build Settings from environment variables.

    Args:
        env_file: Optional path to a .env file. Values already present in the
                  environment take precedence over the file.

    Returns:
        Settings instance
    """
    if env_file is not None:
        load_dotenv(Path(env_file))

    return Settings(
        log_level=os.getenv(ENV_PREFIX + "LOG_LEVEL", DEFAULT_LOG_LEVEL),
        log_file=os.getenv(ENV_PREFIX + "LOG_FILE") or None,
        debounce_ms=_env_int("DEBOUNCE_MS", DEFAULT_DEBOUNCE_MS),
        retries=_env_int("RETRIES", DEFAULT_RETRIES),
        retry_interval_ms=_env_int("RETRY_INTERVAL_MS", DEFAULT_RETRY_INTERVAL_MS),
        retry_timeout_ms=_env_int("RETRY_TIMEOUT_MS", DEFAULT_RETRY_TIMEOUT_MS),
    )


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def reset_settings() -> None:
    """Drop cached settings so the next get_settings() reloads them."""
    global _settings
    _settings = None
