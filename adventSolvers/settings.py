"""Django settings for advent-solvers.

The project has no database and no web surface; Django provides the settings
layer, logging configuration and the `solve_puzzle` management command.
Configuration is driven by environment variables so local input locations are
not checked into the repository.
"""

from __future__ import annotations

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def _env_bool(name: str, *, default: bool) -> bool:
    """Parse a boolean environment variable.

    Args:
        name: Environment variable name.
        default: Value when the variable is not set.

    Returns:
        Parsed boolean value.
    """

    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "t", "yes", "y", "on"}


def _env_path(name: str, *, default: Path) -> Path:
    """Parse a filesystem path environment variable.

    Args:
        name: Environment variable name.
        default: Value when the variable is not set or blank.

    Returns:
        The configured path with `~` expanded.
    """

    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return Path(raw.strip()).expanduser()


def _env_log_level(name: str, *, default: str) -> str:
    """Parse a logging level name environment variable."""

    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().upper()


DEBUG = _env_bool("DJANGO_DEBUG", default=True)

_DEV_SECRET_KEY = "dev-only-insecure-secret-key"
SECRET_KEY = os.getenv("DJANGO_SECRET_KEY") or (_DEV_SECRET_KEY if DEBUG else "")
if not SECRET_KEY:
    raise RuntimeError("DJANGO_SECRET_KEY is required when DJANGO_DEBUG is False.")

INSTALLED_APPS = [
    "core.apps.CoreConfig",
]

DATABASES: dict[str, dict[str, object]] = {}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = False
USE_TZ = True

PUZZLE_INPUT_DIR = _env_path("ADVENT_INPUT_DIR", default=BASE_DIR / "inputs")

LOG_LEVEL = _env_log_level("ADVENT_LOG_LEVEL", default="INFO" if DEBUG else "WARNING")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "{levelname} {name}: {message}", "style": "{"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "root": {"handlers": ["console"], "level": LOG_LEVEL},
}
