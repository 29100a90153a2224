"""Estimator settings loaded from environment variables."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUE_VALUES


@dataclass(frozen=True)
class Settings:
    """Runtime configuration.

    Attributes:
        strict_validation: Reject out-of-domain measurements instead of
            clamping body fat to 0
        enforce_goals: Refuse goals outside the allowed set
        log_level: Standard logging level name
        log_format: 'console' or 'json'
    """

    strict_validation: bool = False
    enforce_goals: bool = False
    log_level: str = "INFO"
    log_format: str = "console"


def load_settings() -> Settings:
    """
    Build settings from the environment.

    Environment Variables:
        BODYCOMP_STRICT_VALIDATION: Strict degenerate-input policy (default false)
        BODYCOMP_ENFORCE_GOALS: Refuse disallowed goals (default false)
        BODYCOMP_LOG_LEVEL: Logging level (default INFO)
        BODYCOMP_LOG_FORMAT: 'console' or 'json' (default console)

    A .env file in the working directory is loaded first; variables
    already set in the environment take precedence.
    """
    load_dotenv(find_dotenv(usecwd=True))

    log_format = os.getenv("BODYCOMP_LOG_FORMAT", "console").strip().lower()
    if log_format not in ("console", "json"):
        # Unknown format - graceful fallback to console
        log_format = "console"

    return Settings(
        strict_validation=_env_flag("BODYCOMP_STRICT_VALIDATION"),
        enforce_goals=_env_flag("BODYCOMP_ENFORCE_GOALS"),
        log_level=os.getenv("BODYCOMP_LOG_LEVEL", "INFO").strip().upper(),
        log_format=log_format,
    )


# Singleton instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get singleton settings instance.

    Lazy initialization on first call.
    """
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def reset_settings() -> None:
    """
    Reset singleton instance.

    Useful for testing to ensure clean state.
    """
    global _settings
    _settings = None
