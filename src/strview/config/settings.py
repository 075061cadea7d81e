"""Configuration settings using Pydantic Settings.

Provides typed, process-wide configuration with environment variable support.

Usage:
    from strview.config import configure, get_settings

    # Load from environment variables (STRVIEW_*)
    settings = get_settings()

    # Or override with explicit values
    configure(check_preconditions=True)
"""

from __future__ import annotations

from typing import Any

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install strview"
    ) from e


class ViewSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for view behavior.

    Attributes:
        check_preconditions: Raise PreconditionError on caller contract violations
            (unchecked indexing, front/back on empty views, oversized trims).
            Off by default so hot paths stay unchecked.
        repr_limit: Maximum code units shown by repr() before truncating.
        warn_unterminated: Emit UnterminatedBufferWarning when a terminator scan
            runs off the end of its buffer.

    Environment Variables:
        STRVIEW_CHECK_PRECONDITIONS
        STRVIEW_REPR_LIMIT
        STRVIEW_WARN_UNTERMINATED
    """

    model_config = SettingsConfigDict(
        env_prefix="STRVIEW_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    check_preconditions: bool = False
    repr_limit: int = 40
    warn_unterminated: bool = True


_settings: ViewSettings | None = None


def get_settings() -> ViewSettings:
    """Get the process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = ViewSettings()
    return _settings


def configure(**overrides: Any) -> ViewSettings:
    """Replace the process-wide settings.

    Args:
        **overrides: Field values taking precedence over the environment.

    Returns:
        The new settings instance.
    """
    global _settings
    _settings = ViewSettings(**overrides)
    return _settings


def reset_settings() -> None:
    """Drop the current settings so the next get_settings() reloads the environment."""
    global _settings
    _settings = None
