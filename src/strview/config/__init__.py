"""Configuration module using Pydantic Settings.

Usage:
    from strview.config import configure, get_settings

    get_settings().check_preconditions   # False unless STRVIEW_CHECK_PRECONDITIONS is set
    configure(check_preconditions=True)
"""

from strview.config.settings import ViewSettings, configure, get_settings, reset_settings

__all__ = [
    "ViewSettings",
    "get_settings",
    "configure",
    "reset_settings",
]
