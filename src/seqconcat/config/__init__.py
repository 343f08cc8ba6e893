"""Configuration module using Pydantic Settings.

Usage:
    from seqconcat.config import ViewSettings, get_settings

    settings = ViewSettings(debug_checks=False)
"""

from seqconcat.config.settings import ViewSettings, get_settings

__all__ = [
    "ViewSettings",
    "get_settings",
]
