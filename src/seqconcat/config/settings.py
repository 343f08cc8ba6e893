"""Configuration settings using Pydantic Settings.

Controls the debug checks and tracing of concatenated views, with environment
variable support.

Usage:
    from seqconcat.config import ViewSettings, get_settings

    # Load from environment variables (SEQCONCAT_*)
    settings = get_settings()

    # Or override with explicit values for one view
    view = concat([1, 2], [3], settings=ViewSettings(debug_checks=False))
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class ViewSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for concatenated views and their positions.

    Attributes:
        debug_checks: Check position preconditions (stepping before begin,
            dereferencing the end, mixing views, dangling positions) and raise
            ContractViolationError subclasses. When off, violations are
            undefined behavior.
        trace_transitions: Log every change of the active range at DEBUG level.

    Environment Variables:
        SEQCONCAT_DEBUG_CHECKS
        SEQCONCAT_TRACE_TRANSITIONS
    """

    model_config = SettingsConfigDict(
        env_prefix="SEQCONCAT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    debug_checks: bool = True
    trace_transitions: bool = False


@lru_cache(maxsize=1)
def get_settings() -> ViewSettings:
    """Process-wide settings loaded once from the environment.

    Returns:
        Cached ViewSettings instance. Call `get_settings.cache_clear()` to reload.
    """
    return ViewSettings()
