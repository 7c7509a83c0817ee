"""Configuration settings using Pydantic Settings.

Provides typed copy configuration. Environment variables are opt-in overrides,
read once when the default settings are first needed; no files are read.

Usage:
    from graphcopy.config import CopySettings, default_settings

    # Process-wide defaults (GRAPHCOPY_* read once, then cached)
    settings = default_settings()

    # Or override with explicit values
    settings = CopySettings(max_depth=200, warn_on_key_collision=False)
"""

from __future__ import annotations

import functools

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CopySettings(BaseSettings):  # type: ignore[misc]
    """Configuration for deep copies.

    Attributes:
        max_depth: Deepest nesting allowed before DepthExceededError
            (None for unbounded, limited only by the interpreter stack).
        warn_on_key_collision: Emit KeyCollisionWarning when two mapping keys
            copy to equal keys.

    Environment Variables:
        GRAPHCOPY_MAX_DEPTH
        GRAPHCOPY_WARN_ON_KEY_COLLISION
    """

    model_config = SettingsConfigDict(
        env_prefix="GRAPHCOPY_",
        extra="ignore",
    )

    max_depth: int | None = Field(default=None, ge=1)
    warn_on_key_collision: bool = True


@functools.cache
def default_settings() -> CopySettings:
    """Get the settings used when copy() is called without any.

    Built on first use and cached, so later copies never touch the
    environment.

    Returns:
        The process-wide default CopySettings.
    """
    return CopySettings()
