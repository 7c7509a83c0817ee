"""Configuration module using Pydantic Settings.

Usage:
    from graphcopy.config import CopySettings, default_settings

    settings = CopySettings(max_depth=100)
    defaults = default_settings()
"""

from graphcopy.config.settings import CopySettings, default_settings

__all__ = [
    "CopySettings",
    "default_settings",
]
