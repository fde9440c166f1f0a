"""Configuration module using Pydantic Settings.

Usage:
    from multidelegate.config import CompositionSettings, get_settings

    settings = CompositionSettings(member_equality="equality")
"""

from multidelegate.config.settings import CompositionSettings, get_settings, reset_settings

__all__ = [
    "CompositionSettings",
    "get_settings",
    "reset_settings",
]
