"""Configuration settings using Pydantic Settings.

Provides typed defaults for every composition call, with environment variable
support.

Usage:
    from multidelegate.config import CompositionSettings, get_settings

    # Load from environment variables (MULTIDELEGATE_*)
    settings = get_settings()

    # Or override per call
    strict = CompositionSettings(allow_empty_parents=False)
    composite = inherit(a, b, settings=strict)
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from multidelegate.core.composite.models import MemberEquality


class CompositionSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for composition calls.

    Attributes:
        allow_empty_parents: Zero parents build an empty composite instead of
            raising EmptyParentsError.
        member_equality: How values found in several parents are compared.
            Accepts a MemberEquality or its value ("identity" or "equality").
        forward_members: Install member forwarders on placeholder classes so
            ``super()`` and special methods (``len``, ``==``, ...) reach the parents.

    Environment Variables:
        MULTIDELEGATE_ALLOW_EMPTY_PARENTS
        MULTIDELEGATE_MEMBER_EQUALITY
        MULTIDELEGATE_FORWARD_MEMBERS
    """

    model_config = SettingsConfigDict(
        env_prefix="MULTIDELEGATE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    allow_empty_parents: bool = True
    member_equality: MemberEquality = MemberEquality.IDENTITY
    forward_members: bool = True


# Module-level settings instance, loaded on first use
_settings: CompositionSettings | None = None


def get_settings() -> CompositionSettings:
    """Access the process-wide settings, loading them from the environment once.

    Returns:
        The shared CompositionSettings instance.
    """
    global _settings
    if _settings is None:
        _settings = CompositionSettings()
    return _settings


def reset_settings() -> None:
    """Forget the loaded settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
