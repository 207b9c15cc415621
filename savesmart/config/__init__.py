"""Configuration package."""

from savesmart.config.settings import (
    AppSettings,
    OnboardingSettings,
    Settings,
    get_settings,
    validate_all_settings,
)

__all__ = [
    "AppSettings",
    "OnboardingSettings",
    "Settings",
    "get_settings",
    "validate_all_settings",
]
