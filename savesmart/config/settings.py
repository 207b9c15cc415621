"""
Configuration Management for SaveSmart Onboarding

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
Every tunable of the onboarding form (where drafts are stored, whether
validation messages are shown) is read from the environment or a .env file.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class OnboardingSettings(BaseSettings):
    """Budget-profile form configuration."""

    model_config = SettingsConfigDict(
        env_prefix="SAVESMART_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    storage_dir: Path = Field(
        default=Path(".savesmart"),
        description="Directory where form drafts are auto-saved"
    )
    storage_key_prefix: str = Field(
        default="budgeting-profile-",
        description="Prefix for every stored draft key"
    )
    draft_key: str = Field(
        default="form-data",
        description="Key under which the in-progress form is saved"
    )
    autosave_enabled: bool = Field(
        default=True,
        description="Persist the draft after every change"
    )
    show_validation: bool = Field(
        default=True,
        description="Show inline validation messages while typing"
    )

    @field_validator('storage_key_prefix')
    @classmethod
    def validate_key_prefix(cls, v: str) -> str:
        """Prefix must be usable as part of a file name."""
        if not v or any(sep in v for sep in ("/", "\\")):
            raise ValueError("storage_key_prefix must be a non-empty file name fragment")
        return v


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Environment
    app_environment: str = Field(
        default="development",
        description="Application environment"
    )
    debug_mode: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    log_level: str = Field(
        default="INFO",
        description="Minimum level for structured logs"
    )

    @field_validator('log_level')
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def onboarding(self) -> OnboardingSettings:
        return OnboardingSettings()

    @property
    def app(self) -> AppSettings:
        return AppSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, bool]:
    """
    Validate all settings are properly configured.

    Returns a dict of {setting_name: is_valid}, plus a
    "<name>_error" entry for each group that failed to load.
    """
    results = {}

    settings = get_settings()

    for name in ("onboarding", "app"):
        try:
            getattr(settings, name)
            results[name] = True
        except ValueError as e:
            results[name] = False
            results[f"{name}_error"] = str(e)

    return results
