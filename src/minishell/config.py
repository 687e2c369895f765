"""Configuration management for minishell."""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PROMPT_ENV = "MY_PROMPT"
HOME_ENV = "HOME"
DEFAULT_PROMPT = "shell>"


class ShellSettings(BaseSettings):
    """Process-level settings read from the environment."""

    model_config = SettingsConfigDict(case_sensitive=True, extra="ignore")

    # Test bypasses, only the exact value "1" enables them
    skip_tc: bool = Field(default=False, validation_alias="SKIP_TC")
    skip_exit: bool = Field(default=False, validation_alias="SKIP_EXIT")

    log_level: str = Field(default="WARNING", validation_alias="MINISHELL_LOG_LEVEL")

    @field_validator("skip_tc", "skip_exit", mode="before")
    @classmethod
    def _flag_is_one(cls, value: object) -> bool:
        if isinstance(value, bool):
            return value
        return str(value) == "1"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> str:
        return str(value).strip().upper() or "WARNING"


def load_settings() -> ShellSettings:
    """Load settings from the current environment.

    Returns:
        ShellSettings instance
    """
    return ShellSettings()
