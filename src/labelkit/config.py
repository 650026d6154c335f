"""Runtime configuration with pydantic-settings.

Values come from the environment (``LABELKIT_`` prefix) or a local ``.env``
file. The application settings file (security tokens, connections and
recent projects) is a separate document; this module only knows where it
lives.

Usage:
    from labelkit.config import Settings

    settings = Settings()
    setup_logging(settings)
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Labelkit runtime settings.

    All fields are optional with sensible defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="LABELKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging configuration
    service_name: str = Field(
        default="labelkit",
        description="Service name for structured logging",
    )
    log_format: Literal["json", "console"] = Field(
        default="console",
        description="Log output format",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR)",
    )

    # Application settings document
    app_settings_path: Path = Field(
        default=Path("~/.labelkit/settings.json"),
        validate_default=True,
        description="JSON file holding security tokens, connections and recent projects",
    )

    # Storage
    storage_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout for a single remote storage read",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_v = v.upper()
        if upper_v not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return upper_v

    @field_validator("app_settings_path")
    @classmethod
    def expand_app_settings_path(cls, v: Path) -> Path:
        return v.expanduser()
