"""Application settings.

Uses Pydantic Settings for automatic env var loading. Every default lives
here; nothing else owns configuration defaults.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from dynamic_enum.core.config.enums import ColourSourceType, Environment


class Settings(BaseSettings):
    """Settings loaded from the environment (and an optional .env file).

    Example:
        COLOUR_SOURCE=file COLOUR_SOURCE_PATH=/etc/colours.json
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    ENVIRONMENT: Environment = Field(Environment.LOCAL, description="Deployment environment")
    LOG_LEVEL: str = Field("INFO", description="Root log level for the package logger")

    COLOUR_SOURCE: ColourSourceType = Field(
        ColourSourceType.STATIC, description="Data source consulted by the colour registry"
    )
    COLOUR_SOURCE_PATH: Optional[Path] = Field(
        None, description="JSON file with colour records (file source only)"
    )
    COLOUR_SOURCE_URL: Optional[str] = Field(
        None, description="Endpoint returning colour records as JSON (http source only)"
    )
    COLOUR_SOURCE_TIMEOUT: float = Field(
        10.0, gt=0, description="Per-request timeout in seconds (http source only)"
    )

    @model_validator(mode="after")
    def validate_colour_source(self) -> "Settings":
        """Make sure the selected colour source has what it needs."""
        if self.COLOUR_SOURCE == ColourSourceType.FILE and self.COLOUR_SOURCE_PATH is None:
            raise ValueError("Invalid config: COLOUR_SOURCE=file requires COLOUR_SOURCE_PATH")
        if self.COLOUR_SOURCE == ColourSourceType.HTTP and not self.COLOUR_SOURCE_URL:
            raise ValueError("Invalid config: COLOUR_SOURCE=http requires COLOUR_SOURCE_URL")
        return self

    @property
    def is_local(self) -> bool:
        """True when logs should be human readable rather than JSON."""
        return self.ENVIRONMENT in (Environment.LOCAL, Environment.TEST)
