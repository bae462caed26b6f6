# sanitizer/service/config.py

"""Application configuration using Pydantic Settings.

Manages environment variables, defaults, and validation rules.
"""

import logging
from typing import Dict, Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sanitizer.core.domain import CleaningOptions, VarianceSettings
from sanitizer.core.exceptions import ValidationError


class Settings(BaseSettings):
    """Global application settings.

    Loads values from environment variables (prefix 'SANITIZER_') or .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="SANITIZER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Core Settings
    log_level: str = Field(default="INFO", description="Root logging level.")

    patterns_file: Optional[str] = Field(
        default=None,
        description="Alternate pattern table YAML; the bundled table when unset.",
    )

    # Cleaning defaults, used when a caller supplies no options
    default_options: Dict[str, bool] = Field(
        default_factory=lambda: CleaningOptions.defaults().to_dict(),
        description="Cleaning flags keyed by camelCase or snake_case option name.",
    )

    # Variance defaults
    variance_enabled: bool = Field(default=False)
    case_variation: bool = Field(default=True)
    plural_variation: bool = Field(default=True)
    synonym_variation: bool = Field(default=False)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure the level is a standard logging level name."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("default_options")
    @classmethod
    def validate_default_options(cls, v: Dict[str, bool]) -> Dict[str, bool]:
        """Ensure every key names a cleaning option."""
        try:
            CleaningOptions.from_mapping(v)
        except ValidationError as e:
            raise ValueError(str(e)) from e
        return v

    def cleaning_options(self) -> CleaningOptions:
        return CleaningOptions.from_mapping(self.default_options)

    def variance_settings(self) -> VarianceSettings:
        return VarianceSettings(
            enabled=self.variance_enabled,
            synonym_variation=self.synonym_variation,
            case_variation=self.case_variation,
            plural_variation=self.plural_variation,
        )


# Singleton settings instance
settings = Settings()
