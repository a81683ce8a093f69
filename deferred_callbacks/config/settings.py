"""
Global Registry Settings

Environment-driven configuration for logging and the default error sink.
"""

from typing import Any, Dict, Literal, Optional
import os

import dotenv
from pydantic import BaseModel, Field, field_validator

dotenv.load_dotenv()

ENV_PREFIX = "DEFERRED_CALLBACKS_"


class RegistrySettings(BaseModel):
    """Settings shared by every registry in the process"""

    log_level: str = Field(default="INFO", description="Level for registry logs")
    error_sink: Literal["console", "raise"] = Field(
        default="console",
        description="Where report_error sends errors when no sink is injected",
    )
    logger_name: str = Field(
        default="deferred_callbacks", description="Name of the package logger"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v):
        level = str(v).upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("error_sink", mode="before")
    @classmethod
    def normalize_error_sink(cls, v):
        return str(v).strip().lower()

    @classmethod
    def from_env(cls, **overrides: Any) -> "RegistrySettings":
        """Build settings from DEFERRED_CALLBACKS_* variables plus overrides"""
        values: Dict[str, Any] = {}
        for key in cls.model_fields:
            env_value = os.environ.get(f"{ENV_PREFIX}{key.upper()}")
            if env_value is not None:
                values[key] = env_value
        values.update(overrides)
        return cls(**values)


# Global settings instance
_settings: Optional[RegistrySettings] = None


def get_settings() -> RegistrySettings:
    """Get the global settings instance"""
    global _settings
    if _settings is None:
        _settings = RegistrySettings.from_env()
    return _settings


def initialize_settings(**overrides: Any) -> RegistrySettings:
    """Initialize settings from the environment with optional overrides"""
    global _settings
    _settings = RegistrySettings.from_env(**overrides)
    return _settings


def reset_settings() -> None:
    """Reset settings to default (useful for testing)"""
    global _settings
    _settings = None
