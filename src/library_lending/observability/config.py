"""Logfire settings for the lending registry, with per-environment presets."""

import os

from pydantic import BaseModel, Field


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


class ObservabilityConfig(BaseModel):
    """Where registry spans and metrics go."""

    token: str = Field(default_factory=lambda: os.getenv("LOGFIRE_TOKEN", ""), repr=False)
    project_name: str = "library-lending"
    environment: str = Field(default_factory=lambda: os.getenv("ENVIRONMENT", "development"))

    enabled: bool = Field(default_factory=lambda: _env_flag("LOGFIRE_ENABLED", "true"))
    console_output: bool = Field(default_factory=lambda: _env_flag("LOGFIRE_CONSOLE", "false"))
    send_to_logfire: bool = Field(default_factory=lambda: _env_flag("LOGFIRE_SEND", "true"))


class ProductionConfig(ObservabilityConfig):
    """Ship everything, print nothing."""

    console_output: bool = False
    send_to_logfire: bool = True


class DevelopmentConfig(ObservabilityConfig):
    """Spans on the console, nothing leaves the machine."""

    console_output: bool = True
    send_to_logfire: bool = False


_PRESETS: dict[str, type[ObservabilityConfig]] = {
    "production": ProductionConfig,
    "development": DevelopmentConfig,
}


def get_environment_config() -> ObservabilityConfig:
    """Pick the preset matching ``ENVIRONMENT``; unknown names get plain env settings."""
    env = os.getenv("ENVIRONMENT", "development")
    return _PRESETS.get(env, ObservabilityConfig)()
