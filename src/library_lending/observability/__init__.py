"""Logging and Logfire observability for the library lending registry."""

import logging
import sys

import logfire

from ..config import LendingConfig, get_config as get_lending_config
from .config import ObservabilityConfig, get_environment_config

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_config: ObservabilityConfig | None = None


def configure_logging(config: LendingConfig | None = None) -> None:
    """Send package logs to stderr at the configured level."""
    config = config or get_lending_config()

    package_logger = logging.getLogger("library_lending")
    package_logger.setLevel(config.effective_log_level)

    if not any(getattr(h, "_library_lending", False) for h in package_logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._library_lending = True  # type: ignore[attr-defined]
        package_logger.addHandler(handler)

    if config.debug:
        logger.debug("Debug mode enabled - verbose registry logging active")


def initialize_observability(config: ObservabilityConfig | None = None):
    """Initialize Logfire, defaulting to the preset for the current environment."""
    global _config  # noqa: PLW0603
    _config = config or get_environment_config()

    if not _config.enabled:
        logger.debug("Observability disabled via configuration")
        return

    # Without a token, only ship data when one turns up in the environment
    send_to_logfire = "if-token-present" if _config.send_to_logfire else False

    logfire.configure(
        token=_config.token or None,
        service_name=_config.project_name,
        environment=_config.environment,
        send_to_logfire=send_to_logfire,
        console=None if _config.console_output else False,
    )


__all__ = [
    "LOG_FORMAT",
    "ObservabilityConfig",
    "configure_logging",
    "initialize_observability",
    "logfire",
]
