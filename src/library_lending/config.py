"""Configuration management for the library lending registry.

Lending policy limits are read from the environment so a deployment can
tune them without code changes:
1. Shelf floor - copies that must stay on the shelf before a loan is allowed
2. Loan limit - books a single patron may hold at once
3. Logging - level and debug switch
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Minimum number of copies of a book that must be on the shelf for a copy
# to be lent out. Exactly this many on the shelf is not enough.
MIN_COPIES_TO_LEND = 2

# Maximum number of books a patron may hold simultaneously.
MAX_BOOKS_PER_PATRON = 3


class LendingConfig(BaseSettings):
    """Lending policy and runtime configuration.

    Values come from keyword arguments, then ``LIBRARY_LENDING_*``
    environment variables, then a ``.env`` file, then the defaults below.
    """

    model_config = SettingsConfigDict(
        # Use LIBRARY_LENDING_ prefix for all env vars
        env_prefix="LIBRARY_LENDING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        # Other services may share the .env file
        extra="ignore",
    )

    # === Lending Policy ===

    min_copies_to_lend: int = Field(
        default=MIN_COPIES_TO_LEND,
        description="Copies that must remain on the shelf; a loan needs more than this",
        ge=0,
    )

    max_books_per_patron: int = Field(
        default=MAX_BOOKS_PER_PATRON,
        description="Maximum number of simultaneous loans per patron",
        ge=1,
    )

    # === Development Configuration ===

    debug: bool = Field(
        default=False,
        description="Enable debug logging for registry operations",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR)$",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept lowercase level names from the environment."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    # === Computed Properties ===

    @property
    def effective_log_level(self) -> str:
        """Level actually applied; debug mode always wins."""
        return "DEBUG" if self.debug else self.log_level

    @property
    def policy(self) -> dict[str, int]:
        """Lending limits as a plain mapping, used in reports and log lines."""
        return {
            "min_copies_to_lend": self.min_copies_to_lend,
            "max_books_per_patron": self.max_books_per_patron,
        }


# === Global Configuration Instance ===


class _ConfigStore:
    """Internal storage for configuration singleton."""

    _instance: LendingConfig | None = None


def get_config() -> LendingConfig:
    """Get or create the global configuration instance."""
    if _ConfigStore._instance is None:  # type: ignore[reportPrivateUsage]
        _ConfigStore._instance = LendingConfig()  # type: ignore[reportPrivateUsage]
    return _ConfigStore._instance  # type: ignore[reportPrivateUsage]


def reset_config() -> None:
    """Reset configuration (useful for testing)."""
    _ConfigStore._instance = None  # type: ignore[reportPrivateUsage]
