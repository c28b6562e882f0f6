"""Test configuration and fixtures for the library lending registry.

Fixtures here give every test:
1. Isolated configuration - a clean environment and a fresh config singleton
2. Fresh registries - no state shared between tests
3. Local-only observability - logfire never ships data from a test run
"""

import os
from collections.abc import Generator

import pytest

from library_lending.config import LendingConfig, reset_config
from library_lending.models import Book, Patron
from library_lending.observability import initialize_observability
from library_lending.observability.config import ObservabilityConfig
from library_lending.registry import LendingRegistry

# === Observability ===


@pytest.fixture(scope="session", autouse=True)
def local_observability():
    """Configure logfire once for the session with nothing sent anywhere."""
    initialize_observability(
        ObservabilityConfig(enabled=True, send_to_logfire=False, console_output=False)
    )


# === Configuration Fixtures ===


@pytest.fixture
def lending_config() -> Generator[LendingConfig, None, None]:
    """Provide the default lending policy, independent of the environment."""
    reset_config()

    config = LendingConfig(_env_file=None, min_copies_to_lend=2, max_books_per_patron=3)

    yield config

    reset_config()


@pytest.fixture
def strict_config() -> Generator[LendingConfig, None, None]:
    """Provide a tighter policy: floor of 4 copies, one loan per patron."""
    reset_config()

    config = LendingConfig(_env_file=None, min_copies_to_lend=4, max_books_per_patron=1)

    yield config

    reset_config()


# === Environment Fixtures ===


@pytest.fixture
def clean_env() -> Generator[None, None, None]:
    """Provide a clean environment without LIBRARY_LENDING_* variables."""
    original_env = os.environ.copy()

    for key in list(os.environ.keys()):
        if key.startswith("LIBRARY_LENDING_"):
            del os.environ[key]

    yield

    os.environ.clear()
    os.environ.update(original_env)


# === Registry Fixtures ===


@pytest.fixture
def registry(lending_config: LendingConfig) -> LendingRegistry:
    """Provide an empty registry with the default policy."""
    return LendingRegistry(lending_config)


@pytest.fixture
def patron() -> Patron:
    return Patron(id=111, name="Ana Souza", address="Rua das Flores, 10")


@pytest.fixture
def other_patron() -> Patron:
    return Patron(id=222, name="Bruno Lima", address="Av. Central, 200")


@pytest.fixture
def book() -> Book:
    return Book(isbn="9788535914849", title="Dom Casmurro", author="Machado de Assis")


@pytest.fixture
def books() -> list[Book]:
    """Provide four distinct book keys."""
    return [
        Book(isbn="9780743273565", title="The Great Gatsby", author="F. Scott Fitzgerald"),
        Book(isbn="9780061120084", title="To Kill a Mockingbird", author="Harper Lee"),
        Book(isbn="9780451524935", title="1984", author="George Orwell"),
        Book(isbn="9780141439518", title="Pride and Prejudice", author="Jane Austen"),
    ]


@pytest.fixture
def stocked_registry(
    registry: LendingRegistry, patron: Patron, books: list[Book]
) -> LendingRegistry:
    """Provide a registry with ``patron`` registered and 10 copies of each book."""
    registry.register_patron(patron)
    for item in books:
        registry.acquire_copies(item, 10)
    return registry


# === Cleanup Fixtures ===


@pytest.fixture(autouse=True)
def cleanup_after_test():
    """Reset the configuration singleton after every test."""
    yield

    reset_config()
