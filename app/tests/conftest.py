"""Shared pytest configuration."""

import pytest

from i18nkit.logging import configure_logging


@pytest.fixture(autouse=True, scope="session")
def silence_logging():
    """Configure structlog once with output suppressed."""
    configure_logging()
    yield
