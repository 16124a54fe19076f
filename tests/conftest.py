"""Root test fixtures shared across all test types.

This conftest contains fixtures that can be used by both unit and integration tests.
Store-backed fixtures are in tests/integration/conftest.py.
"""

import os

# Point the app at an in-memory store before any app imports
os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

# ruff: noqa: E402 - Imports must be after env var setup
import pytest
import structlog
from structlog.testing import CapturingLogger

from src.app.core.config import get_settings
from src.app.core.logging import clear_request_context

# Clear settings cache to ensure test environment variables are picked up
get_settings.cache_clear()


@pytest.fixture
def capturing_logger():
    """Route structlog output into a CapturingLogger for assertions."""
    cap_logger = CapturingLogger()
    old_config = structlog.get_config()

    structlog.configure(
        processors=[structlog.contextvars.merge_contextvars],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=lambda *args, **kwargs: cap_logger,
        cache_logger_on_first_use=False,
    )

    clear_request_context()
    yield cap_logger
    clear_request_context()
    structlog.configure(**old_config)
