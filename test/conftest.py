"""
Test Configuration and Fixtures

Environment setup MUST happen before any application import: the logging
config reads TEST_LOG_DIR and settings at import time.
"""

import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)
    os.environ.setdefault('SERVICE_NAME', 'ticket-purchase-test')


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from collections.abc import Generator  # noqa: E402

import pytest  # noqa: E402

from src.platform.config.di import container  # noqa: E402


@pytest.fixture(autouse=True)
def reset_container() -> Generator[None, None, None]:
    """Drop provider overrides and cached singletons between tests"""
    yield
    container.reset_override()
    container.reset_singletons()
