"""
================================================================================
Root Pytest Configuration
================================================================================

Registers the suite-wide markers and routes library logs through the
configured loguru setup.

================================================================================
"""

import pytest

from playwright_contrib import __version__
from playwright_contrib.common import init_logger


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - core behavior"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "unit: Driver-free tests against in-memory fakes"
    )
    config.addinivalue_line(
        "markers", "browser: Tests that launch a real Chromium browser"
    )


@pytest.fixture(scope="session", autouse=True)
def _library_logging():
    """Initialise loguru once per session from config/contrib.yaml."""
    init_logger()
    yield


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        f"playwright-contrib {__version__}",
        "=" * 60,
        "",
    ]
