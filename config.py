"""
Suite configuration module.

This module defines the targets and timing budgets used by the page
objects and the API client. Only the API base URL can be overridden from
the environment; everything else is fixed because the targets are public
demo services with a known shape.
"""

import os
from pathlib import Path

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent

DEFAULT_API_BASE_URL = "https://jsonplaceholder.typicode.com"


class Config:
    """Targets and timeouts shared by every suite."""

    TODOMVC_URL: str = "https://demo.playwright.dev/todomvc/#/"

    # Readiness gates (milliseconds)
    PRIMARY_READY_TIMEOUT_MS: int = 10_000
    NETWORK_IDLE_TIMEOUT_MS: int = 5_000
    FILTERS_NAV_TIMEOUT_MS: int = 1_000
    CLEAR_COMPLETED_TIMEOUT_MS: int = 1_000

    # Filter navigation tiers (milliseconds)
    ROLE_LINK_TIMEOUT_MS: int = 5_000
    SELECTOR_LINK_TIMEOUT_MS: int = 10_000

    # Post-action waits (milliseconds)
    STATE_CHANGE_TIMEOUT_MS: int = 5_000
    BULK_INDICATOR_TIMEOUT_MS: int = 5_000

    # HTTP (seconds)
    API_REQUEST_TIMEOUT: int = 10
    LIVE_TARGET_TIMEOUT: int = 5

    SCREENSHOT_DIR: Path = BASE_DIR / "test-results" / "screenshots"


def get_api_base_url() -> str:
    """
    Get the base URL for API requests.

    Reads ``API_BASE_URL`` on every call so a test can point the client at
    another environment without reloading this module.

    Returns:
        Base URL without a trailing slash.
    """
    return os.environ.get("API_BASE_URL", DEFAULT_API_BASE_URL).rstrip("/")
