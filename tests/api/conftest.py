"""
Fixtures for the jsonplaceholder API suite.

The whole suite is skipped when the service cannot be reached, so a
sandboxed run reports skips rather than connection errors.
"""

from __future__ import annotations

from collections.abc import Generator

import pytest

from config import get_api_base_url
from shared.api_client import ApiClient
from shared.live_stack import require_live_target


@pytest.fixture(scope="session")
def api_base_url() -> str:
    base_url = get_api_base_url()
    require_live_target(f"{base_url}/users", suite_name="API")
    return base_url


@pytest.fixture
def api_client(api_base_url: str) -> Generator[ApiClient, None, None]:
    """Fresh client per test; the session is closed afterwards."""
    with ApiClient(base_url=api_base_url) as client:
        yield client
