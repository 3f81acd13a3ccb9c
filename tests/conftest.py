"""
Shared pytest fixtures for the TodoMVC / jsonplaceholder test suite.

This module contains fixtures that are shared across all test modules.
Fixtures follow the Arrange-Act-Assert (AAA) pattern and ensure
test isolation by providing fresh data for each test.

Key Concepts Demonstrated:
- Fixture scopes (function, session)
- Test data factories
- Suite-wide logging configuration
"""

import logging
from collections.abc import Callable
from typing import Any

import pytest

from shared.test_helpers import make_post_payload, make_todos

# Configure logging once for the whole run
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)


# -----------------------------------------------------------------------------
# Test Data Factory Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def todo_factory() -> Callable[..., list[dict[str, Any]]]:
    """
    Factory fixture for randomized todo records.

    Returns:
        Function that builds ``count`` todos, with optional field overrides.

    Example:
        def test_something(todo_factory):
            todos = todo_factory(3, completed=True)
            assert all(todo["completed"] for todo in todos)
    """

    def _make(count: int = 1, **overrides: Any) -> list[dict[str, Any]]:
        return make_todos(count, **overrides)

    return _make


@pytest.fixture
def post_payload() -> dict[str, Any]:
    """Provide a random, valid body for ``POST /posts``."""
    return make_post_payload(user_id=1)
