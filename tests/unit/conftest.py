"""
Playwright doubles for page object unit tests.

The page double hands out one ``MagicMock`` locator per distinct lookup
(placeholder, role + name, CSS selector, test id, list item text), so a
test can configure and inspect each element the page object touches
without a browser.

Key SDET Concepts Demonstrated:
- ``MagicMock(spec=...)`` doubles for a third-party API
- Call-count instrumentation on collaborators
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from playwright.sync_api import Locator, Page

from pages.todo_page import TodoPage


class LocatorRegistry:
    """Creates and remembers one mock locator per lookup key."""

    def __init__(self):
        self._locators: dict[tuple, MagicMock] = {}

    def get(self, *key) -> MagicMock:
        if key not in self._locators:
            self._locators[key] = MagicMock(spec=Locator, name=repr(key))
        return self._locators[key]

    def todo_input(self) -> MagicMock:
        return self.get("placeholder", "What needs to be done?")

    def clear_completed(self) -> MagicMock:
        return self.get("role", "button", "Clear completed")

    def filters_nav(self) -> MagicMock:
        return self.get("css", "ul.filters")

    def role_link(self, name: str) -> MagicMock:
        return self.get("role", "link", name)

    def css(self, selector: str) -> MagicMock:
        return self.get("css", selector)

    def task_matches(self, label: str) -> MagicMock:
        """Locator for every list item containing ``label`` (before ``nth``)."""
        return self.get("task", label)

    def task_item(self, label: str) -> MagicMock:
        """Locator for the selected list item containing ``label``."""
        return self.task_matches(label).nth.return_value


@pytest.fixture
def locators() -> LocatorRegistry:
    return LocatorRegistry()


@pytest.fixture
def mock_page(locators: LocatorRegistry) -> MagicMock:
    """Page double whose lookups resolve through ``locators``."""
    page = MagicMock(spec=Page)
    page.get_by_placeholder.side_effect = lambda text, **kwargs: locators.get("placeholder", text)
    page.get_by_role.side_effect = lambda role, **kwargs: locators.get("role", role, kwargs.get("name"))
    page.get_by_test_id.side_effect = lambda test_id: locators.get("testid", test_id)
    page.locator.side_effect = lambda selector, **kwargs: locators.get("css", selector)

    list_items = locators.get("testid", "todo-item")
    list_items.filter.side_effect = lambda has_text=None, **kwargs: locators.task_matches(has_text)

    page.goto.return_value = MagicMock(ok=True, status=200)
    page.evaluate.return_value = True
    return page


@pytest.fixture
def todo_page(mock_page: MagicMock) -> TodoPage:
    return TodoPage(mock_page)
