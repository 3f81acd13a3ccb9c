"""
Page Object Model (POM) classes for the TodoMVC demo.

This package keeps selectors, waits and fallbacks out of the test
modules. Tests talk to ``TodoPage``; only this package talks to
Playwright locators.
"""

from pages.base_page import BasePage
from pages.errors import (
    InteractionError,
    NavigationError,
    ReadinessTimeout,
    StateAssertionError,
)
from pages.models import FilterTier, ReadinessReport, ReadinessState, TodoFilter, WaitOutcome
from pages.todo_page import TodoPage

__all__ = [
    "BasePage",
    "TodoPage",
    "InteractionError",
    "NavigationError",
    "ReadinessTimeout",
    "StateAssertionError",
    "FilterTier",
    "ReadinessReport",
    "ReadinessState",
    "TodoFilter",
    "WaitOutcome",
]
