"""
TodoMVC Page Object.

This page object encapsulates every interaction with the TodoMVC demo:
adding, completing, editing and deleting tasks, switching filters and
clearing completed tasks.

The demo renders asynchronously, so the page object follows two rules:

* Every mutating action first passes the primary readiness gate (the new
  todo input is visible). Optional UI (filters, "Clear completed") is
  waited for with short bounds and its absence is reported, not raised.
* Filter links are resolved through an ordered list of lookups, from the
  accessibility tree down to a script-level click, stopping at the first
  one that becomes visible.

Locators are built on access, never cached, because the list is
re-rendered on every change and after every navigation.

Key Concepts Demonstrated:
- Readiness gating with mandatory and best-effort signals
- Tiered fallback for element lookup
- Role, label and placeholder locator strategies
- Typed failures for blocking waits
"""

from __future__ import annotations

import logging
import re

from playwright.sync_api import Locator, Page, expect

from config import Config
from pages.base_page import BasePage
from pages.errors import ReadinessTimeout, StateAssertionError
from pages.models import (
    FilterTier,
    ReadinessReport,
    ReadinessState,
    TodoFilter,
    WaitOutcome,
)

logger = logging.getLogger(__name__)

NEW_TODO_PLACEHOLDER = "What needs to be done?"
TOGGLE_LABEL = "Toggle Todo"
TASK_ROW_TEST_ID = "todo-item"
PRIMARY_SIGNAL = "new todo input"


class TodoPage(BasePage):
    """
    Page object for the TodoMVC application.

    Provides methods for:
    - Opening and resetting the app
    - Task actions (add, complete, toggle, edit, delete)
    - Filter navigation (All, Active, Completed)
    - Bulk operations and visibility assertions

    Tasks are identified by their label text. Labels are not unique in the
    app; when several entries share a label, ``index`` selects among them
    in document order (first match by default).

    Attributes:
        readiness: State of the primary gate for the current navigation.
    """

    def __init__(self, page: Page, base_url: str = Config.TODOMVC_URL):
        """
        Initialize TodoPage.

        Args:
            page: Playwright page instance.
            base_url: Entry point of the TodoMVC app.
        """
        super().__init__(page, base_url)
        self.readiness = ReadinessState.NOT_READY

    # -------------------------------------------------------------------------
    # Page Locators
    # -------------------------------------------------------------------------

    @property
    def todo_input(self) -> Locator:
        """Locator for the new todo input."""
        return self.page.get_by_placeholder(NEW_TODO_PLACEHOLDER)

    @property
    def clear_completed_button(self) -> Locator:
        """Locator for the 'Clear completed' button."""
        return self.page.get_by_role("button", name="Clear completed")

    @property
    def filters_nav(self) -> Locator:
        """Locator for the filter links container."""
        return self.page.locator("ul.filters")

    @property
    def todo_count(self) -> Locator:
        """Locator for the 'N items left' counter."""
        return self.page.get_by_test_id("todo-count")

    @property
    def task_rows(self) -> Locator:
        """Locator for every task entry; footer filter items are excluded."""
        return self.page.get_by_test_id(TASK_ROW_TEST_ID)

    @property
    def task_labels(self) -> Locator:
        """Locator for every task label in the current view."""
        return self.page.locator(".todo-list li label")

    def get_task_item(self, task_label: str, index: int = 0) -> Locator:
        """
        Get locator for the list entry with the given label.

        Args:
            task_label: Text of the task.
            index: Which match to use when labels repeat.

        Returns:
            Locator for the list item; resolving it may match nothing.
        """
        return self.task_rows.filter(has_text=task_label).nth(index)

    # -------------------------------------------------------------------------
    # Navigation & Lifecycle
    # -------------------------------------------------------------------------

    def open(self) -> ReadinessReport:
        """
        Navigate to the app and wait until it is ready.

        Returns:
            Readiness report for the loaded page.

        Raises:
            NavigationError: If the entry point cannot be loaded.
            ReadinessTimeout: If the new todo input never shows up.
        """
        self.readiness = ReadinessState.NOT_READY
        self.navigate_to()
        return self.wait_for_app_ready()

    def reset(self) -> WaitOutcome:
        """
        Re-open the app with empty persisted state.

        The app keeps its todos in ``localStorage``. If the browser refuses
        storage access the app is left as opened and the refusal is
        returned.

        Returns:
            Outcome of clearing storage.
        """
        self.open()
        outcome = self.clear_local_storage()
        if outcome is WaitOutcome.DENIED:
            logger.info("Reset kept existing storage; continuing with opened app")
            return outcome

        self.readiness = ReadinessState.NOT_READY
        self.reload()
        self.wait_for_app_ready()
        return outcome

    def wait_for_app_ready(self) -> ReadinessReport:
        """
        Wait for the app to become interactive.

        The new todo input is the only mandatory signal. Network idle, the
        filters nav and the 'Clear completed' button are each given a short
        bound; the button in particular is absent until a task is completed.

        Returns:
            Report with the state and the outcome of each optional gate.

        Raises:
            ReadinessTimeout: If the new todo input is not visible in time.
        """
        self.readiness = ReadinessState.PRIMARY_PENDING
        self._require_ready()

        report = ReadinessReport(state=self.readiness)
        report.optional["networkidle"] = self.wait_for_network_idle(
            Config.NETWORK_IDLE_TIMEOUT_MS
        )
        report.optional["filters_nav"] = self.wait_for_element(
            self.filters_nav, Config.FILTERS_NAV_TIMEOUT_MS
        )
        report.optional["clear_completed"] = self.wait_for_element(
            self.clear_completed_button, Config.CLEAR_COMPLETED_TIMEOUT_MS
        )
        logger.debug(f"App ready; optional gates: {report.optional}")
        return report

    def _require_ready(self) -> None:
        """Pass the primary gate or raise ``ReadinessTimeout``."""
        outcome = self.wait_for_element(self.todo_input, Config.PRIMARY_READY_TIMEOUT_MS)
        if outcome is not WaitOutcome.OK:
            self.readiness = ReadinessState.NOT_READY
            raise ReadinessTimeout(PRIMARY_SIGNAL, Config.PRIMARY_READY_TIMEOUT_MS)
        self.readiness = ReadinessState.READY

    # -------------------------------------------------------------------------
    # Task Actions
    # -------------------------------------------------------------------------

    def add_task(self, task_text: str) -> "TodoPage":
        """
        Add a task by typing into the input and pressing Enter.

        Args:
            task_text: Text of the new task.

        Returns:
            Self for method chaining.
        """
        self._require_ready()
        self.todo_input.fill(task_text)
        self.page.keyboard.press("Enter")
        return self

    def complete_task(self, task_label: str, index: int = 0) -> "TodoPage":
        """
        Check a task's toggle and wait until it is marked completed.

        Args:
            task_label: Text of the task.
            index: Which match to use when labels repeat.

        Returns:
            Self for method chaining.

        Raises:
            StateAssertionError: If the entry never gets the ``completed`` class.
        """
        self._require_ready()
        item = self.get_task_item(task_label, index)
        item.get_by_label(TOGGLE_LABEL).check()

        completed = item.and_(self.page.locator("li.completed"))
        outcome = self.attempt(
            f"completed {task_label!r}",
            lambda: completed.wait_for(
                state="attached", timeout=Config.STATE_CHANGE_TIMEOUT_MS
            ),
        )
        if outcome is not WaitOutcome.OK:
            raise StateAssertionError(task_label, "completed", Config.STATE_CHANGE_TIMEOUT_MS)
        return self

    def toggle_task(self, task_label: str, index: int = 0) -> "TodoPage":
        """
        Click a task's toggle without waiting for the new state.

        Use ``complete_task`` when the completed state must be observed.

        Args:
            task_label: Text of the task.
            index: Which match to use when labels repeat.

        Returns:
            Self for method chaining.
        """
        self._require_ready()
        self.get_task_item(task_label, index).get_by_label(TOGGLE_LABEL).click()
        return self

    def delete_task(self, task_label: str, index: int = 0) -> "TodoPage":
        """
        Delete a task via its destroy button.

        The button is only rendered on hover, so the entry is hovered first.

        Args:
            task_label: Text of the task.
            index: Which match to use when labels repeat.

        Returns:
            Self for method chaining.
        """
        self._require_ready()
        item = self.get_task_item(task_label, index)
        item.hover()
        item.locator("button.destroy").click()
        return self

    def edit_task(self, old_label: str, new_text: str, index: int = 0) -> "TodoPage":
        """
        Replace a task's text through the inline editor.

        Args:
            old_label: Current text of the task.
            new_text: Text to submit; the app decides how to normalise it.
            index: Which match to use when labels repeat.

        Returns:
            Self for method chaining.
        """
        self._require_ready()
        item = self.get_task_item(old_label, index)
        item.locator("label").dblclick()

        editor = item.locator("input.edit")
        editor.fill(new_text)
        editor.press("Enter")
        return self

    # -------------------------------------------------------------------------
    # Filter Navigation
    # -------------------------------------------------------------------------

    def go_to_all(self) -> FilterTier:
        """Show all tasks."""
        return self.go_to_filter(TodoFilter.ALL)

    def go_to_active(self) -> FilterTier:
        """Show tasks that are not completed."""
        return self.go_to_filter(TodoFilter.ACTIVE)

    def go_to_completed(self) -> FilterTier:
        """Show completed tasks."""
        return self.go_to_filter(TodoFilter.COMPLETED)

    def go_to_filter(self, todo_filter: TodoFilter) -> FilterTier:
        """
        Activate a filter link, falling back through less specific lookups.

        Lookups are tried in order: accessible link name, then the link's
        ``href`` selector, each abandoned only when its visibility wait
        times out. A click failure after a successful wait propagates. If
        neither becomes visible the link is clicked from page script.

        Args:
            todo_filter: Filter to activate.

        Returns:
            The lookup that activated the link.
        """
        lookups = (
            (
                FilterTier.ROLE,
                self.page.get_by_role("link", name=todo_filter.label),
                Config.ROLE_LINK_TIMEOUT_MS,
            ),
            (
                FilterTier.SELECTOR,
                self.page.locator(todo_filter.selector),
                Config.SELECTOR_LINK_TIMEOUT_MS,
            ),
        )
        for tier, link, timeout in lookups:
            if self._click_when_visible(link, timeout) is WaitOutcome.OK:
                return tier
            logger.warning(
                f"{todo_filter.label} filter not visible via {tier.value} lookup "
                f"after {timeout}ms"
            )

        if not self.click_by_script(todo_filter.selector):
            logger.warning(f"No element matches {todo_filter.selector}; script click was a no-op")
        return FilterTier.SCRIPT

    def _click_when_visible(self, locator: Locator, timeout: int) -> WaitOutcome:
        outcome = self.wait_for_element(locator, timeout)
        if outcome is WaitOutcome.OK:
            locator.click()
        return outcome

    # -------------------------------------------------------------------------
    # Bulk Operations
    # -------------------------------------------------------------------------

    def create_and_complete_tasks(self, *task_labels: str) -> "TodoPage":
        """
        Add and complete each task in order.

        Afterwards waits (best effort) for the footer controls that appear
        once something is completed.

        Args:
            *task_labels: Texts of the tasks to create.

        Returns:
            Self for method chaining.
        """
        for task_label in task_labels:
            self.add_task(task_label)
            self.complete_task(task_label)

        self.wait_for_element(self.clear_completed_button, Config.BULK_INDICATOR_TIMEOUT_MS)
        self.wait_for_element(self.filters_nav, Config.BULK_INDICATOR_TIMEOUT_MS)
        return self

    def clear_completed(self) -> bool:
        """
        Click 'Clear completed' if it is shown.

        Returns:
            True if the button was clicked, False if there was nothing to clear.
        """
        self._require_ready()
        if not self.clear_completed_button.is_visible():
            logger.debug("Clear completed not shown; nothing to clear")
            return False
        self.clear_completed_button.click()
        return True

    # -------------------------------------------------------------------------
    # Data Extraction
    # -------------------------------------------------------------------------

    def get_all_task_titles(self) -> list[str]:
        """
        Get the raw text of every task in the current view.

        Text is returned as rendered into the DOM, without stripping, so
        callers can assert on the app's own whitespace handling.

        Returns:
            Task texts in document order.
        """
        return self.task_labels.all_text_contents()

    def get_items_left(self) -> int:
        """
        Get the number from the 'N items left' counter.

        Returns:
            Active task count, or 0 when the footer is not rendered.
        """
        if self.todo_count.count() == 0:
            return 0
        text = self.todo_count.text_content() or ""
        match = re.search(r"(\d+)", text)
        return int(match.group(1)) if match else 0

    # -------------------------------------------------------------------------
    # Assertions
    # -------------------------------------------------------------------------

    def expect_task_visible(self, task_label: str, index: int = 0) -> None:
        """Assert that a task is visible in the current view."""
        expect(self.get_task_item(task_label, index)).to_be_visible()

    def expect_task_not_visible(self, task_label: str, index: int = 0) -> None:
        """Assert that a task is hidden or absent in the current view."""
        expect(self.get_task_item(task_label, index)).to_be_hidden()
