"""
Base Page class for the Page Object Model.

This class provides the primitives every page object builds on:
navigation, bounded waits that report an outcome instead of raising,
storage reset and a script-level click for elements that never become
visible to the accessibility tree.

Key Concepts Demonstrated:
- Base class pattern for code reuse
- Bounded waits returning ``WaitOutcome`` values
- Wrapping provider errors into suite-level exceptions
- Assertion helpers
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from pathlib import Path

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator, Page, Response, expect
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

from config import Config
from pages.errors import NavigationError
from pages.models import WaitOutcome

logger = logging.getLogger(__name__)

CLICK_BY_SELECTOR_SCRIPT = """
(selector) => {
    const el = document.querySelector(selector);
    if (el) el.click();
    return el !== null;
}
"""


class BasePage:
    """
    Base class for all page objects.

    Attributes:
        page: Playwright page instance.
        base_url: URL the page object navigates relative to.
    """

    def __init__(self, page: Page, base_url: str):
        """
        Initialize the base page.

        Args:
            page: Playwright page instance.
            base_url: URL the page object navigates relative to.
        """
        self.page = page
        self.base_url = base_url

    # -------------------------------------------------------------------------
    # Navigation Methods
    # -------------------------------------------------------------------------

    def navigate_to(self, path: str = "") -> Response | None:
        """
        Navigate to a path relative to the base URL.

        Args:
            path: URL path relative to base URL.

        Returns:
            The main resource response, or None for same-document navigation.

        Raises:
            NavigationError: If the page could not be loaded.
        """
        url = f"{self.base_url}{path}"
        logger.info(f"Navigating to {url}")
        try:
            response = self.page.goto(url)
        except PlaywrightError as exc:
            raise NavigationError(url, exc.message) from exc

        if response is not None and not response.ok:
            raise NavigationError(url, f"HTTP {response.status}")
        return response

    def reload(self) -> None:
        """Reload the current document."""
        self.page.reload()

    # -------------------------------------------------------------------------
    # Wait Methods
    # -------------------------------------------------------------------------

    def attempt(self, description: str, action: Callable[[], object]) -> WaitOutcome:
        """
        Run a bounded Playwright action and report how it ended.

        Only timeouts are converted; any other provider error propagates.

        Args:
            description: Short label used in log output.
            action: Zero-argument callable performing the wait.

        Returns:
            ``WaitOutcome.OK`` or ``WaitOutcome.TIMED_OUT``.
        """
        try:
            action()
        except PlaywrightTimeoutError:
            logger.debug(f"{description}: timed out")
            return WaitOutcome.TIMED_OUT
        return WaitOutcome.OK

    def wait_for_element(self, locator: Locator, timeout: int = 5000) -> WaitOutcome:
        """
        Wait for an element to be visible.

        Args:
            locator: Playwright locator for the element.
            timeout: Maximum wait time in milliseconds.

        Returns:
            Outcome of the wait.
        """
        return self.attempt(
            f"visible {locator}",
            lambda: locator.wait_for(state="visible", timeout=timeout),
        )

    def wait_for_network_idle(self, timeout: int = 5000) -> WaitOutcome:
        """
        Wait for the network to go idle.

        Args:
            timeout: Maximum wait time in milliseconds.

        Returns:
            Outcome of the wait.
        """
        return self.attempt(
            "networkidle",
            lambda: self.page.wait_for_load_state("networkidle", timeout=timeout),
        )

    # -------------------------------------------------------------------------
    # Script-level Helpers
    # -------------------------------------------------------------------------

    def clear_local_storage(self) -> WaitOutcome:
        """
        Clear ``localStorage`` for the current origin.

        Browsers refuse storage access on some origins (opaque or sandboxed
        documents); that refusal is reported as ``WaitOutcome.DENIED``.

        Returns:
            Outcome of the clear.
        """
        try:
            self.page.evaluate("() => localStorage.clear()")
        except PlaywrightError as exc:
            logger.info(f"localStorage clear denied: {exc.message}")
            return WaitOutcome.DENIED
        return WaitOutcome.OK

    def click_by_script(self, selector: str) -> bool:
        """
        Dispatch a DOM ``click()`` on the first element matching a selector.

        No visibility or actionability checks are made.

        Args:
            selector: CSS selector.

        Returns:
            True if an element was found and clicked.
        """
        return bool(self.page.evaluate(CLICK_BY_SELECTOR_SCRIPT, selector))

    # -------------------------------------------------------------------------
    # Assertion Methods
    # -------------------------------------------------------------------------

    def assert_url_contains(self, expected: str) -> None:
        """
        Assert that current URL contains expected string.

        Args:
            expected: String expected to be in the URL.
        """
        expect(self.page).to_have_url(re.compile(re.escape(expected)))

    # -------------------------------------------------------------------------
    # Utility Methods
    # -------------------------------------------------------------------------

    def take_screenshot(self, name: str) -> str:
        """
        Take a screenshot of the current page.

        Args:
            name: Name for the screenshot file; characters unsafe in file
                names (brackets, spaces, path separators) become underscores.

        Returns:
            Path to the saved screenshot.
        """
        screenshot_dir = Path(Config.SCREENSHOT_DIR)
        screenshot_dir.mkdir(parents=True, exist_ok=True)
        safe_name = re.sub(r"[^\w.-]+", "_", name).strip("_")
        path = str(screenshot_dir / f"{safe_name}.png")
        self.page.screenshot(path=path)
        return path
