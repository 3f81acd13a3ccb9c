"""Playwright fixtures for TodoMVC E2E tests."""

from __future__ import annotations

from collections.abc import Callable, Generator

import pytest
from playwright.sync_api import Browser, BrowserContext, Page, Playwright
from playwright.sync_api import Error as PlaywrightError

from config import Config
from pages.base_page import BasePage
from pages.todo_page import TodoPage
from shared.live_stack import require_live_target


@pytest.fixture(scope="session")
def todomvc_url() -> str:
    """Entry point of the demo app; skips the suite when offline."""
    return require_live_target(Config.TODOMVC_URL, suite_name="E2E")


@pytest.fixture(scope="session")
def browser_context_args(browser_context_args: dict) -> dict:
    return {
        **browser_context_args,
        "viewport": {"width": 1280, "height": 720},
        "ignore_https_errors": True,
    }


@pytest.fixture(scope="function")
def context(
    browser: Browser, browser_context_args: dict
) -> Generator[BrowserContext, None, None]:
    context = browser.new_context(**browser_context_args)
    yield context
    context.close()


@pytest.fixture(scope="function")
def page(context: BrowserContext) -> Generator[Page, None, None]:
    page = context.new_page()
    yield page
    page.close()


@pytest.fixture
def todo_page(page: Page, todomvc_url: str) -> TodoPage:
    """TodoMVC opened and ready, with an empty list."""
    todo = TodoPage(page, todomvc_url)
    todo.open()
    return todo


@pytest.fixture
def device_todo_page_factory(
    browser: Browser,
    browser_name: str,
    playwright: Playwright,
    todomvc_url: str,
) -> Generator[Callable[[str], TodoPage], None, None]:
    """
    Factory for TodoMVC pages emulating a mobile device.

    Each call opens a new browser context with the device's descriptor;
    every context is closed after the test.
    """
    if browser_name == "firefox":
        pytest.skip("Mobile emulation not supported in Firefox")

    contexts: list[BrowserContext] = []

    def _open(device_name: str) -> TodoPage:
        descriptor = dict(playwright.devices[device_name])
        descriptor.pop("default_browser_type", None)
        device_context = browser.new_context(**descriptor)
        contexts.append(device_context)

        todo = TodoPage(device_context.new_page(), todomvc_url)
        todo.open()
        return todo

    yield _open

    for device_context in contexts:
        device_context.close()


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Capture screenshot on UI test failure."""
    outcome = yield
    report = outcome.get_result()

    if report.when == "call" and report.failed:
        screenshot_page = item.funcargs.get("todo_page")
        page = item.funcargs.get("page")
        if screenshot_page is None and page is not None:
            screenshot_page = BasePage(page, page.url)
        if screenshot_page is not None:
            try:
                screenshot_path = screenshot_page.take_screenshot(item.name)
                print(f"\nScreenshot saved: {screenshot_path}")
            except PlaywrightError as exc:
                print(f"\nFailed to capture screenshot: {exc.message}")
