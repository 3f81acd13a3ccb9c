"""Exceptions raised by page objects when a blocking wait cannot be satisfied."""

from __future__ import annotations


class InteractionError(Exception):
    """Base class for failures surfaced by the page objects."""


class NavigationError(InteractionError):
    """The application entry point could not be loaded."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to load {url}: {reason}")


class ReadinessTimeout(InteractionError):
    """The mandatory readiness gate was not met within its bound."""

    def __init__(self, signal: str, timeout_ms: int):
        self.signal = signal
        self.timeout_ms = timeout_ms
        super().__init__(f"App not ready: {signal} not visible after {timeout_ms}ms")


class StateAssertionError(InteractionError, AssertionError):
    """
    An expected UI state transition did not happen in time.

    Also an ``AssertionError`` so pytest reports it as a failed expectation
    rather than an error in the test itself.
    """

    def __init__(self, task_label: str, expected_state: str, timeout_ms: int):
        self.task_label = task_label
        self.expected_state = expected_state
        self.timeout_ms = timeout_ms
        super().__init__(
            f"Task {task_label!r} did not become {expected_state} within {timeout_ms}ms"
        )
