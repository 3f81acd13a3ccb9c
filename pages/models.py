"""
Value types used by the TodoMVC page objects.

None of these hold element references: they describe outcomes and
targets so the page objects can report what happened without raising
for conditions that are allowed to be absent.

Key Concepts Demonstrated:
- ``str, Enum`` inheritance for readable log output
- Explicit result values instead of swallowed exceptions
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class WaitOutcome(str, Enum):
    """Result of a best-effort wait or side effect."""

    OK = "ok"
    TIMED_OUT = "timed_out"
    DENIED = "denied"


class ReadinessState(str, Enum):
    """Lifecycle of the primary readiness gate for one navigation."""

    NOT_READY = "not_ready"
    PRIMARY_PENDING = "primary_pending"
    READY = "ready"


class FilterTier(str, Enum):
    """Strategy that resolved a filter link."""

    ROLE = "role"
    SELECTOR = "selector"
    SCRIPT = "script"


class TodoFilter(Enum):
    """
    Filter links in the TodoMVC footer.

    Each member carries the accessible link name and the structural
    selector used when the accessible lookup does not resolve in time.
    """

    ALL = ("All", "a[href='#/']")
    ACTIVE = ("Active", "a[href='#/active']")
    COMPLETED = ("Completed", "a[href='#/completed']")

    def __init__(self, label: str, selector: str):
        self.label = label
        self.selector = selector


@dataclass
class ReadinessReport:
    """Outcome of each optional gate checked by ``wait_for_app_ready``."""

    state: ReadinessState = ReadinessState.NOT_READY
    optional: dict[str, WaitOutcome] = field(default_factory=dict)

    @property
    def ready(self) -> bool:
        return self.state is ReadinessState.READY
