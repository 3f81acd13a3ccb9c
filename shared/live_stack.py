"""Reachability helpers for suites that run against public demo services."""

from __future__ import annotations

import logging
import time

import pytest
import requests

from config import Config

logger = logging.getLogger(__name__)


def is_reachable(url: str, timeout: int = 5) -> bool:
    """Return True when ``url`` answers with any non-5xx status."""
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as exc:
        logger.info(f"{url} unreachable: {exc}")
        return False
    return response.status_code < 500


def wait_for_reachable(url: str, timeout: int = 30, interval: int = 1) -> None:
    """
    Poll ``url`` until it answers or raise after ``timeout`` seconds.

    The target is always probed at least once, so ``timeout=0`` means a
    single check.
    """
    deadline = time.time() + timeout
    while True:
        if is_reachable(url):
            return
        if time.time() >= deadline:
            raise RuntimeError(f"{url} not reachable after {timeout}s")
        time.sleep(interval)


def require_live_target(
    url: str, *, suite_name: str, timeout: int = Config.LIVE_TARGET_TIMEOUT
) -> str:
    """
    Return ``url`` once it can be reached, otherwise skip the calling test.

    The targets are third-party services; a sandboxed or offline run
    should report skips rather than failures. Brief outages are ridden out
    by polling for up to ``timeout`` seconds.
    """
    try:
        wait_for_reachable(url, timeout=timeout)
    except RuntimeError as exc:
        pytest.skip(f"{exc}; {suite_name} tests need network access")
    return url
