"""Offline unit tests; Playwright objects are replaced with mocks."""
