"""Helpers shared by the UI, API and unit suites."""
