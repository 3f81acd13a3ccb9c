"""
Browser test package for the TodoMVC demo.

This package contains Playwright-based browser tests and demonstrates:
- Page Object Model (POM) pattern
- Readiness gating before every interaction
- Filter navigation with fallbacks
- Request interception with page.route
"""
