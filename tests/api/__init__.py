"""API tests against the public jsonplaceholder service."""
