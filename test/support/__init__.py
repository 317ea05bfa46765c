"""Shared helpers for the test suites: test settings and seeding factories."""
