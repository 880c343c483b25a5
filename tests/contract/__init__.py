"""Contract tests.

Each test runs once per DocumentStore backend (see the ``store`` fixture) so
the in-memory and SQL configurations stay interchangeable.
"""
