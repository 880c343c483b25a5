"""Integration tests.

Real SQLite databases on disk, Alembic upgrades and downgrades, and the
bootstrap wiring with environment configuration.
"""
