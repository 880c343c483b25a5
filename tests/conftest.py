"""Global pytest fixtures for BRBS."""

from __future__ import annotations

pytest_plugins = [
    "tests.fixtures.sqlite",
    "tests.fixtures.datagen",
    "tests.fixtures.stores",
]
