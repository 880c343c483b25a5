"""Default `unit` mark for tests under `tests/unit/`."""

from pathlib import Path

import pytest

from tests.fixtures.markers import mark_items_under

# pylint: disable=unused-argument


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    mark_items_under(Path(__file__).parent.resolve(), "unit", items)
