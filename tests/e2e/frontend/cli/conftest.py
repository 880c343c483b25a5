"""Fixtures for end-to-end tests of the ``brbs`` command line.

Provides a test-only `log-demo` command that emits log records at every
level, a CliRunner whose environment is isolated from the developer's BRBS
settings, and containers bootstrapped over the packaged fixtures.
"""

import logging
from collections.abc import Iterator

import click
import pytest
from click.testing import CliRunner

from brbs import config
from brbs.bootstrap import AppContainer, bootstrap
from brbs.entrypoints.cli.main import brbs

# pylint: disable=redefined-outer-name

ISOLATED_ENV = {
    config.DB_URL_ENV: None,
    config.DATA_DIR_ENV: None,
    config.MEMBER_ID_ENV: None,
    "BRBS_LOG_PATH": "brbs.log",
    "COLUMNS": "200",
}


@click.command()
def log_demo():
    """Emit one record per level on a brbs logger and a third-party logger."""
    logger = logging.getLogger("brbs.demo")
    logger.debug("brbs debug message")
    logger.info("brbs info message")
    logger.warning("brbs warning message")
    logger.error("brbs error message")
    logger.critical("brbs critical message")
    other = logging.getLogger("some.thirdparty")
    other.debug("third-party debug message")
    other.info("third-party info message")
    other.warning("third-party warning message")
    logger.debug("brbs final debug message")


@pytest.fixture
def registered_log_demo():
    """Attach `log-demo` to the root group for one test."""
    brbs.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        # cloup-based groups also index commands by section
        brbs.commands.pop("log-demo", None)
        for section in [getattr(brbs, "_default_section", None), *getattr(brbs, "_sections", [])]:
            getattr(section, "commands", {}).pop("log-demo", None)


@pytest.fixture
def runner(monkeypatch: pytest.MonkeyPatch) -> Iterator[CliRunner]:
    """CliRunner with BRBS_* settings cleared and wide output for tables.

    Each test runs in its own empty working directory, where the flight
    recorder writes `brbs.log`.
    """
    for name in (config.DB_URL_ENV, config.DATA_DIR_ENV, config.MEMBER_ID_ENV):
        monkeypatch.delenv(name, raising=False)
    cli_runner = CliRunner(env=ISOLATED_ENV)
    with cli_runner.isolated_filesystem():
        yield cli_runner


@pytest.fixture
def app(runner: CliRunner) -> AppContainer:  # pylint: disable=unused-argument
    """Container over the packaged fixtures with nobody signed in."""
    return bootstrap()


@pytest.fixture
def member_app(runner: CliRunner) -> AppContainer:  # pylint: disable=unused-argument
    """Container over the packaged fixtures acting as active member ``mem001``."""
    return bootstrap(member_id="mem001")
