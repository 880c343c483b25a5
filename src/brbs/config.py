"""Configuration utilities for BRBS.

This module centralizes the environment variables and small helpers related to
application configuration.

| Variable          | Meaning                                              |
|-------------------|------------------------------------------------------|
| ``BRBS_DB_URL``   | SQLAlchemy URL of the remote document store          |
| ``BRBS_DATA_DIR`` | Directory of JSON fixtures overriding the packaged set |
| ``BRBS_MEMBER_ID``| Member acting on forum writes from the CLI           |
"""

import os
import sys
from importlib.resources import files
from pathlib import Path
from typing import TextIO

from alembic.config import Config

DB_URL_ENV = "BRBS_DB_URL"  # pragma: no mutate
DATA_DIR_ENV = "BRBS_DATA_DIR"  # pragma: no mutate
MEMBER_ID_ENV = "BRBS_MEMBER_ID"  # pragma: no mutate

ALEMBIC_URL_KEY = "sqlalchemy.url"  # pragma: no mutate
ALEMBIC_SCRIPT_LOCATION_KEY = "script_location"  # pragma: no mutate


class DatabaseUrlNotSetError(Exception):
    """Raised when the BRBS_DB_URL environment variable is not set."""


def get_db_url() -> str:
    """Get the database URL from the environment.

    Returns:
        The value of the `BRBS_DB_URL` environment variable.

    Raises:
        DatabaseUrlNotSetError: If `BRBS_DB_URL` is not set.
    """
    if not (url := os.environ.get(DB_URL_ENV)):
        raise DatabaseUrlNotSetError
    return url


def get_optional_db_url() -> str | None:
    """Return `BRBS_DB_URL`, or None when the in-memory store should be used."""
    return os.environ.get(DB_URL_ENV) or None


def get_data_dir() -> Path | None:
    """Return the fixture directory override, if `BRBS_DATA_DIR` is set."""
    if not (raw := os.environ.get(DATA_DIR_ENV)):
        return None
    return Path(raw).expanduser()


def get_member_id() -> str | None:
    """Return the id of the member acting from the CLI, if `BRBS_MEMBER_ID` is set."""
    return os.environ.get(MEMBER_ID_ENV) or None


def build_alembic_config(
    db_url: str | None = None, stdout: TextIO = sys.stdout
) -> Config:
    """Build an Alembic `Config` object for BRBS's migrations.

    Sets only Alembic "main" options:
    - `sqlalchemy.url` → the database URL you pass
    - `script_location` → BRBS's packaged Alembic scripts

    Args:
        db_url: SQLAlchemy database URL (e.g., `sqlite:///brbs.db`). Can be `None`
            only in contexts where Alembic won't need to connect to the DB.
        stdout: Text stream Alembic will write status lines to.

    Returns:
        An `alembic.config.Config` pointing to BRBS's migration scripts.
    """
    cfg = Config(stdout=stdout)
    if db_url is not None:
        cfg.set_main_option(ALEMBIC_URL_KEY, db_url)
    cfg.set_main_option(
        ALEMBIC_SCRIPT_LOCATION_KEY,
        str(files("brbs.adapters.db").joinpath("alembic")),
    )
    return cfg
