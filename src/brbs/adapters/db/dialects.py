"""Database backends the SQL document store has migrations for."""

from __future__ import annotations

from enum import Enum

from sqlalchemy.engine import URL, make_url


class Backend(str, Enum):
    """SQLAlchemy dialect names of the supported document store backends."""

    POSTGRES = "postgresql"
    SQLITE = "sqlite"


_ALIASES = {"postgres": Backend.POSTGRES, "pg": Backend.POSTGRES}


def backend_of(name: str | None) -> Backend | None:
    """Map a dialect or driver name such as ``"postgresql+psycopg"`` to a Backend.

    Returns None for anything else (MySQL, empty strings, ...).
    """
    base = (name or "").strip().lower().split("+", 1)[0]
    if base in _ALIASES:
        return _ALIASES[base]
    try:
        return Backend(base)
    except ValueError:
        return None


def backend_of_url(url: str | URL) -> Backend | None:
    """Backend of a SQLAlchemy URL or URL string."""
    return backend_of(make_url(str(url)).drivername)
