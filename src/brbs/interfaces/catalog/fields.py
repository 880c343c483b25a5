"""Helpers for reading typed fields out of loosely-typed documents.

Fixture and remote documents are hand-edited JSON, so values are coerced
leniently: missing keys fall back to defaults and numeric strings are accepted.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from brbs.interfaces.document_store import ID_KEY
from brbs.utils.timestamps import parse_timestamp

Document = Mapping[str, Any]


def doc_id(doc: Document) -> str:
    """Return the document identity as a string."""
    return str(doc[ID_KEY])


def text(doc: Document, key: str, default: str = "") -> str:
    value = doc.get(key)
    return default if value is None else str(value)


def optional_text(doc: Document, key: str) -> str | None:
    value = doc.get(key)
    if value is None or value == "":
        return None
    return str(value)


def optional_int(doc: Document, key: str) -> int | None:
    value = doc.get(key)
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def integer(doc: Document, key: str, default: int = 0) -> int:
    value = optional_int(doc, key)
    return default if value is None else value


def optional_float(doc: Document, key: str) -> float | None:
    value = doc.get(key)
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def flag(doc: Document, key: str) -> bool:
    value = doc.get(key)
    if isinstance(value, str):
        return value.strip().lower() in {"true", "1", "yes"}
    return bool(value)


def string_tuple(doc: Document, key: str) -> tuple[str, ...]:
    """Return a list-valued field as a tuple of strings.

    A comma separated string (as produced by CSV round trips) is split.
    """
    value = doc.get(key)
    if value is None:
        return ()
    if isinstance(value, str):
        return tuple(part.strip() for part in value.split(",") if part.strip())
    return tuple(str(item) for item in value if item is not None)


def timestamp(doc: Document, key: str) -> datetime | None:
    return parse_timestamp(doc.get(key))
