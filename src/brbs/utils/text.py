"""Case-insensitive substring matching helpers."""

from collections.abc import Iterable


def contains(haystack: str | None, needle: str) -> bool:
    """Return True if lower-cased ``needle`` occurs in ``haystack``.

    ``needle`` is expected to be lower-cased already; ``haystack`` may be None.
    """
    return bool(haystack) and needle in haystack.lower()  # type: ignore[union-attr]


def any_contains(values: Iterable[str | None], needle: str) -> bool:
    """Return True if ``needle`` occurs in any of ``values``."""
    return any(contains(value, needle) for value in values)


def normalize_filter(value: str | None) -> str | None:
    """Collapse the "no filter" spellings (None, blank, ``all``) to None."""
    if value is None:
        return None
    value = value.strip()
    if not value or value == "all":
        return None
    return value
