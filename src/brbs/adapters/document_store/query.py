"""Query evaluation shared by the document store adapters.

Both adapters evaluate `where`/`order_by` in Python over a collection's
documents, which keeps JSON comparison semantics identical across backends.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from brbs.interfaces.document_store import StoredDocument


def matches(body: Mapping[str, Any], where: Mapping[str, Any] | None) -> bool:
    """Return True if `body` has every key/value pair in `where`."""
    if not where:
        return True
    return all(key in body and body[key] == value for key, value in where.items())


def run_query(
    documents: Iterable[StoredDocument],
    where: Mapping[str, Any] | None = None,
    order_by: str | None = None,
    descending: bool = False,
) -> list[StoredDocument]:
    """Filter and optionally sort documents.

    The sort is stable. Documents with a missing or None sort key always come
    after those that have one.
    """
    selected = [doc for doc in documents if matches(doc.body, where)]
    if order_by is None:
        return selected

    present = [doc for doc in selected if doc.body.get(order_by) is not None]
    missing = [doc for doc in selected if doc.body.get(order_by) is None]
    present.sort(key=lambda doc: doc.body[order_by], reverse=descending)
    return present + missing
