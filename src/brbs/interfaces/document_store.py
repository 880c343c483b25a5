"""Document store interfaces for BRBS.

This module defines:
- The `StoredDocument` DTO returned by every store.
- The `DocumentStore` port (framework-free ABC) the catalogs read and write through.
- A small, adapter-agnostic exception hierarchy for precise error handling.

Layering & dependency rules:
- Lives under `brbs.interfaces`. Do NOT import from adapters, bootstrap, or entrypoints.

Contract overview
-----------------
Documents:
- A document is a flat JSON-like mapping. Its identity lives under the `_id` key.
- Each stored document carries a `revision` (starts at 1, +1 per update) used for
  optimistic concurrency on updates.

Reads:
- `find(collection, where=..., order_by=..., descending=...)`: equality filters on
  top-level keys; insertion order unless `order_by` is given. Documents missing the
  sort key go last regardless of direction.
- `get(collection, doc_id)`: the document or None.

Writes:
- `insert`: `DuplicateDocumentError` if `_id` already exists in the collection.
- `update`: `DocumentNotFoundError` if absent, `RevisionConflictError` if the
  stored revision differs from `expected_revision`.

Errors:
- `StoreUnavailableError`: transient driver/connection issues; callers decide
  whether to degrade (reads) or propagate (writes).
"""

from __future__ import annotations

import abc
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

ID_KEY = "_id"

# --- Exceptions to standardize adapter behavior ---


class DocumentStoreError(Exception):
    """Base class for BRBS document store errors."""


class DuplicateDocumentError(DocumentStoreError):
    """A document with the same `_id` already exists in the collection."""

    def __init__(self, collection: str, doc_id: str) -> None:
        super().__init__(f"{collection} ({doc_id}) already exists")
        self.collection = collection
        self.doc_id = doc_id


class DocumentNotFoundError(DocumentStoreError):
    """The document to update does not exist."""

    def __init__(self, collection: str, doc_id: str) -> None:
        super().__init__(f"{collection} ({doc_id}) not found")
        self.collection = collection
        self.doc_id = doc_id


class RevisionConflictError(DocumentStoreError):
    """Optimistic concurrency check failed on update."""

    def __init__(
        self, collection: str, doc_id: str, current: int, expected: int
    ) -> None:
        super().__init__(
            f"{collection} ({doc_id}) revision conflict: "
            f"current={current}, expected={expected}"
        )
        self.collection = collection
        self.doc_id = doc_id
        self.current = current
        self.expected = expected


class InvalidDocumentError(DocumentStoreError):
    """The document body is malformed (e.g. missing `_id`)."""


class StoreUnavailableError(DocumentStoreError):
    """Operational/timeout/connection errors."""


# --- DTO ---


@dataclass(frozen=True, slots=True)
class StoredDocument:
    """A document as held by a store."""

    collection: str
    doc_id: str
    revision: int
    body: dict[str, Any] = field(default_factory=dict)


# --- Port ---


class DocumentStore(abc.ABC):
    """Port for a document-oriented backing store."""

    @abc.abstractmethod
    def find(
        self,
        collection: str,
        *,
        where: Mapping[str, Any] | None = None,
        order_by: str | None = None,
        descending: bool = False,
    ) -> list[StoredDocument]:
        """Return the documents of a collection matching every equality pair.

        Args:
            collection: Collection name.
            where: Mapping of top-level key to required value.
            order_by: Optional top-level key to sort by.
            descending: Sort direction when `order_by` is set.

        Returns:
            Matching documents; an empty list when nothing matches.

        Raises:
            StoreUnavailableError: If the backing store cannot be reached.
        """

    @abc.abstractmethod
    def get(self, collection: str, doc_id: str) -> StoredDocument | None:
        """Return a single document by id, or None."""

    @abc.abstractmethod
    def insert(self, collection: str, body: Mapping[str, Any]) -> StoredDocument:
        """Insert a new document at revision 1.

        Raises:
            InvalidDocumentError: If `body` has no usable `_id`.
            DuplicateDocumentError: If the id already exists.
            StoreUnavailableError: If the backing store cannot be reached.
        """

    @abc.abstractmethod
    def update(
        self,
        collection: str,
        doc_id: str,
        body: Mapping[str, Any],
        expected_revision: int,
    ) -> StoredDocument:
        """Replace a document's body, bumping its revision.

        Raises:
            DocumentNotFoundError: If the document does not exist.
            RevisionConflictError: If the stored revision is not `expected_revision`.
            StoreUnavailableError: If the backing store cannot be reached.
        """


def document_id(body: Mapping[str, Any]) -> str:
    """Return the `_id` of a document body.

    Raises:
        InvalidDocumentError: If the id is missing or blank.
    """
    doc_id = body.get(ID_KEY)
    if doc_id is None or not str(doc_id).strip():
        raise InvalidDocumentError(f"document has no {ID_KEY!r}: {dict(body)!r}")
    return str(doc_id)
