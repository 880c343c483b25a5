"""In-memory DocumentStore implementation.

Backs the "mock" configuration: catalogs run against fixture data held in
process memory. Bodies are deep-copied on the way in and out so callers can
never mutate stored state behind the store's back.
"""

from __future__ import annotations

import copy
import threading
from collections.abc import Mapping
from typing import Any

from brbs.interfaces.document_store import (
    ID_KEY,
    DocumentNotFoundError,
    DocumentStore,
    DuplicateDocumentError,
    RevisionConflictError,
    StoredDocument,
    document_id,
)

from .query import run_query


class InMemoryDocumentStore(DocumentStore):
    """Non-durable, thread-safe document store.

    Each collection is an insertion-ordered dict keyed by `_id`.
    """

    def __init__(self) -> None:
        self._collections: dict[str, dict[str, StoredDocument]] = {}
        self._lock = threading.Lock()

    def find(
        self,
        collection: str,
        *,
        where: Mapping[str, Any] | None = None,
        order_by: str | None = None,
        descending: bool = False,
    ) -> list[StoredDocument]:
        with self._lock:
            documents = [
                self._copy(doc) for doc in self._bucket(collection).values()
            ]
        return run_query(documents, where, order_by, descending)

    def get(self, collection: str, doc_id: str) -> StoredDocument | None:
        with self._lock:
            doc = self._bucket(collection).get(doc_id)
            return None if doc is None else self._copy(doc)

    def insert(self, collection: str, body: Mapping[str, Any]) -> StoredDocument:
        doc_id = document_id(body)
        with self._lock:
            bucket = self._collections.setdefault(collection, {})
            if doc_id in bucket:
                raise DuplicateDocumentError(collection, doc_id)
            doc = StoredDocument(collection, doc_id, 1, copy.deepcopy(dict(body)))
            bucket[doc_id] = doc
            return self._copy(doc)

    def update(
        self,
        collection: str,
        doc_id: str,
        body: Mapping[str, Any],
        expected_revision: int,
    ) -> StoredDocument:
        with self._lock:
            bucket = self._bucket(collection)
            current = bucket.get(doc_id)
            if current is None:
                raise DocumentNotFoundError(collection, doc_id)
            if current.revision != expected_revision:
                raise RevisionConflictError(
                    collection, doc_id, current.revision, expected_revision
                )
            updated = StoredDocument(
                collection,
                doc_id,
                current.revision + 1,
                copy.deepcopy({**body, ID_KEY: doc_id}),
            )
            bucket[doc_id] = updated
            return self._copy(updated)

    def _bucket(self, collection: str) -> dict[str, StoredDocument]:
        return self._collections.get(collection, {})

    @staticmethod
    def _copy(doc: StoredDocument) -> StoredDocument:
        return StoredDocument(
            doc.collection, doc.doc_id, doc.revision, copy.deepcopy(doc.body)
        )
