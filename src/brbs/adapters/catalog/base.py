"""Shared mechanics for document-backed catalogs."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any, TypeVar

from brbs.interfaces.catalog.errors import UpstreamUnavailableError
from brbs.interfaces.collection import Collection
from brbs.interfaces.document_store import (
    DocumentStore,
    StoredDocument,
    StoreUnavailableError,
)

T = TypeVar("T")

logger = logging.getLogger(__name__)


class DocumentCatalogBase:
    """Read helpers over a `DocumentStore` that never raise.

    Store outages on reads are logged and degrade to the empty value, so page
    code can render results without wrapping every call. Writes go through
    `_write`, which surfaces outages as `UpstreamUnavailableError`.
    """

    KIND: str

    def __init__(self, store: DocumentStore) -> None:
        self._store = store

    def _load(
        self,
        collection: Collection,
        convert: Callable[[Mapping[str, Any]], T],
        where: Mapping[str, Any] | None = None,
    ) -> list[T]:
        try:
            documents = self._store.find(collection.value, where=where)
        except StoreUnavailableError as e:
            logger.warning("Could not load %s: %s", collection.value, e)
            return []
        return self._convert_all(collection, documents, convert)

    def _load_one(
        self,
        collection: Collection,
        doc_id: str,
        convert: Callable[[Mapping[str, Any]], T],
    ) -> T | None:
        if not doc_id:
            return None
        try:
            document = self._store.get(collection.value, doc_id)
        except StoreUnavailableError as e:
            logger.warning("Could not load %s (%s): %s", collection.value, doc_id, e)
            return None
        if document is None:
            return None
        converted = self._convert_all(collection, [document], convert)
        return converted[0] if converted else None

    def _write(self, key: str, operation: Callable[[], T]) -> T:
        try:
            return operation()
        except StoreUnavailableError as e:
            raise UpstreamUnavailableError(self.KIND, key, str(e)) from e

    @staticmethod
    def _convert_all(
        collection: Collection,
        documents: Iterable[StoredDocument],
        convert: Callable[[Mapping[str, Any]], T],
    ) -> list[T]:
        records: list[T] = []
        for document in documents:
            try:
                records.append(convert(document.body))
            except (KeyError, TypeError, ValueError) as e:
                logger.warning(
                    "Skipping malformed %s document %s: %s",
                    collection.value,
                    document.doc_id,
                    e,
                )
        return records
