"""SQLAlchemy-backed DocumentStore adapter for BRBS.

Persists documents in the ``documents`` table (see
`brbs.adapters.document_store.schema`). Backs the "remote" configuration of the
catalogs: the same catalog code runs against this store or the in-memory one.

Each call runs in its own transaction (``engine.begin()``). SQLAlchemy errors are
mapped onto the document store exceptions:

- `IntegrityError` on insert → `DuplicateDocumentError`
- any other `DBAPIError` → `StoreUnavailableError`
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any

from sqlalchemy import Connection, RowMapping, insert, select, update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import DBAPIError, IntegrityError

from brbs.interfaces.document_store import (
    ID_KEY,
    DocumentNotFoundError,
    DocumentStore,
    DuplicateDocumentError,
    InvalidDocumentError,
    RevisionConflictError,
    StoredDocument,
    StoreUnavailableError,
    document_id,
)
from brbs.utils.timestamps import utc_now

from .query import run_query
from .schema import documents

logger = logging.getLogger(__name__)

# any flag present marks a uniqueness violation
UNIQUE_CONSTRAINT_KEYWORDS = ("unique", "duplicate")  # pragma: no mutate


class SqlAlchemyDocumentStore(DocumentStore):
    """SQLAlchemy-backed DocumentStore.

    - Uses the canonical `documents` table.
    - Collection order is insertion order (`seq`).
    - Updates are guarded by the stored `revision`.
    """

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    # --------------------------------------------------------------------- #
    # Interface implementation
    # --------------------------------------------------------------------- #

    def find(
        self,
        collection: str,
        *,
        where: Mapping[str, Any] | None = None,
        order_by: str | None = None,
        descending: bool = False,
    ) -> list[StoredDocument]:
        stmt = (
            select(documents)
            .where(documents.c.collection == collection)
            .order_by(documents.c.seq.asc())
        )
        with self._transaction() as conn:
            rows = conn.execute(stmt).mappings().all()
        return run_query(
            (self._to_document(row) for row in rows), where, order_by, descending
        )

    def get(self, collection: str, doc_id: str) -> StoredDocument | None:
        stmt = select(documents).where(
            documents.c.collection == collection, documents.c.doc_id == doc_id
        )
        with self._transaction() as conn:
            row = conn.execute(stmt).mappings().one_or_none()
        return None if row is None else self._to_document(row)

    def insert(self, collection: str, body: Mapping[str, Any]) -> StoredDocument:
        doc_id = document_id(body)
        stmt = insert(documents).values(
            collection=collection, doc_id=doc_id, revision=1, body=dict(body)
        )
        try:
            with self._transaction() as conn:
                conn.execute(stmt)
        except IntegrityError as e:
            self._raise_from_integrity_error(e, collection, doc_id)
        return StoredDocument(collection, doc_id, 1, dict(body))

    def update(
        self,
        collection: str,
        doc_id: str,
        body: Mapping[str, Any],
        expected_revision: int,
    ) -> StoredDocument:
        new_body = {**body, ID_KEY: doc_id}
        stmt = (
            update(documents)
            .where(
                documents.c.collection == collection,
                documents.c.doc_id == doc_id,
                documents.c.revision == expected_revision,
            )
            .values(
                body=new_body,
                revision=documents.c.revision + 1,
                updated_at=utc_now(),
            )
        )
        with self._transaction() as conn:
            result = conn.execute(stmt)
            if result.rowcount == 0:
                current = self._fetch_revision(conn, collection, doc_id)
                if current is None:
                    raise DocumentNotFoundError(collection, doc_id)
                raise RevisionConflictError(
                    collection, doc_id, current, expected_revision
                )
        return StoredDocument(collection, doc_id, expected_revision + 1, new_body)

    # --------------------------------------------------------------------- #
    # Internals
    # --------------------------------------------------------------------- #

    @contextmanager
    def _transaction(self) -> Iterator[Connection]:
        """Open a transaction, mapping driver failures to StoreUnavailableError.

        IntegrityError is re-raised untouched so callers can classify it.
        """
        try:
            with self.engine.begin() as conn:
                yield conn
        except IntegrityError:
            raise
        except DBAPIError as e:
            logger.error("Document store unavailable: %s", e)
            raise StoreUnavailableError(str(e)) from e

    @staticmethod
    def _fetch_revision(conn: Connection, collection: str, doc_id: str) -> int | None:
        stmt = select(documents.c.revision).where(
            documents.c.collection == collection, documents.c.doc_id == doc_id
        )
        return conn.execute(stmt).scalar_one_or_none()

    @staticmethod
    def _to_document(row: RowMapping) -> StoredDocument:
        return StoredDocument(
            collection=row["collection"],
            doc_id=row["doc_id"],
            revision=row["revision"],
            body=dict(row["body"]),
        )

    @staticmethod
    def _raise_from_integrity_error(
        integrity_error: IntegrityError, collection: str, doc_id: str
    ) -> None:
        """Classify an IntegrityError raised by an insert.

        Raises:
            DuplicateDocumentError: If the message points at a uniqueness violation.
            InvalidDocumentError: For any other integrity violation.
        """
        msg = str(integrity_error.orig or integrity_error)
        if any(kw in msg.lower() for kw in UNIQUE_CONSTRAINT_KEYWORDS):
            raise DuplicateDocumentError(collection, doc_id) from integrity_error
        raise InvalidDocumentError(msg) from integrity_error
