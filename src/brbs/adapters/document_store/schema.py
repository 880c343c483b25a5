"""Document store schema.

Defines the ``documents`` table used by the SQLAlchemy document store. Each row
is one document of one collection; the JSON body keeps the source's field
names unchanged.

Constraints (enforced here):

| Constraint                     | Purpose                               |
|--------------------------------|---------------------------------------|
| UNIQUE(collection, doc_id)     | `_id` unique within a collection      |
| CHECK(revision >= 1)           | revisions start at 1                  |
"""

from __future__ import annotations

from sqlalchemy import (
    CheckConstraint,
    Column,
    Identity,
    Index,
    Integer,
    String,
    Table,
    UniqueConstraint,
    text,
)

from brbs.adapters.db.metadata import metadata
from brbs.adapters.db.sa_types import BIGINT_PK, PORTABLE_JSON, UTCDateTime

__all__ = ["documents"]

documents = Table(
    "documents",
    metadata,
    Column(
        "seq",
        BIGINT_PK,
        Identity(start=1),
        nullable=False,
        primary_key=True,
        comment="Insertion sequence; defines the natural order of a collection.",
    ),
    Column(
        "collection",
        String(100),
        nullable=False,
        comment="Collection name (e.g., 'forum_posts').",
    ),
    Column(
        "doc_id",
        String(200),
        nullable=False,
        comment="Document identity (the body's `_id`).",
    ),
    Column(
        "revision",
        Integer,
        nullable=False,
        comment="Starts at 1; bumped on every update (optimistic concurrency).",
    ),
    Column(
        "body",
        PORTABLE_JSON,
        nullable=False,
        comment="Document body (JSON object).",
    ),
    Column(
        "recorded_at",
        UTCDateTime(),
        nullable=False,
        server_default=text("CURRENT_TIMESTAMP"),
        comment="Server-assigned UTC insert timestamp.",
    ),
    Column(
        "updated_at",
        UTCDateTime(),
        nullable=True,
        comment="UTC timestamp of the last update, if any.",
    ),
    UniqueConstraint("collection", "doc_id"),
    CheckConstraint("revision >= 1", name="positive_revision"),
    Index(None, "collection", "seq"),
    comment="Document collections backing the BRBS catalogs.",
)
