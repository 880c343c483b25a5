"""Assemble the catalogs over a document store."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from brbs import config
from brbs.adapters.auth import MemberActorProvider
from brbs.adapters.catalog import (
    DocumentEventCatalog,
    DocumentForumCatalog,
    DocumentGalleryCatalog,
    DocumentLearningCatalog,
    DocumentMemberDirectory,
)
from brbs.adapters.db.engine import make_engine
from brbs.adapters.document_store import InMemoryDocumentStore, SqlAlchemyDocumentStore
from brbs.datasets import load_dataset, seed_store
from brbs.interfaces.catalog import (
    EventCatalog,
    ForumCatalog,
    GalleryCatalog,
    LearningCatalog,
    MemberDirectory,
)
from brbs.interfaces.document_store import DocumentStore
from brbs.service_layer.search import SearchAggregator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContainer:
    """Application wiring handed to the entrypoints."""

    store: DocumentStore
    galleries: GalleryCatalog
    learning: LearningCatalog
    forum: ForumCatalog
    events: EventCatalog
    members: MemberDirectory
    search: SearchAggregator


def build_store(db_url: str | None, data_dir: Path | None = None) -> DocumentStore:
    """Build the document store.

    With a URL, the SQLAlchemy store is used as-is (seed it with ``brbs db
    seed``). Without one, an in-memory store is seeded from the validated
    fixture dataset in `data_dir` (or the packaged fixtures).
    """
    if db_url:
        logger.debug("Using SQL document store")
        return SqlAlchemyDocumentStore(make_engine(db_url))

    store = InMemoryDocumentStore()
    count = seed_store(store, load_dataset(data_dir).validate())
    logger.debug("Using in-memory document store with %d documents", count)
    return store


def bootstrap(
    db_url: str | None = None,
    data_dir: Path | None = None,
    member_id: str | None = None,
) -> AppContainer:
    """Build the application container.

    Arguments left as None fall back to ``BRBS_DB_URL``, ``BRBS_DATA_DIR`` and
    ``BRBS_MEMBER_ID``.
    """
    store = build_store(
        db_url or config.get_optional_db_url(),
        data_dir or config.get_data_dir(),
    )

    members = DocumentMemberDirectory(store)
    actors = MemberActorProvider(members, member_id or config.get_member_id())
    events = DocumentEventCatalog(store)
    learning = DocumentLearningCatalog(store)

    return AppContainer(
        store=store,
        galleries=DocumentGalleryCatalog(store),
        learning=learning,
        forum=DocumentForumCatalog(store, actors),
        events=events,
        members=members,
        search=SearchAggregator(events, learning),
    )
