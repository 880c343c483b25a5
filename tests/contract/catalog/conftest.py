"""Catalog fixtures built over the parametrized ``store``."""

from __future__ import annotations

import itertools
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

import pytest

from brbs.adapters.auth import StaticActorProvider
from brbs.adapters.catalog import (
    DocumentEventCatalog,
    DocumentForumCatalog,
    DocumentGalleryCatalog,
    DocumentLearningCatalog,
    DocumentMemberDirectory,
)
from brbs.adapters.id_generators import SimpleIdGenerator
from brbs.interfaces.auth import Actor
from brbs.interfaces.document_store import DocumentStore

# pylint: disable=redefined-outer-name

#: Fixed "now" for time-dependent catalog behavior.
NOW = datetime(2026, 1, 15, 12, 0, tzinfo=timezone.utc)

DANA = Actor(id="mem001", display_name="Dana Whitfield")


@pytest.fixture
def galleries(store: DocumentStore) -> DocumentGalleryCatalog:
    return DocumentGalleryCatalog(store)


@pytest.fixture
def learning(store: DocumentStore) -> DocumentLearningCatalog:
    return DocumentLearningCatalog(store)


@pytest.fixture
def events(store: DocumentStore) -> DocumentEventCatalog:
    return DocumentEventCatalog(store)


@pytest.fixture
def members(store: DocumentStore) -> DocumentMemberDirectory:
    return DocumentMemberDirectory(store)


@pytest.fixture
def ticking_clock() -> Callable[[], datetime]:
    """Clock starting at `NOW` that advances one minute per call."""
    ticks = itertools.count()
    return lambda: NOW + timedelta(minutes=next(ticks))


@pytest.fixture
def make_forum(
    store: DocumentStore, ticking_clock
) -> Callable[..., DocumentForumCatalog]:
    """``make_forum(actor=None)`` builds a forum catalog acting as `actor`."""

    def _make(actor: Actor | None = DANA) -> DocumentForumCatalog:
        return DocumentForumCatalog(
            store,
            StaticActorProvider(actor),
            id_generator=SimpleIdGenerator(prefix="new-"),
            clock=ticking_clock,
        )

    return _make


@pytest.fixture
def forum(make_forum) -> DocumentForumCatalog:
    """Forum catalog with active member Dana signed in."""
    return make_forum()
