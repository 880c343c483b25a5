"""Site-wide search across events, articles and resources.

Matching is plain case-insensitive substring containment with no ranking.
Each bucket keeps the order of its source listing: articles newest first,
events and resources as loaded.

| Bucket    | Matched fields                   |
|-----------|----------------------------------|
| events    | title, description, any tag      |
| articles  | title, content, any tag          |
| resources | name, description                |

The three sub-searches are independent and run concurrently. A sub-search
that fails is logged and its bucket comes back empty; the others are still
returned.
"""

from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import TypeVar

from brbs.interfaces.catalog.event_catalog import Event, EventCatalog
from brbs.interfaces.catalog.learning_catalog import (
    Article,
    LearningCatalog,
    Resource,
)
from brbs.utils.text import any_contains

T = TypeVar("T")

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SearchResults:
    """Merged search results, one list per content type."""

    events: list[Event] = field(default_factory=list)
    articles: list[Article] = field(default_factory=list)
    resources: list[Resource] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.events) + len(self.articles) + len(self.resources)


class SearchAggregator:
    """Fans a query out to the event and learning catalogs."""

    def __init__(self, events: EventCatalog, learning: LearningCatalog) -> None:
        self._events = events
        self._learning = learning

    def search_all(self, query: str | None) -> SearchResults:
        """Search every content type for `query`.

        An empty or whitespace-only query returns empty buckets without
        touching any catalog.
        """
        if not query or not query.strip():
            return SearchResults()

        term = query.lower()
        with ThreadPoolExecutor(max_workers=3, thread_name_prefix="search") as pool:
            events = pool.submit(self.search_events, term)
            articles = pool.submit(self.search_articles, term)
            resources = pool.submit(self.search_resources, term)
            results = SearchResults(
                events=self._collect("events", events),
                articles=self._collect("articles", articles),
                resources=self._collect("resources", resources),
            )

        logger.info("Search %r matched %d items", query, results.total)
        return results

    def search_events(self, query: str) -> list[Event]:
        """Events whose title, description or any tag contains `query`."""
        term = query.lower()
        return [
            event
            for event in self._events.list_events()
            if any_contains((event.title, event.description, *event.tags), term)
        ]

    def search_articles(self, query: str) -> list[Article]:
        """Articles whose title, content or any tag contains `query`."""
        term = query.lower()
        return [
            article
            for article in self._learning.list_articles()
            if any_contains((article.title, article.content, *article.tags), term)
        ]

    def search_resources(self, query: str) -> list[Resource]:
        """Resources whose name or description contains `query`."""
        term = query.lower()
        return [
            resource
            for resource in self._learning.list_resources()
            if any_contains((resource.name, resource.description), term)
        ]

    @staticmethod
    def _collect(bucket: str, future: Future[list[T]]) -> list[T]:
        try:
            return future.result()
        except Exception:  # pylint: disable=broad-exception-caught
            logger.exception("Search of %s failed; returning no %s", bucket, bucket)
            return []

