"""Document-backed LearningCatalog implementation."""

from __future__ import annotations

import logging

from brbs.interfaces.catalog.learning_catalog import (
    Article,
    ArticleFilters,
    GuideStep,
    LearningCatalog,
    Resource,
    Vendor,
)
from brbs.interfaces.collection import Collection
from brbs.utils.text import any_contains
from brbs.utils.timestamps import EPOCH_MIN

from .base import DocumentCatalogBase

logger = logging.getLogger(__name__)


def filter_articles(articles: list[Article], filters: ArticleFilters) -> list[Article]:
    """Apply category, difficulty and search filters, in that order."""
    results = articles
    if filters.category is not None:
        results = [a for a in results if a.category == filters.category]
    if filters.difficulty is not None:
        results = [a for a in results if a.difficulty == filters.difficulty]
    if filters.search is not None:
        term = filters.search.lower()
        results = [a for a in results if any_contains((a.title, *a.tags), term)]
    return results


def newest_first(articles: list[Article]) -> list[Article]:
    """Sort by publish date, newest first; undated last, ties in source order."""
    dated = [a for a in articles if a.publish_date is not None]
    undated = [a for a in articles if a.publish_date is None]
    dated.sort(key=lambda a: a.publish_date or EPOCH_MIN, reverse=True)
    return dated + undated


class DocumentLearningCatalog(DocumentCatalogBase, LearningCatalog):
    """LearningCatalog over the articles, resources, vendors and guide collections."""

    KIND = LearningCatalog.KIND

    def list_articles(self, filters: ArticleFilters | None = None) -> list[Article]:
        filters = filters or ArticleFilters()
        articles = self._load(Collection.ARTICLES, Article.from_document)
        results = newest_first(filter_articles(articles, filters))
        logger.debug(
            "Articles: %d of %d match %s", len(results), len(articles), filters
        )
        return results

    def get_article_by_id(self, article_id: str) -> Article | None:
        return self._load_one(Collection.ARTICLES, article_id, Article.from_document)

    def list_categories(self) -> list[str]:
        articles = self._load(Collection.ARTICLES, Article.from_document)
        # dict preserves first-seen order
        categories = dict.fromkeys(a.category for a in articles if a.category)
        return list(categories)

    def list_resources(self) -> list[Resource]:
        return self._load(Collection.RESOURCES, Resource.from_document)

    def list_vendors(self) -> list[Vendor]:
        return self._load(Collection.VENDORS, Vendor.from_document)

    def beginner_pathway(self) -> list[GuideStep]:
        steps = self._load(Collection.BEGINNERS_GUIDE, GuideStep.from_document)
        return sorted(steps, key=lambda step: step.step)
