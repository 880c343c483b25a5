"""Interface for the Learning Catalog (knowledge base)."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from brbs.utils.text import normalize_filter

from . import fields
from .fields import Document

# pylint: disable=too-many-instance-attributes

# --- Read Models ---


@dataclass(frozen=True, slots=True)
class Article:
    """A knowledge-base article."""

    id: str
    title: str
    content: str = ""
    excerpt: str = ""
    category: str | None = None
    tags: tuple[str, ...] = ()
    author: str | None = None
    publish_date: datetime | None = None
    difficulty: str | None = None
    featured: bool = False

    @classmethod
    def from_document(cls, doc: Document) -> Article:
        """Build an article from its stored document."""
        return cls(
            id=fields.doc_id(doc),
            title=fields.text(doc, "title"),
            content=fields.text(doc, "content"),
            excerpt=fields.text(doc, "excerpt"),
            category=fields.optional_text(doc, "category"),
            tags=fields.string_tuple(doc, "tags"),
            author=fields.optional_text(doc, "author"),
            publish_date=fields.timestamp(doc, "publishDate"),
            difficulty=fields.optional_text(doc, "difficulty"),
            featured=fields.flag(doc, "featured"),
        )


@dataclass(frozen=True, slots=True)
class Resource:
    """An external learning resource (book, website, video...)."""

    id: str
    name: str
    description: str = ""
    url: str | None = None
    category: str | None = None

    @classmethod
    def from_document(cls, doc: Document) -> Resource:
        return cls(
            id=fields.doc_id(doc),
            name=fields.text(doc, "name"),
            description=fields.text(doc, "description"),
            url=fields.optional_text(doc, "url"),
            category=fields.optional_text(doc, "category"),
        )


@dataclass(frozen=True, slots=True)
class Vendor:
    """A recommended nursery or supplier."""

    id: str
    name: str
    description: str = ""
    url: str | None = None
    location: str | None = None

    @classmethod
    def from_document(cls, doc: Document) -> Vendor:
        return cls(
            id=fields.doc_id(doc),
            name=fields.text(doc, "name"),
            description=fields.text(doc, "description"),
            url=fields.optional_text(doc, "url"),
            location=fields.optional_text(doc, "location"),
        )


@dataclass(frozen=True, slots=True)
class GuideStep:
    """One step of the beginner's pathway."""

    id: str
    step: int
    title: str
    content: str = ""

    @classmethod
    def from_document(cls, doc: Document) -> GuideStep:
        return cls(
            id=fields.doc_id(doc),
            step=fields.integer(doc, "step"),
            title=fields.text(doc, "title"),
            content=fields.text(doc, "content"),
        )


# --- Query Model ---


@dataclass(frozen=True, slots=True)
class ArticleFilters:
    """Conjunctive article filters.

    `None`, blank strings and the literal ``"all"`` disable a filter.
    """

    category: str | None = None
    difficulty: str | None = None
    search: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "category", normalize_filter(self.category))
        object.__setattr__(self, "difficulty", normalize_filter(self.difficulty))
        search = self.search.strip() if self.search else None
        object.__setattr__(self, "search", search or None)


# --- Interface ---


class LearningCatalog(abc.ABC):
    """Interface for the knowledge base."""

    KIND: ClassVar[str] = "article"

    @abc.abstractmethod
    def list_articles(self, filters: ArticleFilters | None = None) -> list[Article]:
        """Return matching articles, newest `publish_date` first.

        Filters apply in order: category (exact), difficulty (exact), search
        (case-insensitive substring of the title or any tag).
        """

    @abc.abstractmethod
    def get_article_by_id(self, article_id: str) -> Article | None:
        """Return the article with the given id, or None."""

    @abc.abstractmethod
    def list_categories(self) -> list[str]:
        """Return the distinct article categories in first-seen order."""

    @abc.abstractmethod
    def list_resources(self) -> list[Resource]:
        """Return every resource as loaded."""

    @abc.abstractmethod
    def list_vendors(self) -> list[Vendor]:
        """Return every vendor as loaded."""

    @abc.abstractmethod
    def beginner_pathway(self) -> list[GuideStep]:
        """Return the beginner's guide ordered by step number."""
