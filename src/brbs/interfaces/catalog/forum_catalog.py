"""Interface for the Forum Catalog."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from datetime import datetime
from typing import Any, ClassVar

from brbs.interfaces.document_store import ID_KEY
from brbs.utils.timestamps import EPOCH_MIN, format_timestamp

from . import fields
from .fields import Document

# pylint: disable=too-many-instance-attributes

# --- Read Models ---


@dataclass(frozen=True, slots=True)
class Reply:
    """A reply to a forum post. Replies are append-only."""

    id: str
    author_id: str
    author_name: str
    content: str
    post_date: datetime

    @classmethod
    def from_document(cls, doc: Document) -> Reply:
        return cls(
            id=fields.doc_id(doc),
            author_id=fields.text(doc, "authorId"),
            author_name=fields.text(doc, "authorName"),
            content=fields.text(doc, "content"),
            post_date=fields.timestamp(doc, "postDate") or EPOCH_MIN,
        )

    def to_document(self) -> dict[str, Any]:
        return {
            ID_KEY: self.id,
            "authorId": self.author_id,
            "authorName": self.author_name,
            "content": self.content,
            "postDate": format_timestamp(self.post_date),
        }


@dataclass(frozen=True, slots=True)
class ForumPost:
    """A forum thread's opening post together with its replies.

    Conventions:
      - `replies` are in the order they were added.
      - `last_activity` is the post date when there are no replies, else the
        post date of the last reply.
    """

    id: str
    category_id: str
    title: str
    content: str
    author_id: str
    author_name: str
    post_date: datetime
    pinned: bool = False
    view_count: int = 0
    replies: tuple[Reply, ...] = ()
    tags: tuple[str, ...] = ()

    @property
    def last_activity(self) -> datetime:
        """Activity timestamp used for thread ordering."""
        if self.replies:
            return self.replies[-1].post_date
        return self.post_date

    @property
    def reply_count(self) -> int:
        return len(self.replies)

    @classmethod
    def from_document(cls, doc: Document) -> ForumPost:
        """Build a post (and its replies) from its stored document."""
        return cls(
            id=fields.doc_id(doc),
            category_id=fields.text(doc, "categoryId"),
            title=fields.text(doc, "title"),
            content=fields.text(doc, "content"),
            author_id=fields.text(doc, "authorId"),
            author_name=fields.text(doc, "authorName"),
            post_date=fields.timestamp(doc, "postDate") or EPOCH_MIN,
            pinned=fields.flag(doc, "pinned"),
            view_count=fields.integer(doc, "viewCount"),
            replies=tuple(Reply.from_document(r) for r in doc.get("replies") or ()),
            tags=fields.string_tuple(doc, "tags"),
        )

    def to_document(self) -> dict[str, Any]:
        return {
            ID_KEY: self.id,
            "categoryId": self.category_id,
            "title": self.title,
            "content": self.content,
            "authorId": self.author_id,
            "authorName": self.author_name,
            "postDate": format_timestamp(self.post_date),
            "pinned": self.pinned,
            "viewCount": self.view_count,
            "replies": [reply.to_document() for reply in self.replies],
            "tags": list(self.tags),
        }


@dataclass(frozen=True, slots=True)
class LatestPostSummary:
    """Summary of the most recently active thread in a category."""

    post_id: str
    title: str
    author_name: str
    activity_date: datetime


@dataclass(frozen=True, slots=True)
class ForumCategory:
    """A forum category with its derived thread statistics."""

    id: str
    name: str
    description: str = ""
    post_count: int = 0
    latest_post: LatestPostSummary | None = None

    @classmethod
    def from_document(cls, doc: Document) -> ForumCategory:
        """Build a category from its stored document.

        Stored counters are not trusted; catalogs fill `post_count` and
        `latest_post` from the posts themselves.
        """
        return cls(
            id=fields.doc_id(doc),
            name=fields.text(doc, "name"),
            description=fields.text(doc, "description"),
        )


# --- Interface ---


class ForumCatalog(abc.ABC):
    """Interface for the members' discussion forum."""

    KIND: ClassVar[str] = "forum post"

    @abc.abstractmethod
    def list_categories(self) -> list[ForumCategory]:
        """Return every category with post statistics computed from its posts."""

    @abc.abstractmethod
    def list_posts_for_category(self, category_id: str) -> list[ForumPost]:
        """Return a category's posts: pinned first, then most recent activity first."""

    @abc.abstractmethod
    def get_post_by_id(self, post_id: str) -> ForumPost | None:
        """Return the post (with replies) or None."""

    @abc.abstractmethod
    def create_post(self, category_id: str, title: str, content: str) -> ForumPost:
        """Create a new unpinned post with no replies.

        Raises:
            AuthRequiredError: If nobody is signed in.
            ValidationFailedError: If the title or content is blank.
            NotFoundError: If the category does not exist.
            UpstreamUnavailableError: If the store rejects the write.
        """

    @abc.abstractmethod
    def add_reply(self, post_id: str, content: str) -> Reply:
        """Append a reply to a post.

        Raises:
            AuthRequiredError: If nobody is signed in.
            ValidationFailedError: If the content is blank.
            NotFoundError: If the post does not exist.
            UpstreamUnavailableError: If the store rejects the write.
        """
