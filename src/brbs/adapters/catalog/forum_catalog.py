"""Document-backed ForumCatalog implementation.

Thread ordering: pinned posts first, then by activity timestamp (the last
reply's date, or the post's own date when it has none), newest first.

Category statistics (`post_count`, `latest_post`) are computed from the posts
on every read, so they can never go stale after a write.

Writes are serialized per catalog instance with a lock. Appending a reply
rewrites the post document under the store's revision check, so a concurrent
writer in another process surfaces as an error instead of a lost reply.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import replace
from datetime import datetime

from brbs.adapters.id_generators import ULIDGenerator
from brbs.interfaces.auth import Actor, ActorProvider
from brbs.interfaces.catalog.errors import (
    AuthRequiredError,
    NotFoundError,
    UpstreamUnavailableError,
    ValidationFailedError,
)
from brbs.interfaces.catalog.forum_catalog import (
    ForumCatalog,
    ForumCategory,
    ForumPost,
    LatestPostSummary,
    Reply,
)
from brbs.interfaces.collection import Collection
from brbs.interfaces.document_store import (
    DocumentStore,
    DocumentStoreError,
    StoredDocument,
)
from brbs.interfaces.id_generator import IdGenerator
from brbs.utils.timestamps import utc_now

from .base import DocumentCatalogBase

logger = logging.getLogger(__name__)


def order_threads(posts: list[ForumPost]) -> list[ForumPost]:
    """Pinned first; within each group, most recent activity first."""
    ordered = sorted(posts, key=lambda post: post.last_activity, reverse=True)
    ordered.sort(key=lambda post: not post.pinned)
    return ordered


def summarize_category(
    category: ForumCategory, posts: list[ForumPost]
) -> ForumCategory:
    """Fill a category's derived statistics from its posts."""
    if not posts:
        return replace(category, post_count=0, latest_post=None)
    latest = max(posts, key=lambda post: post.last_activity)
    author = latest.replies[-1].author_name if latest.replies else latest.author_name
    summary = LatestPostSummary(
        post_id=latest.id,
        title=latest.title,
        author_name=author,
        activity_date=latest.last_activity,
    )
    return replace(category, post_count=len(posts), latest_post=summary)


class DocumentForumCatalog(DocumentCatalogBase, ForumCatalog):
    """ForumCatalog over the `forum_categories` and `forum_posts` collections."""

    KIND = ForumCatalog.KIND

    def __init__(
        self,
        store: DocumentStore,
        actors: ActorProvider,
        id_generator: IdGenerator | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        super().__init__(store)
        self._actors = actors
        self._ids = id_generator or ULIDGenerator()
        self._clock = clock
        self._write_lock = threading.Lock()

    # --- Reads ---

    def list_categories(self) -> list[ForumCategory]:
        categories = self._load(Collection.FORUM_CATEGORIES, ForumCategory.from_document)
        posts = self._load(Collection.FORUM_POSTS, ForumPost.from_document)
        by_category: dict[str, list[ForumPost]] = {}
        for post in posts:
            by_category.setdefault(post.category_id, []).append(post)
        return [
            summarize_category(category, by_category.get(category.id, []))
            for category in categories
        ]

    def list_posts_for_category(self, category_id: str) -> list[ForumPost]:
        if not category_id:
            return []
        posts = self._load(
            Collection.FORUM_POSTS,
            ForumPost.from_document,
            where={"categoryId": category_id},
        )
        return order_threads(posts)

    def get_post_by_id(self, post_id: str) -> ForumPost | None:
        return self._load_one(Collection.FORUM_POSTS, post_id, ForumPost.from_document)

    # --- Writes ---

    def create_post(self, category_id: str, title: str, content: str) -> ForumPost:
        actor = self._require_actor("post")
        title = self._require_text("title", category_id, title)
        content = self._require_text("content", category_id, content)

        with self._write_lock:
            if self._lookup(Collection.FORUM_CATEGORIES, category_id) is None:
                raise NotFoundError("forum category", category_id)
            post = ForumPost(
                id=self._ids.new_id(),
                category_id=category_id,
                title=title,
                content=content,
                author_id=actor.id,
                author_name=actor.display_name,
                post_date=self._clock(),
            )
            try:
                self._store.insert(Collection.FORUM_POSTS.value, post.to_document())
            except DocumentStoreError as e:
                raise UpstreamUnavailableError(self.KIND, post.id, str(e)) from e

        logger.info(
            "Created forum post %s in category %s by %s", post.id, category_id, actor.id
        )
        return post

    def add_reply(self, post_id: str, content: str) -> Reply:
        actor = self._require_actor("reply")
        content = self._require_text("content", post_id, content)

        with self._write_lock:
            document = self._lookup(Collection.FORUM_POSTS, post_id)
            if document is None:
                raise NotFoundError(self.KIND, post_id)
            reply = Reply(
                id=self._ids.new_id(),
                author_id=actor.id,
                author_name=actor.display_name,
                content=content,
                post_date=self._clock(),
            )
            body = dict(document.body)
            body["replies"] = [*(body.get("replies") or []), reply.to_document()]
            try:
                self._store.update(
                    Collection.FORUM_POSTS.value,
                    post_id,
                    body,
                    expected_revision=document.revision,
                )
            except DocumentStoreError as e:
                # unavailable, or lost a race with a writer outside this instance
                raise UpstreamUnavailableError(self.KIND, post_id, str(e)) from e

        logger.info("Added reply %s to forum post %s by %s", reply.id, post_id, actor.id)
        return reply

    # --- Internals ---

    def _require_actor(self, action: str) -> Actor:
        actor = self._actors.current_actor()
        if actor is None:
            logger.info("Rejected forum %s: no signed-in member", action)
            raise AuthRequiredError(self.KIND, action)
        return actor

    def _require_text(self, field: str, key: str, value: str | None) -> str:
        value = (value or "").strip()
        if not value:
            raise ValidationFailedError(self.KIND, key, f"{field} is required")
        return value

    def _lookup(self, collection: Collection, doc_id: str) -> StoredDocument | None:
        if not doc_id:
            return None
        return self._write(doc_id, lambda: self._store.get(collection.value, doc_id))
