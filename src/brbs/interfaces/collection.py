"""Names of the document collections backing the catalogs."""

from __future__ import annotations

from enum import Enum


class Collection(str, Enum):
    """Enumeration of document collections.

    Each member's value is the collection name used by document stores. The
    ``fixture`` property gives the JSON file the dataset loader reads it from.
    """

    GALLERIES = "galleries"
    PHOTOS = "photos"
    ARTICLES = "articles"
    RESOURCES = "resources"
    VENDORS = "vendors"
    BEGINNERS_GUIDE = "beginners_guide"
    FORUM_CATEGORIES = "forum_categories"
    FORUM_POSTS = "forum_posts"
    MEMBERS = "members"
    EVENTS = "events"

    @property
    def fixture(self) -> str:
        """Return the fixture file name for this collection."""
        return _FIXTURE_FILES[self]


_FIXTURE_FILES = {
    Collection.GALLERIES: "PhotoGalleries.json",
    Collection.PHOTOS: "Photos.json",
    Collection.ARTICLES: "Articles.json",
    Collection.RESOURCES: "Resources.json",
    Collection.VENDORS: "Vendors.json",
    Collection.BEGINNERS_GUIDE: "BeginnersGuide.json",
    Collection.FORUM_CATEGORIES: "ForumCategories.json",
    Collection.FORUM_POSTS: "ForumPosts.json",
    Collection.MEMBERS: "Members.json",
    Collection.EVENTS: "Events.json",
}
