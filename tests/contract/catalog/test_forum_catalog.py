"""Contract tests for ForumCatalog: thread ordering, derived statistics and writes."""

from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone

import pytest

from brbs.interfaces.catalog.errors import (
    AuthRequiredError,
    NotFoundError,
    ValidationFailedError,
)
from brbs.interfaces.collection import Collection

from .conftest import DANA, NOW

# pylint: disable=magic-value-comparison,redefined-outer-name

UTC = timezone.utc


def ids(records) -> list[str]:
    return [record.id for record in records]


@pytest.fixture
def board(seed, make_category_doc, make_post_doc, make_reply_doc):
    seed(
        Collection.FORUM_CATEGORIES,
        make_category_doc("general", name="General", postCount=99),
        make_category_doc("species", name="Species"),
        make_category_doc("empty", name="Empty"),
    )
    seed(
        Collection.FORUM_POSTS,
        make_post_doc("old-busy", categoryId="general", postDate="2025-01-01T00:00:00Z",
                      replies=[make_reply_doc("r1", authorName="Marcus Lee",
                                              postDate="2025-03-22T00:00:00Z")]),
        make_post_doc("new-quiet", categoryId="general", postDate="2025-02-01T00:00:00Z"),
        make_post_doc("pinned-old", categoryId="general", pinned=True,
                      postDate="2024-06-01T00:00:00Z"),
        make_post_doc("ficus", categoryId="species", title="Ficus leaves",
                      authorName="Priya", postDate="2025-04-01T00:00:00Z"),
    )


@pytest.mark.usefixtures("board")
class TestReads:
    """Category statistics and thread ordering."""

    @staticmethod
    def test_categories_with_derived_statistics(forum):
        general, species, empty = forum.list_categories()

        assert general.post_count == 3
        assert general.latest_post is not None
        assert general.latest_post.post_id == "old-busy"
        assert general.latest_post.author_name == "Marcus Lee"
        assert general.latest_post.activity_date == datetime(2025, 3, 22, tzinfo=UTC)

        assert species.post_count == 1
        assert species.latest_post is not None
        assert species.latest_post.author_name == "Priya"

        assert (empty.post_count, empty.latest_post) == (0, None)

    @staticmethod
    def test_pinned_first_then_latest_activity(forum):
        assert ids(forum.list_posts_for_category("general")) == [
            "pinned-old",
            "old-busy",
            "new-quiet",
        ]

    @staticmethod
    def test_unknown_category_has_no_posts(forum):
        assert forum.list_posts_for_category("missing") == []
        assert forum.list_posts_for_category("") == []

    @staticmethod
    def test_get_post_with_replies(forum):
        post = forum.get_post_by_id("old-busy")
        assert post is not None
        assert [reply.id for reply in post.replies] == ["r1"]
        assert forum.get_post_by_id("missing") is None


@pytest.mark.usefixtures("board")
class TestCreatePost:
    """create_post"""

    @staticmethod
    def test_creates_unpinned_post_by_actor(forum):
        post = forum.create_post("species", "  Maple wiring ", "When to wire?")

        assert post.id == "new-000001"
        assert post.title == "Maple wiring"
        assert (post.author_id, post.author_name) == (DANA.id, DANA.display_name)
        assert post.post_date == NOW
        assert not post.pinned
        assert post.replies == ()
        assert forum.get_post_by_id(post.id) == post

    @staticmethod
    def test_new_post_updates_category_statistics(forum):
        post = forum.create_post("empty", "First", "Hello")
        empty = forum.list_categories()[2]
        assert empty.post_count == 1
        assert empty.latest_post is not None
        assert empty.latest_post.post_id == post.id

    @staticmethod
    def test_requires_actor(make_forum, store):
        with pytest.raises(AuthRequiredError, match="signed in to post"):
            make_forum(actor=None).create_post("general", "Hi", "Hello")
        assert len(store.find(Collection.FORUM_POSTS.value)) == 4

    @staticmethod
    @pytest.mark.parametrize(
        ("title", "content", "reason"),
        [("", "Hello", "title is required"), ("Hi", "   ", "content is required")],
    )
    def test_requires_title_and_content(forum, title, content, reason):
        with pytest.raises(ValidationFailedError) as excinfo:
            forum.create_post("general", title, content)
        assert excinfo.value.reason == reason

    @staticmethod
    def test_unknown_category(forum):
        with pytest.raises(NotFoundError, match=r"forum category \(missing\) not found"):
            forum.create_post("missing", "Hi", "Hello")


@pytest.mark.usefixtures("board")
class TestAddReply:
    """add_reply"""

    @staticmethod
    def test_appends_reply_and_moves_thread_up(forum):
        reply = forum.add_reply("new-quiet", " Looks healthy ")

        assert reply.content == "Looks healthy"
        assert reply.author_name == DANA.display_name
        post = forum.get_post_by_id("new-quiet")
        assert post is not None
        assert post.replies == (reply,)
        assert post.last_activity == NOW
        assert ids(forum.list_posts_for_category("general"))[:2] == [
            "pinned-old",
            "new-quiet",
        ]

    @staticmethod
    def test_replies_keep_insertion_order(forum):
        first = forum.add_reply("ficus", "one")
        second = forum.add_reply("ficus", "two")
        post = forum.get_post_by_id("ficus")
        assert post is not None
        assert [r.id for r in post.replies] == [first.id, second.id]

    @staticmethod
    def test_requires_actor(make_forum):
        with pytest.raises(AuthRequiredError, match="signed in to reply"):
            make_forum(actor=None).add_reply("ficus", "hello")

    @staticmethod
    def test_requires_content(forum):
        with pytest.raises(ValidationFailedError):
            forum.add_reply("ficus", "")

    @staticmethod
    def test_unknown_post_leaves_forum_unchanged(forum, store):
        collections = (Collection.FORUM_POSTS.value, Collection.FORUM_CATEGORIES.value)
        before = [store.find(name) for name in collections]
        with pytest.raises(NotFoundError):
            forum.add_reply("missing", "hello")
        assert [store.find(name) for name in collections] == before
        assert len(before[0]) == 4

    @staticmethod
    def test_concurrent_replies_are_all_kept(forum):
        with ThreadPoolExecutor(max_workers=8) as pool:
            replies = list(
                pool.map(lambda n: forum.add_reply("ficus", f"reply {n}"), range(40))
            )

        post = forum.get_post_by_id("ficus")
        assert post is not None
        assert post.reply_count == 40
        assert {r.id for r in post.replies} == {r.id for r in replies}
