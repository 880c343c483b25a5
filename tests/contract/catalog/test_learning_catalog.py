"""Contract tests for LearningCatalog."""

import pytest

from brbs.interfaces.catalog.learning_catalog import ArticleFilters
from brbs.interfaces.collection import Collection

# pylint: disable=magic-value-comparison,redefined-outer-name


def ids(records) -> list[str]:
    return [record.id for record in records]


@pytest.fixture
def articles(seed, make_article_doc):
    seed(
        Collection.ARTICLES,
        make_article_doc(
            "wiring",
            title="Wiring Basics",
            category="Wiring",
            difficulty="beginner",
            tags=["wire", "technique"],
            publishDate="2025-05-03",
        ),
        make_article_doc(
            "undated",
            title="Pruning notes",
            category="Pruning",
            difficulty="advanced",
            tags=[],
            publishDate=None,
        ),
        make_article_doc(
            "pruning",
            title="Structural Pruning",
            category="Pruning",
            difficulty="intermediate",
            tags=["cuts"],
            content="Use concave cutters for wiring scars.",
            publishDate="2025-02-14",
        ),
        make_article_doc(
            "juniper",
            title="Juniper Care",
            category="Species",
            difficulty="beginner",
            tags=["Juniper"],
            publishDate="2025-08-22",
        ),
    )


@pytest.mark.usefixtures("articles")
class TestListArticles:
    """list_articles"""

    @staticmethod
    def test_newest_first_undated_last(learning):
        assert ids(learning.list_articles()) == ["juniper", "wiring", "pruning", "undated"]

    @staticmethod
    def test_category_filter(learning):
        result = learning.list_articles(ArticleFilters(category="Pruning"))
        assert ids(result) == ["pruning", "undated"]

    @staticmethod
    def test_filters_are_conjunctive(learning):
        result = learning.list_articles(
            ArticleFilters(category="Pruning", difficulty="advanced")
        )
        assert ids(result) == ["undated"]

    @staticmethod
    def test_search_matches_title_or_tag_not_content(learning):
        assert ids(learning.list_articles(ArticleFilters(search="WIR"))) == ["wiring"]
        assert ids(learning.list_articles(ArticleFilters(search="juniper"))) == ["juniper"]
        assert ids(learning.list_articles(ArticleFilters(search="technique"))) == ["wiring"]

    @staticmethod
    def test_all_and_blank_disable_filters(learning):
        result = learning.list_articles(
            ArticleFilters(category="all", difficulty="", search="  ")
        )
        assert len(result) == 4

    @staticmethod
    def test_no_match_is_empty(learning):
        assert learning.list_articles(ArticleFilters(category="Styling")) == []


@pytest.mark.usefixtures("articles")
def test_categories_in_first_seen_order(learning):
    assert learning.list_categories() == ["Wiring", "Pruning", "Species"]


@pytest.mark.usefixtures("articles")
def test_get_article(learning):
    article = learning.get_article_by_id("pruning")
    assert article is not None
    assert article.title == "Structural Pruning"
    assert learning.get_article_by_id("missing") is None


def test_resources_and_vendors_as_loaded(seed, learning, make_resource_doc):
    seed(Collection.RESOURCES, make_resource_doc("r2"), make_resource_doc("r1"))
    seed(
        Collection.VENDORS,
        {"_id": "v1", "name": "Nursery", "location": "Asheville, NC"},
    )
    assert ids(learning.list_resources()) == ["r2", "r1"]
    (vendor,) = learning.list_vendors()
    assert vendor.location == "Asheville, NC"


def test_beginner_pathway_sorted_by_step(seed, learning):
    seed(
        Collection.BEGINNERS_GUIDE,
        {"_id": "s3", "step": 3, "title": "Water"},
        {"_id": "s1", "step": 1, "title": "Choose a tree"},
        {"_id": "s2", "step": "2", "title": "Find a spot"},
    )
    assert [step.step for step in learning.beginner_pathway()] == [1, 2, 3]


def test_empty_collections(learning):
    assert learning.list_articles() == []
    assert learning.list_categories() == []
    assert learning.beginner_pathway() == []
