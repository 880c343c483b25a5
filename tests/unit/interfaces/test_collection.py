"""Unit tests for brbs.interfaces.collection."""

from brbs.interfaces.collection import Collection


def test_every_collection_has_a_distinct_fixture_file():
    files = [collection.fixture for collection in Collection]
    assert len(set(files)) == len(Collection)
    assert all(name.endswith(".json") for name in files)


def test_values_are_store_collection_names():
    assert Collection.FORUM_POSTS.value == "forum_posts"
    assert Collection("photos") is Collection.PHOTOS
    assert Collection.GALLERIES.fixture == "PhotoGalleries.json"
