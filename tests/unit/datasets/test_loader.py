"""Unit tests for the fixture dataset loader."""

import json
from pathlib import Path

import pytest

from brbs.adapters.document_store import InMemoryDocumentStore
from brbs.datasets import Dataset, DatasetError, load_dataset, seed_store
from brbs.interfaces.collection import Collection

# pylint: disable=magic-value-comparison,redefined-outer-name

PACKAGED_DOCUMENTS = 46


def write_fixture(directory: Path, collection: Collection, records) -> None:
    (directory / collection.fixture).write_text(json.dumps(records), encoding="utf-8")


class TestPackagedFixtures:
    """The fixtures shipped with the package."""

    @staticmethod
    def test_load_and_validate():
        dataset = load_dataset().validate()
        assert len(dataset) == PACKAGED_DOCUMENTS
        assert all(records for _, records in dataset)

    @staticmethod
    def test_keep_file_order():
        steps = load_dataset()[Collection.BEGINNERS_GUIDE]
        assert [step["step"] for step in steps] != sorted(step["step"] for step in steps)


class TestLoadDataset:
    """load_dataset over a directory"""

    @staticmethod
    def test_missing_files_give_empty_collections(tmp_path):
        write_fixture(tmp_path, Collection.VENDORS, [{"_id": "v1", "name": "Nursery"}])
        dataset = load_dataset(tmp_path)
        assert len(dataset) == 1
        assert dataset[Collection.EVENTS] == []
        assert dataset[Collection.VENDORS] == [{"_id": "v1", "name": "Nursery"}]

    @staticmethod
    def test_invalid_json(tmp_path):
        (tmp_path / Collection.EVENTS.fixture).write_text("[{", encoding="utf-8")
        with pytest.raises(DatasetError, match="Events.json is not valid JSON"):
            load_dataset(tmp_path)

    @staticmethod
    @pytest.mark.parametrize("content", [{"_id": "e1"}, ["e1"], "events"])
    def test_must_be_array_of_objects(tmp_path, content):
        write_fixture(tmp_path, Collection.EVENTS, content)
        with pytest.raises(DatasetError, match="JSON array of objects"):
            load_dataset(tmp_path)


class TestValidate:
    """Dataset.validate"""

    @staticmethod
    def test_missing_id():
        dataset = Dataset({Collection.EVENTS: [{"_id": "e1"}, {"title": "x"}]})
        with pytest.raises(DatasetError, match=r"events\[1\] has no '_id'"):
            dataset.validate()

    @staticmethod
    def test_duplicate_id():
        dataset = Dataset({Collection.ARTICLES: [{"_id": "a"}, {"_id": "a"}]})
        with pytest.raises(DatasetError, match="duplicate id 'a'"):
            dataset.validate()

    @staticmethod
    def test_photo_must_reference_a_gallery():
        dataset = Dataset(
            {
                Collection.GALLERIES: [{"_id": "g1"}],
                Collection.PHOTOS: [{"_id": "p1", "galleryId": "g2"}],
            }
        )
        with pytest.raises(DatasetError, match="photos p1 references unknown galleries"):
            dataset.validate()

    @staticmethod
    def test_post_must_reference_a_category():
        dataset = Dataset({Collection.FORUM_POSTS: [{"_id": "p1"}]})
        with pytest.raises(DatasetError, match="forum_categories None"):
            dataset.validate()

    @staticmethod
    def test_active_emails_are_unique_ignoring_case():
        dataset = Dataset(
            {
                Collection.MEMBERS: [
                    {"_id": "m1", "email": "Dana@Example.com", "isActive": True},
                    {"_id": "m2", "email": "dana@example.com", "isActive": True},
                ]
            }
        )
        with pytest.raises(DatasetError, match="m2 and m1 are both active"):
            dataset.validate()

    @staticmethod
    def test_inactive_member_may_reuse_email():
        dataset = Dataset(
            {
                Collection.MEMBERS: [
                    {"_id": "m1", "email": "dana@example.com", "isActive": True},
                    {"_id": "m2", "email": "dana@example.com", "isActive": False},
                ]
            }
        )
        assert dataset.validate() is dataset


def test_seed_store_inserts_everything_in_order():
    store = InMemoryDocumentStore()
    dataset = Dataset(
        {
            Collection.EVENTS: [{"_id": "e2"}, {"_id": "e1"}],
            Collection.VENDORS: [{"_id": "v1"}],
        }
    )
    assert seed_store(store, dataset) == 3
    assert [doc.doc_id for doc in store.find(Collection.EVENTS.value)] == ["e2", "e1"]
