"""Dataset loader.

Reads the JSON fixtures that seed the catalogs. Each collection lives in its
own file (see `Collection.fixture`) as a JSON array of flat objects keyed by
`_id`. Records keep their file order.

The packaged fixtures under ``brbs/datasets/fixtures`` are used unless a
directory is given (or ``BRBS_DATA_DIR`` is set, via bootstrap).
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from importlib.resources import files
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Any

from brbs.interfaces.collection import Collection
from brbs.interfaces.document_store import ID_KEY, DocumentStore

logger = logging.getLogger(__name__)

Record = dict[str, Any]


class DatasetError(Exception):
    """Raised when fixture data is unreadable or violates a data-model invariant."""


@dataclass(slots=True)
class Dataset:
    """Records per collection, in source order."""

    records: dict[Collection, list[Record]] = field(default_factory=dict)

    def __getitem__(self, collection: Collection) -> list[Record]:
        return self.records.get(collection, [])

    def __iter__(self) -> Iterator[tuple[Collection, list[Record]]]:
        for collection in Collection:
            yield collection, self[collection]

    def __len__(self) -> int:
        return sum(len(records) for records in self.records.values())

    def validate(self) -> Dataset:
        """Check the data-model invariants.

        - every record has an `_id`, unique within its collection;
        - every photo's `galleryId` names an existing gallery;
        - every forum post's `categoryId` names an existing category;
        - no two active members share an email (case-insensitive).

        Returns:
            The dataset itself, for chaining.

        Raises:
            DatasetError: On the first violation found.
        """
        for collection, records in self:
            self._check_ids(collection, records)

        self._check_references(
            Collection.PHOTOS, "galleryId", Collection.GALLERIES
        )
        self._check_references(
            Collection.FORUM_POSTS, "categoryId", Collection.FORUM_CATEGORIES
        )

        seen: dict[str, str] = {}
        for member in self[Collection.MEMBERS]:
            if not member.get("isActive"):
                continue
            email = str(member.get("email") or "").strip().lower()
            if not email:
                continue
            if email in seen:
                raise DatasetError(
                    f"members {member[ID_KEY]} and {seen[email]} are both active "
                    f"with email {email!r}"
                )
            seen[email] = member[ID_KEY]
        return self

    @staticmethod
    def _check_ids(collection: Collection, records: list[Record]) -> None:
        ids: set[str] = set()
        for index, record in enumerate(records):
            doc_id = record.get(ID_KEY)
            if doc_id is None or not str(doc_id).strip():
                raise DatasetError(
                    f"{collection.value}[{index}] has no {ID_KEY!r}"
                )
            if doc_id in ids:
                raise DatasetError(f"{collection.value} has duplicate id {doc_id!r}")
            ids.add(doc_id)

    def _check_references(
        self, child: Collection, key: str, parent: Collection
    ) -> None:
        parents = {record[ID_KEY] for record in self[parent]}
        for record in self[child]:
            if record.get(key) not in parents:
                raise DatasetError(
                    f"{child.value} {record[ID_KEY]} references unknown "
                    f"{parent.value} {record.get(key)!r}"
                )


def load_dataset(source: Path | Traversable | None = None) -> Dataset:
    """Load every collection's fixture file.

    Args:
        source: Directory holding the fixture files. Defaults to the packaged
            fixtures.

    Returns:
        The loaded (unvalidated) dataset. Missing files give empty collections.

    Raises:
        DatasetError: If a file is not valid JSON or not an array of objects.
    """
    root = source if source is not None else files("brbs.datasets").joinpath("fixtures")
    dataset = Dataset()
    for collection in Collection:
        path = root.joinpath(collection.fixture)
        if not path.is_file():
            logger.debug("No fixture for %s at %s", collection.value, path)
            continue
        dataset.records[collection] = _read_records(path)
    logger.info("Loaded %d records from %s", len(dataset), root)
    return dataset


def seed_store(store: DocumentStore, dataset: Dataset) -> int:
    """Insert every dataset record into `store`, in dataset order.

    Returns:
        The number of inserted documents.
    """
    count = 0
    for collection, records in dataset:
        for record in records:
            store.insert(collection.value, record)
            count += 1
        logger.debug("Seeded %d %s", len(records), collection.value)
    return count


def _read_records(path: Path | Traversable) -> list[Record]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise DatasetError(f"{path.name} is not valid JSON: {e}") from e
    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        raise DatasetError(f"{path.name} must contain a JSON array of objects")
    return data
