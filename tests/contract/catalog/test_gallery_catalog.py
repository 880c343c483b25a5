"""Contract tests for GalleryCatalog."""

from brbs.interfaces.collection import Collection

# pylint: disable=magic-value-comparison


def ids(records) -> list[str]:
    return [record.id for record in records]


def test_gallery_display_order(seed, galleries, make_gallery_doc):
    seed(
        Collection.GALLERIES,
        make_gallery_doc("undated"),
        make_gallery_doc("old", createdDate="2024-01-01"),
        make_gallery_doc("second", sortOrder=2),
        make_gallery_doc("new", createdDate="2025-06-01"),
        make_gallery_doc("first", sortOrder=1, createdDate="2020-01-01"),
        make_gallery_doc("a-undated"),
    )
    assert ids(galleries.list_galleries()) == [
        "first",
        "second",
        "new",
        "old",
        "a-undated",
        "undated",
    ]


def test_get_gallery(seed, galleries, make_gallery_doc):
    seed(Collection.GALLERIES, make_gallery_doc("g1", name="Spring Show"))
    gallery = galleries.get_gallery_by_id("g1")
    assert gallery is not None
    assert gallery.name == "Spring Show"
    assert galleries.get_gallery_by_id("g2") is None
    assert galleries.get_gallery_by_id("") is None


def test_photos_belong_to_their_gallery(seed, galleries, make_gallery_doc, make_photo_doc):
    seed(Collection.GALLERIES, make_gallery_doc("g1"), make_gallery_doc("g2"))
    seed(
        Collection.PHOTOS,
        make_photo_doc("p1", galleryId="g1"),
        make_photo_doc("p2", galleryId="g2"),
        make_photo_doc("p3", galleryId="g1"),
    )
    assert ids(galleries.list_photos("g1")) == ["p1", "p3"]
    assert galleries.list_photos("g-unknown") == []
    assert galleries.list_photos("") == []


def test_get_photo(seed, galleries, make_photo_doc):
    seed(Collection.PHOTOS, make_photo_doc("p1", url="https://img.example/1.jpg", originalUrl=None))
    photo = galleries.get_photo_by_id("p1")
    assert photo is not None
    assert photo.src == "https://img.example/1.jpg"
    assert galleries.get_photo_by_id("p9") is None


def test_recent_photos_newest_first_with_undated_last(seed, galleries, make_photo_doc):
    seed(
        Collection.PHOTOS,
        make_photo_doc("undated"),
        make_photo_doc("apr", shootDate="2025-04-19T14:10:00Z"),
        make_photo_doc("jun", shootDate="2025-06-10"),
        make_photo_doc("jan", shootDate="2025-01-02"),
    )
    assert ids(galleries.recent_photos(limit=3)) == ["jun", "apr", "jan"]
    assert ids(galleries.recent_photos()) == ["jun", "apr", "jan", "undated"]
    assert galleries.recent_photos(limit=0) == []


def test_recent_photos_does_not_reorder_listings(seed, galleries, make_photo_doc):
    seed(
        Collection.PHOTOS,
        make_photo_doc("p1", galleryId="g", shootDate="2025-01-01"),
        make_photo_doc("p2", galleryId="g", shootDate="2025-06-01"),
    )
    galleries.recent_photos()
    assert ids(galleries.list_photos("g")) == ["p1", "p2"]
