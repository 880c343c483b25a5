"""Interface for the Gallery Catalog."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from . import fields
from .fields import Document

# pylint: disable=too-many-instance-attributes

# --- Read Models ---


@dataclass(frozen=True, slots=True)
class Gallery:
    """A photo gallery.

    Conventions:
      - `sort_order` is None when the gallery has no explicit position.
      - `total_photos` is display data from the source; it is not recounted.
    """

    id: str
    name: str
    description: str = ""
    cover_image_url: str | None = None
    total_photos: int = 0
    view_count: int = 0
    sort_order: int | None = None
    created_date: datetime | None = None

    @classmethod
    def from_document(cls, doc: Document) -> Gallery:
        """Build a gallery from its stored document."""
        return cls(
            id=fields.doc_id(doc),
            name=fields.text(doc, "name"),
            description=fields.text(doc, "description"),
            cover_image_url=fields.optional_text(doc, "coverImageUrl"),
            total_photos=fields.integer(doc, "totalPhotos"),
            view_count=fields.integer(doc, "viewCount"),
            sort_order=fields.optional_int(doc, "sortOrder"),
            created_date=fields.timestamp(doc, "createdDate"),
        )


@dataclass(frozen=True, slots=True)
class Photo:
    """A photo belonging to exactly one gallery."""

    id: str
    gallery_id: str
    title: str = ""
    alt_text: str = ""
    thumbnail_url: str | None = None
    original_url: str | None = None
    shoot_date: datetime | None = None

    @property
    def src(self) -> str:
        """Best full-size source for display."""
        return self.original_url or self.thumbnail_url or ""

    @property
    def thumbnail_src(self) -> str:
        """Thumbnail source, falling back to the full-size image."""
        return self.thumbnail_url or self.src

    @classmethod
    def from_document(cls, doc: Document) -> Photo:
        """Build a photo from its stored document.

        `originalUrl` falls back to the `imageUrl`/`url` keys used by older fixtures.
        """
        original = (
            fields.optional_text(doc, "originalUrl")
            or fields.optional_text(doc, "imageUrl")
            or fields.optional_text(doc, "url")
        )
        return cls(
            id=fields.doc_id(doc),
            gallery_id=fields.text(doc, "galleryId"),
            title=fields.text(doc, "title"),
            alt_text=fields.text(doc, "altText"),
            thumbnail_url=fields.optional_text(doc, "thumbnailUrl"),
            original_url=original,
            shoot_date=fields.timestamp(doc, "shootDate"),
        )


# --- Interface ---


class GalleryCatalog(abc.ABC):
    """Interface for browsing photo galleries."""

    KIND: ClassVar[str] = "gallery"

    @abc.abstractmethod
    def list_galleries(self) -> list[Gallery]:
        """Return every gallery in display order.

        Order: ascending `sort_order` (galleries without one last), then newest
        `created_date` first, then id.
        """

    @abc.abstractmethod
    def get_gallery_by_id(self, gallery_id: str) -> Gallery | None:
        """Return the gallery with the given id, or None."""

    @abc.abstractmethod
    def list_photos(self, gallery_id: str) -> list[Photo]:
        """Return the photos of a gallery; empty for unknown galleries."""

    @abc.abstractmethod
    def get_photo_by_id(self, photo_id: str) -> Photo | None:
        """Return the photo with the given id, or None."""

    @abc.abstractmethod
    def recent_photos(self, limit: int = 10) -> list[Photo]:
        """Return up to `limit` photos with the latest `shoot_date`, newest first.

        Undated photos sort last. Never reorders the underlying collection.
        """
