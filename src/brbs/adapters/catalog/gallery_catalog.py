"""Document-backed GalleryCatalog implementation."""

from __future__ import annotations

import logging
import math

from brbs.interfaces.catalog.gallery_catalog import Gallery, GalleryCatalog, Photo
from brbs.interfaces.collection import Collection

from .base import DocumentCatalogBase

logger = logging.getLogger(__name__)


def gallery_sort_key(gallery: Gallery) -> tuple[float, float, str]:
    """Total display order: sort_order ascending (missing last), newest first, id."""
    sort_order = math.inf if gallery.sort_order is None else float(gallery.sort_order)
    created = (
        -gallery.created_date.timestamp() if gallery.created_date else math.inf
    )
    return sort_order, created, gallery.id


class DocumentGalleryCatalog(DocumentCatalogBase, GalleryCatalog):
    """GalleryCatalog over the `galleries` and `photos` collections."""

    KIND = GalleryCatalog.KIND

    def list_galleries(self) -> list[Gallery]:
        galleries = self._load(Collection.GALLERIES, Gallery.from_document)
        return sorted(galleries, key=gallery_sort_key)

    def get_gallery_by_id(self, gallery_id: str) -> Gallery | None:
        return self._load_one(Collection.GALLERIES, gallery_id, Gallery.from_document)

    def list_photos(self, gallery_id: str) -> list[Photo]:
        if not gallery_id:
            return []
        return self._load(
            Collection.PHOTOS, Photo.from_document, where={"galleryId": gallery_id}
        )

    def get_photo_by_id(self, photo_id: str) -> Photo | None:
        return self._load_one(Collection.PHOTOS, photo_id, Photo.from_document)

    def recent_photos(self, limit: int = 10) -> list[Photo]:
        if limit <= 0:
            return []
        photos = self._load(Collection.PHOTOS, Photo.from_document)
        dated = [photo for photo in photos if photo.shoot_date is not None]
        undated = [photo for photo in photos if photo.shoot_date is None]
        dated.sort(key=lambda photo: photo.shoot_date, reverse=True)  # type: ignore[arg-type,return-value]
        recent = (dated + undated)[:limit]
        logger.debug("Selected %d of %d photos as recent", len(recent), len(photos))
        return recent
