"""Document-backed catalog adapters."""

from .event_catalog import DocumentEventCatalog
from .forum_catalog import DocumentForumCatalog
from .gallery_catalog import DocumentGalleryCatalog
from .learning_catalog import DocumentLearningCatalog
from .member_directory import DocumentMemberDirectory

__all__ = [
    "DocumentEventCatalog",
    "DocumentForumCatalog",
    "DocumentGalleryCatalog",
    "DocumentLearningCatalog",
    "DocumentMemberDirectory",
]
