"""Catalog interfaces for BRBS."""

from .event_catalog import EventCatalog
from .forum_catalog import ForumCatalog
from .gallery_catalog import GalleryCatalog
from .learning_catalog import LearningCatalog
from .member_directory import MemberDirectory

__all__ = [
    "EventCatalog",
    "ForumCatalog",
    "GalleryCatalog",
    "LearningCatalog",
    "MemberDirectory",
]
