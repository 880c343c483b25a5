"""Document store adapters."""

from .memory import InMemoryDocumentStore
from .sqlalchemy_store import SqlAlchemyDocumentStore

__all__ = ["InMemoryDocumentStore", "SqlAlchemyDocumentStore"]
