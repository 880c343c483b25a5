"""Interface for the read-only Member Directory."""

from __future__ import annotations

import abc
import re
from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from . import fields
from .fields import Document

# pylint: disable=too-many-instance-attributes

_COLLECTION_SPLIT = re.compile(r"[,;\n]+")


@dataclass(frozen=True, slots=True)
class Member:
    """A society member.

    `bonsai_collection` is stored as one delimited string of tree names; use
    `collection` for the parsed names.
    """

    id: str
    first_name: str
    last_name: str
    email: str
    membership_level: str | None = None
    is_active: bool = False
    expiration_date: datetime | None = None
    bonsai_collection: str = ""

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def collection(self) -> tuple[str, ...]:
        """Tree names parsed from `bonsai_collection`."""
        return tuple(
            name.strip()
            for name in _COLLECTION_SPLIT.split(self.bonsai_collection)
            if name.strip()
        )

    @classmethod
    def from_document(cls, doc: Document) -> Member:
        return cls(
            id=fields.doc_id(doc),
            first_name=fields.text(doc, "firstName"),
            last_name=fields.text(doc, "lastName"),
            email=fields.text(doc, "email"),
            membership_level=fields.optional_text(doc, "membershipLevel"),
            is_active=fields.flag(doc, "isActive"),
            expiration_date=fields.timestamp(doc, "expirationDate"),
            bonsai_collection=fields.text(doc, "bonsaiCollection"),
        )


@dataclass(frozen=True, slots=True)
class MembershipStatus:
    """Result of a membership lookup by email."""

    is_member: bool
    is_active: bool = False
    level: str | None = None
    days_remaining: int | None = None


class MemberDirectory(abc.ABC):
    """Interface for looking up members."""

    KIND: ClassVar[str] = "member"

    @abc.abstractmethod
    def get_member(self, member_id: str) -> Member | None:
        """Return the member with the given id, or None."""

    @abc.abstractmethod
    def find_active_member(self, email: str) -> Member | None:
        """Return the active member with this email (case-insensitive), or None."""

    @abc.abstractmethod
    def list_active_members(self) -> list[Member]:
        """Return active members in source order."""

    @abc.abstractmethod
    def membership_status(
        self, email: str, now: datetime | None = None
    ) -> MembershipStatus:
        """Return the membership status for an email address.

        Active means the member is flagged active and has not yet expired
        at `now` (a naive value is read as UTC).
        """
