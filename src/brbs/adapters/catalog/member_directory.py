"""Document-backed MemberDirectory implementation."""

from __future__ import annotations

import math
from datetime import datetime

from brbs.interfaces.catalog.member_directory import (
    Member,
    MemberDirectory,
    MembershipStatus,
)
from brbs.interfaces.collection import Collection
from brbs.utils.timestamps import as_utc, utc_now

from .base import DocumentCatalogBase

SECONDS_PER_DAY = 86_400


class DocumentMemberDirectory(DocumentCatalogBase, MemberDirectory):
    """MemberDirectory over the `members` collection."""

    KIND = MemberDirectory.KIND

    def get_member(self, member_id: str) -> Member | None:
        return self._load_one(Collection.MEMBERS, member_id, Member.from_document)

    def find_active_member(self, email: str) -> Member | None:
        wanted = (email or "").strip().lower()
        if not wanted:
            return None
        for member in self.list_active_members():
            if member.email.lower() == wanted:
                return member
        return None

    def list_active_members(self) -> list[Member]:
        members = self._load(Collection.MEMBERS, Member.from_document)
        return [member for member in members if member.is_active]

    def membership_status(
        self, email: str, now: datetime | None = None
    ) -> MembershipStatus:
        wanted = (email or "").strip().lower()
        members = self._load(Collection.MEMBERS, Member.from_document)
        matches = [m for m in members if wanted and m.email.lower() == wanted]
        if not matches:
            return MembershipStatus(is_member=False)
        # prefer the active record when an address was reused
        member = next((m for m in matches if m.is_active), matches[0])

        now = as_utc(now) if now is not None else utc_now()
        days_remaining = None
        if member.expiration_date is not None:
            seconds = (member.expiration_date - now).total_seconds()
            days_remaining = math.ceil(seconds / SECONDS_PER_DAY)
        return MembershipStatus(
            is_member=True,
            is_active=member.is_active
            and days_remaining is not None
            and days_remaining > 0,
            level=member.membership_level,
            days_remaining=days_remaining,
        )
