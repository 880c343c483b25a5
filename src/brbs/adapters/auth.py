"""ActorProvider adapters."""

from __future__ import annotations

import logging

from brbs.interfaces.auth import Actor, ActorProvider
from brbs.interfaces.catalog.member_directory import MemberDirectory

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


class StaticActorProvider(ActorProvider):
    """Always reports the same actor (or nobody)."""

    def __init__(self, actor: Actor | None = None) -> None:
        self._actor = actor

    def current_actor(self) -> Actor | None:
        return self._actor


class MemberActorProvider(ActorProvider):
    """Resolves a signed-in member id against the member directory.

    Unknown or inactive members count as signed out.
    """

    def __init__(self, directory: MemberDirectory, member_id: str | None) -> None:
        self._directory = directory
        self._member_id = member_id

    def current_actor(self) -> Actor | None:
        if not self._member_id:
            return None
        member = self._directory.get_member(self._member_id)
        if member is None or not member.is_active:
            logger.debug("Member %s is not an active member", self._member_id)
            return None
        return Actor(id=member.id, display_name=member.display_name)
