"""Authentication port.

The forum's write operations only need to know whether someone is signed in
and, if so, their id and display name. Session handling lives outside BRBS;
adapters answer the single question "who is acting right now?".
"""

from __future__ import annotations

import abc
from dataclasses import dataclass

# pylint: disable=too-few-public-methods


@dataclass(frozen=True, slots=True)
class Actor:
    """The authenticated identity attempting a write."""

    id: str
    display_name: str


class ActorProvider(abc.ABC):
    """Supplies the current actor, if any."""

    @abc.abstractmethod
    def current_actor(self) -> Actor | None:
        """Return the signed-in actor, or None when nobody is signed in."""
