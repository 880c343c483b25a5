"""Interface for the Event Catalog."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import ClassVar

from brbs.utils.text import normalize_filter

from . import fields
from .fields import Document

# pylint: disable=too-many-instance-attributes

DEFAULT_CATEGORY_COLOR = "#6B8E6F"

#: Calendar colours per event category.
CATEGORY_COLORS = {
    "workshop": "#6B8E6F",
    "meeting": "#4A4A4A",
    "demonstration": "#8B7355",
    "exhibition": "#D4A574",
    "social": "#5CB85C",
    "field-trip": "#5BC0DE",
    "competition": "#F0AD4E",
}

# --- Read Models ---


@dataclass(frozen=True, slots=True)
class Event:
    """A society event (workshop, meeting, exhibition...)."""

    id: str
    title: str
    description: str = ""
    start_date: datetime | None = None
    end_date: datetime | None = None
    location: str | None = None
    category: str | None = None
    difficulty: str | None = None
    instructor: str | None = None
    max_attendees: int | None = None
    current_attendees: int = 0
    price: float = 0.0
    featured: bool = False
    tags: tuple[str, ...] = ()

    @property
    def spots_remaining(self) -> int | None:
        """Open seats, or None when attendance is unlimited."""
        if not self.max_attendees:
            return None
        return max(self.max_attendees - self.current_attendees, 0)

    @classmethod
    def from_document(cls, doc: Document) -> Event:
        return cls(
            id=fields.doc_id(doc),
            title=fields.text(doc, "title"),
            description=fields.text(doc, "description"),
            start_date=fields.timestamp(doc, "startDate"),
            end_date=fields.timestamp(doc, "endDate"),
            location=fields.optional_text(doc, "location"),
            category=fields.optional_text(doc, "category"),
            difficulty=fields.optional_text(doc, "difficulty"),
            instructor=fields.optional_text(doc, "instructor"),
            max_attendees=fields.optional_int(doc, "maxAttendees"),
            current_attendees=fields.integer(doc, "currentAttendees"),
            price=fields.optional_float(doc, "price") or 0.0,
            featured=fields.flag(doc, "featured"),
            tags=fields.string_tuple(doc, "tags"),
        )


@dataclass(frozen=True, slots=True)
class EventStats:
    """Headline numbers for the events page."""

    total: int
    upcoming: int
    past: int
    total_registrations: int


@dataclass(frozen=True, slots=True)
class CalendarEntry:
    """An event projected for calendar widgets."""

    id: str
    title: str
    start: datetime
    end: datetime
    url: str
    color: str


# --- Query Model ---


class EventStatus(str, Enum):
    """Time window filter for events."""

    ALL = "all"
    UPCOMING = "upcoming"
    PAST = "past"


@dataclass(frozen=True, slots=True)
class EventFilters:
    """Conjunctive event filters.

    `None`, blank strings and the literal ``"all"`` disable the category and
    difficulty filters. `search` matches the title or description.
    """

    category: str | None = None
    difficulty: str | None = None
    status: EventStatus = EventStatus.ALL
    search: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "category", normalize_filter(self.category))
        object.__setattr__(self, "difficulty", normalize_filter(self.difficulty))
        object.__setattr__(self, "status", EventStatus(self.status))
        search = self.search.strip() if self.search else None
        object.__setattr__(self, "search", search or None)


# --- Interface ---


class EventCatalog(abc.ABC):
    """Interface for the events calendar."""

    KIND: ClassVar[str] = "event"

    @abc.abstractmethod
    def list_events(
        self, filters: EventFilters | None = None, *, now: datetime | None = None
    ) -> list[Event]:
        """Return matching events in source order.

        Args:
            filters: Optional filters; None returns every event.
            now: Reference time for the upcoming/past split (defaults to now).
                A naive value is read as UTC.
        """

    @abc.abstractmethod
    def get_event_by_id(self, event_id: str) -> Event | None:
        """Return the event with the given id, or None."""

    @abc.abstractmethod
    def list_event_categories(self) -> list[str]:
        """Return the distinct event categories in first-seen order."""

    @abc.abstractmethod
    def event_stats(self, now: datetime | None = None) -> EventStats:
        """Return totals for all, upcoming and past events plus registrations."""

    @abc.abstractmethod
    def calendar_events(self, start: datetime, end: datetime) -> list[CalendarEntry]:
        """Return calendar entries for events starting within `[start, end]`.

        Naive bounds are read as UTC.
        """
