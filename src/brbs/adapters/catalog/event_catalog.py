"""Document-backed EventCatalog implementation."""

from __future__ import annotations

import logging
from datetime import datetime

from brbs.interfaces.catalog.event_catalog import (
    CATEGORY_COLORS,
    DEFAULT_CATEGORY_COLOR,
    CalendarEntry,
    Event,
    EventCatalog,
    EventFilters,
    EventStats,
    EventStatus,
)
from brbs.interfaces.collection import Collection
from brbs.utils.text import any_contains
from brbs.utils.timestamps import as_utc, utc_now

from .base import DocumentCatalogBase

logger = logging.getLogger(__name__)

EVENT_DETAILS_URL = "/event-details?eventId={event_id}"


def is_upcoming(event: Event, now: datetime) -> bool:
    """An event is upcoming if it starts after `now`; undated events never are."""
    return event.start_date is not None and event.start_date > now


def filter_events(
    events: list[Event], filters: EventFilters, now: datetime
) -> list[Event]:
    """Apply category, difficulty, status and search filters, in that order."""
    results = events
    if filters.category is not None:
        results = [e for e in results if e.category == filters.category]
    if filters.difficulty is not None:
        results = [e for e in results if e.difficulty == filters.difficulty]
    if filters.status is EventStatus.UPCOMING:
        results = [e for e in results if is_upcoming(e, now)]
    elif filters.status is EventStatus.PAST:
        results = [
            e for e in results if e.start_date is not None and not is_upcoming(e, now)
        ]
    if filters.search is not None:
        term = filters.search.lower()
        results = [e for e in results if any_contains((e.title, e.description), term)]
    return results


class DocumentEventCatalog(DocumentCatalogBase, EventCatalog):
    """EventCatalog over the `events` collection."""

    KIND = EventCatalog.KIND

    def list_events(
        self, filters: EventFilters | None = None, *, now: datetime | None = None
    ) -> list[Event]:
        events = self._load(Collection.EVENTS, Event.from_document)
        now = as_utc(now) if now is not None else utc_now()
        return filter_events(events, filters or EventFilters(), now)

    def get_event_by_id(self, event_id: str) -> Event | None:
        return self._load_one(Collection.EVENTS, event_id, Event.from_document)

    def list_event_categories(self) -> list[str]:
        events = self._load(Collection.EVENTS, Event.from_document)
        return list(dict.fromkeys(e.category for e in events if e.category))

    def event_stats(self, now: datetime | None = None) -> EventStats:
        now = as_utc(now) if now is not None else utc_now()
        events = self._load(Collection.EVENTS, Event.from_document)
        upcoming = sum(1 for e in events if is_upcoming(e, now))
        past = sum(1 for e in events if e.start_date is not None) - upcoming
        return EventStats(
            total=len(events),
            upcoming=upcoming,
            past=past,
            total_registrations=sum(e.current_attendees for e in events),
        )

    def calendar_events(self, start: datetime, end: datetime) -> list[CalendarEntry]:
        start, end = as_utc(start), as_utc(end)
        events = self._load(Collection.EVENTS, Event.from_document)
        entries = []
        for event in events:
            if event.start_date is None or not start <= event.start_date <= end:
                continue
            color = CATEGORY_COLORS.get(event.category or "", DEFAULT_CATEGORY_COLOR)
            entries.append(
                CalendarEntry(
                    id=event.id,
                    title=event.title,
                    start=event.start_date,
                    end=event.end_date or event.start_date,
                    url=EVENT_DETAILS_URL.format(event_id=event.id),
                    color=color,
                )
            )
        logger.debug("Calendar %s..%s: %d events", start, end, len(entries))
        return entries
