"""Read-only listing commands: search, articles, galleries, photos and events.

Listings are printed as Rich tables on stdout. Catalog reads never fail; an
unreachable store shows up as a warning on stderr and an empty table.
"""

from __future__ import annotations

import click
from rich.table import Table

from brbs.interfaces.catalog.event_catalog import Event, EventFilters, EventStatus
from brbs.interfaces.catalog.learning_catalog import Article, ArticleFilters, Resource

from .helpers import warn
from .helpers.app import app_container, fmt_date, new_table, stdout_console


def _events_table(title: str, rows: list[Event]) -> Table:
    table = new_table(title, "ID", "Title", "Starts", "Category", "Location", "Spots")
    for event in rows:
        spots = event.spots_remaining
        table.add_row(
            event.id,
            event.title,
            fmt_date(event.start_date, with_time=True),
            event.category or "-",
            event.location or "-",
            "unlimited" if spots is None else str(spots),
        )
    return table


def _articles_table(title: str, rows: list[Article]) -> Table:
    table = new_table(title, "ID", "Title", "Category", "Difficulty", "Published")
    for article in rows:
        table.add_row(
            article.id,
            article.title,
            article.category or "-",
            article.difficulty or "-",
            fmt_date(article.publish_date),
        )
    return table


def _resources_table(title: str, rows: list[Resource]) -> Table:
    table = new_table(title, "ID", "Name", "Category", "URL")
    for resource in rows:
        table.add_row(
            resource.id, resource.name, resource.category or "-", resource.url or "-"
        )
    return table


@click.command()
@click.argument("query")
def search(query: str) -> None:
    """Search events, articles and resources for QUERY."""
    results = app_container().search.search_all(query)
    if not results.total:
        warn(f"No results for {query!r}.")
        return
    console = stdout_console()
    if results.events:
        console.print(_events_table("Events", results.events))
    if results.articles:
        console.print(_articles_table("Articles", results.articles))
    if results.resources:
        console.print(_resources_table("Resources", results.resources))


@click.command()
@click.option("--category", help="Only articles in this category ('all' for any).")
@click.option("--difficulty", help="Only articles at this difficulty ('all' for any).")
@click.option("--search", "search_text", help="Text to find in titles and tags.")
def articles(
    category: str | None, difficulty: str | None, search_text: str | None
) -> None:
    """List knowledge-base articles, newest first."""
    filters = ArticleFilters(category=category, difficulty=difficulty, search=search_text)
    found = app_container().learning.list_articles(filters)
    stdout_console().print(_articles_table(f"Articles ({len(found)})", found))


@click.command()
def galleries() -> None:
    """List photo galleries in display order."""
    found = app_container().galleries.list_galleries()
    table = new_table(f"Galleries ({len(found)})", "ID", "Name", "Photos", "Views", "Created")
    for gallery in found:
        table.add_row(
            gallery.id,
            gallery.name,
            str(gallery.total_photos),
            str(gallery.view_count),
            fmt_date(gallery.created_date),
        )
    stdout_console().print(table)


@click.command()
@click.option("--gallery", "gallery_id", help="List the photos of this gallery.")
@click.option(
    "--recent",
    type=click.IntRange(min=0),
    default=10,
    show_default=True,
    help="Without --gallery, how many of the most recent photos to list.",
)
def photos(gallery_id: str | None, recent: int) -> None:
    """List a gallery's photos, or the most recent photos across galleries."""
    catalog = app_container().galleries
    if gallery_id:
        gallery = catalog.get_gallery_by_id(gallery_id)
        if gallery is None:
            raise click.ClickException(f"No gallery with id {gallery_id!r}.")
        found = catalog.list_photos(gallery_id)
        title = f"{gallery.name} ({len(found)})"
    else:
        found = catalog.recent_photos(recent)
        title = f"Recent photos ({len(found)})"

    table = new_table(title, "ID", "Title", "Gallery", "Taken", "Image")
    for photo in found:
        table.add_row(
            photo.id,
            photo.title,
            photo.gallery_id,
            fmt_date(photo.shoot_date),
            photo.src or "-",
        )
    stdout_console().print(table)


@click.command()
@click.option(
    "--status",
    type=click.Choice([status.value for status in EventStatus]),
    default=EventStatus.ALL.value,
    show_default=True,
    help="Time window relative to now.",
)
@click.option("--category", help="Only events in this category ('all' for any).")
@click.option("--difficulty", help="Only events at this difficulty ('all' for any).")
@click.option("--search", "search_text", help="Text to find in titles and descriptions.")
def events(
    status: str, category: str | None, difficulty: str | None, search_text: str | None
) -> None:
    """List society events."""
    catalog = app_container().events
    filters = EventFilters(
        category=category,
        difficulty=difficulty,
        status=EventStatus(status),
        search=search_text,
    )
    found = catalog.list_events(filters)
    console = stdout_console()
    console.print(_events_table(f"Events ({len(found)})", found))

    stats = catalog.event_stats()
    console.print(
        f"{stats.total} events: {stats.upcoming} upcoming, {stats.past} past, "
        f"{stats.total_registrations} registrations"
    )
