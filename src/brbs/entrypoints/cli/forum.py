"""``brbs forum``: browse categories and threads, post and reply.

Writes act as the member named by ``BRBS_MEMBER_ID`` (or ``--as``); without
an active member they fail with a sign-in message.
"""

from __future__ import annotations

import click
import click_extra as clickx
from rich.markup import escape
from rich.panel import Panel

from brbs import config
from brbs.interfaces.catalog.errors import AuthRequiredError, CatalogError

from .helpers import success
from .helpers.app import MEMBER_ID_META, app_container, fmt_date, new_table, stdout_console

SIGN_IN_HINT = "Set BRBS_MEMBER_ID (or pass --as MEMBER_ID) to an active member id."


@click.group(cls=clickx.ExtraGroup)
@click.option(
    "--as",
    "member_id",
    envvar=config.MEMBER_ID_ENV,
    show_envvar=True,
    help="Member id to act as when posting or replying.",
)
@click.pass_context
def forum(ctx: click.Context, member_id: str | None) -> None:
    """Members' discussion forum."""
    ctx.meta[MEMBER_ID_META] = member_id


@forum.command()
def categories() -> None:
    """List forum categories with their thread counts."""
    found = app_container().forum.list_categories()
    table = new_table("Forum categories", "ID", "Name", "Threads", "Latest activity")
    for category in found:
        latest = category.latest_post
        table.add_row(
            category.id,
            category.name,
            str(category.post_count),
            (
                f"{latest.title} by {latest.author_name}, "
                f"{fmt_date(latest.activity_date, with_time=True)}"
                if latest
                else "-"
            ),
        )
    stdout_console().print(table)


@forum.command()
@click.argument("category_id")
def posts(category_id: str) -> None:
    """List the threads in CATEGORY_ID, pinned first."""
    found = app_container().forum.list_posts_for_category(category_id)
    table = new_table(f"Threads ({len(found)})", "ID", "Title", "Author", "Replies", "Last activity")
    for post in found:
        title = f"[pinned] {post.title}" if post.pinned else post.title
        table.add_row(
            post.id,
            escape(title),
            post.author_name,
            str(post.reply_count),
            fmt_date(post.last_activity, with_time=True),
        )
    stdout_console().print(table)


@forum.command()
@click.argument("post_id")
def show(post_id: str) -> None:
    """Show a thread and its replies."""
    post = app_container().forum.get_post_by_id(post_id)
    if post is None:
        raise click.ClickException(f"No forum post with id {post_id!r}.")

    console = stdout_console()
    console.print(
        Panel(
            escape(post.content),
            title=escape(post.title),
            subtitle=f"{post.author_name}, {fmt_date(post.post_date, with_time=True)}",
        )
    )
    for reply in post.replies:
        console.print(
            Panel(
                escape(reply.content),
                subtitle=f"{reply.author_name}, {fmt_date(reply.post_date, with_time=True)}",
            )
        )


def _fail(e: CatalogError) -> click.ClickException:
    message = str(e)
    if isinstance(e, AuthRequiredError):
        message = f"{message}\n{SIGN_IN_HINT}"
    return click.ClickException(message)


@forum.command()
@click.argument("category_id")
@click.option("--title", required=True, help="Thread title.")
@click.option("--content", required=True, help="Opening post text.")
def post(category_id: str, title: str, content: str) -> None:
    """Start a new thread in CATEGORY_ID."""
    try:
        created = app_container().forum.create_post(category_id, title, content)
    except CatalogError as e:
        raise _fail(e) from e
    success(f"Posted {created.id}")
    click.echo(created.id)


@forum.command()
@click.argument("post_id")
@click.argument("content")
def reply(post_id: str, content: str) -> None:
    """Reply to POST_ID with CONTENT."""
    try:
        added = app_container().forum.add_reply(post_id, content)
    except CatalogError as e:
        raise _fail(e) from e
    success(f"Replied to {post_id}")
    click.echo(added.id)
