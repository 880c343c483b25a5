"""Access to the application container and the stdout console from commands."""

from __future__ import annotations

from datetime import datetime

import click
from rich.console import Console
from rich.table import Table

from brbs.bootstrap import AppContainer, bootstrap
from brbs.datasets import DatasetError

APP_META = "brbs.app"
MEMBER_ID_META = "brbs.member_id"


def app_container() -> AppContainer:
    """Return the container for this invocation, bootstrapping it on first use.

    A container passed as ``obj`` to the root command (as tests do) is used
    unchanged. A member id recorded in the context meta under
    `MEMBER_ID_META` (by ``brbs forum --as``) becomes the acting member.
    """
    ctx = click.get_current_context()
    if isinstance(ctx.find_root().obj, AppContainer):
        return ctx.find_root().obj
    if APP_META not in ctx.meta:
        try:
            ctx.meta[APP_META] = bootstrap(member_id=ctx.meta.get(MEMBER_ID_META))
        except DatasetError as e:
            raise click.ClickException(f"Invalid fixtures: {e}") from e
    return ctx.meta[APP_META]


def stdout_console() -> Console:
    """Console for listings. Colour follows click-extra's ``--color/--no-color``."""
    color = click.get_current_context().find_root().color
    return Console(no_color=color is False, highlight=False)


def new_table(title: str, *columns: str) -> Table:
    """A table whose first column (the record id) never wraps."""
    table = Table(title=title, title_justify="left")
    first, *rest = columns
    table.add_column(first, no_wrap=True, style="cyan")
    for column in rest:
        table.add_column(column)
    return table


def fmt_date(value: datetime | None, with_time: bool = False) -> str:
    if value is None:
        return "-"
    return value.strftime("%Y-%m-%d %H:%M" if with_time else "%Y-%m-%d")
