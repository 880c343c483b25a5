"""BRBS CLI entry point.

Defines the top-level ``brbs`` command (via Click-Extra) and registers the
subcommands.

Commands
- ``brbs db`` for schema management and fixture seeding.
- ``brbs search``, ``articles``, ``galleries``, ``photos`` and ``events`` for
  read-only listings.
- ``brbs forum`` for browsing, posting and replying.

Without ``BRBS_DB_URL`` the listings run against an in-memory store seeded
from the packaged fixtures (or ``BRBS_DATA_DIR``).

Examples
    $ brbs search juniper
    $ brbs events --status upcoming
    $ BRBS_DB_URL=sqlite:///brbs.db brbs db upgrade --force
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from brbs import __version__
from brbs.logging import config_console_handler, config_flight_recorder, log_startup

from .content import articles, events, galleries, photos, search
from .db import db as db_group
from .forum import forum as forum_group
from .helpers.log_level_parser import parse_log_level

logger = logging.getLogger(__name__)


HELP = """BRBS command-line interface.

    Browse the Blue Ridge Bonsai Society's galleries, knowledge base, events
    calendar and members' forum from the terminal.
    """

EPILOG = "\b\n" + "\n".join(
    [
        f"{click.style('Environment:', fg='blue', bold=True, underline=True)}",
        "  BRBS_DB_URL     use a SQL document store instead of the packaged fixtures",
        "  BRBS_DATA_DIR   load JSON fixtures from this directory",
        "  BRBS_MEMBER_ID  member acting on forum writes",
    ]
)


def _default_log_path() -> Path:
    return Path(user_log_dir("brbs", appauthor=False, ensure_exists=True)) / "latest.log"


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
    epilog=EPILOG,
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    default=0,
    help="Raise console verbosity one level above WARNING per repetition.",
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    default=0,
    help="Lower console verbosity one level below WARNING per repetition.",
)
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Debug console output: DEBUG level with timestamps and source paths.",
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=_default_log_path,
    envvar="BRBS_LOG_PATH",
    show_default="<user log dir>/latest.log",
    show_envvar=True,
    help="File the flight recorder writes to.",
)
@click.option(
    "--flight-recorder-capacity",
    type=click.IntRange(min=1),
    default=2000,
    hidden=True,
    envvar="BRBS_FLIGHT_RECORDER_CAPACITY",
    help="Number of log records the flight recorder keeps.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    default=True,
    show_envvar=True,
    help=(
        "Keep recent DEBUG-level records in memory and write them to --log-path "
        "when a WARNING or ERROR occurs (or on exit with --force-flush). "
        "Console verbosity is unaffected."
    ),
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    default=False,
    show_default=True,
    show_envvar=True,
    help="Always write the flight recorder buffer to --log-path on exit.",
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    default=("sqlalchemy=WARNING", "alembic=WARNING"),
    show_default=True,
    show_envvar=True,
    help=(
        "Minimum LEVEL for logger NAME (NAME=LEVEL), applied to both the console "
        "and the flight recorder. Repeatable, e.g. -L sqlalchemy.engine=INFO."
    ),
)
@clickx.pass_context
def brbs(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """BRBS command-line interface."""

    level = logging.WARNING - 10 * verbose_count + 10 * quiet_count
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    handlers: list[logging.Handler] = [
        config_console_handler(
            level=level, debug_mode=debug, color=ctx.color is not False
        )
    ]
    if flight_recorder:
        handlers.append(
            config_flight_recorder(
                path=log_path,
                capacity=flight_recorder_capacity,
                flush_on_close=force_flush_flight_recorder,
            )
        )

    # handlers do the filtering; the root logger passes everything
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        log_path=log_path if flight_recorder else None,
        flight_recorder=flight_recorder,
        flight_capacity=flight_recorder_capacity if flight_recorder else None,
        force_flush_fr=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


brbs.add_command(db_group)
brbs.add_command(forum_group)
for _command in (search, articles, galleries, photos, events):
    brbs.add_command(_command)
