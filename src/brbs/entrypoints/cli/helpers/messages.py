"""One-line notices on stderr.

Each notice starts with an emoji glyph, or an ASCII stand-in when stderr
cannot encode it, so stdout stays free for tables and Alembic output.
"""

import click


def _encodable(character: str) -> bool:
    """True if stderr's encoding can represent `character`."""
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    try:
        character.encode(getattr(stream, "encoding", None) or "ascii")
    except UnicodeEncodeError:
        return False
    return True


def _glyph(emoji: str, fallback: str) -> str:
    return emoji if _encodable(emoji) else fallback


def caution_glyph() -> str:
    return _glyph("⚠️", "[!]")  # pragma: no mutate


def success_glyph() -> str:
    return _glyph("✅", "[OK]")  # pragma: no mutate


def error_glyph() -> str:
    return _glyph("❌", "[X]")  # pragma: no mutate


def warn(msg: str) -> None:
    """Print a bold yellow warning, e.g. ``⚠️  This will modify your database.``"""
    click.secho(f"{caution_glyph()}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Print a bold green confirmation, e.g. ``✅  Seeded 42 documents.``"""
    click.secho(f"{success_glyph()}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Print a bold red error, e.g. ``❌  Cannot connect to database.``"""
    click.secho(f"{error_glyph()}  {msg}", fg="red", bold=True, err=True)
