"""Unit tests for the ``-L NAME=LEVEL`` option parser."""

import logging

import click
import pytest

from brbs.entrypoints.cli.helpers.log_level_parser import (
    DEFAULT_LIB_LEVELS,
    parse_log_level,
)


def parse(value):
    return parse_log_level(None, None, value)  # type: ignore[arg-type]


def test_no_items_gives_library_defaults():
    assert parse(()) == DEFAULT_LIB_LEVELS


@pytest.mark.parametrize(
    "value",
    [("a=info", "b=DEBUG"), "a=INFO, b=debug", "a=INFO b=DEBUG", ["a=INFO,", " b=DEBUG"]],
)
def test_repeated_and_packed_items(value):
    levels = parse(value)
    assert levels["a"] == logging.INFO
    assert levels["b"] == logging.DEBUG


def test_items_override_defaults_and_later_items_win():
    levels = parse(("sqlalchemy=DEBUG", "x=ERROR", "x=INFO"))
    assert levels["sqlalchemy"] == logging.DEBUG
    assert levels["alembic"] == logging.WARNING
    assert levels["x"] == logging.INFO


@pytest.mark.parametrize(
    ("value", "message"),
    [
        ("verbose", "Expected NAME=LEVEL"),
        ("=INFO", "Expected NAME=LEVEL"),
        ("a=LOUD", "Invalid log level: LOUD"),
    ],
)
def test_bad_items(value, message):
    with pytest.raises(click.BadParameter, match=message):
        parse(value)
