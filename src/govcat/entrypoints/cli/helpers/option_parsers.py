"""Click callbacks for list-like GOVCAT options.

Both ``-L/--logger-level`` and ``-t/--tag`` accept repeated values as well as
separated lists, so ``-t a -t b`` and ``-t "a,b"`` are equivalent. Logger
levels split on commas and whitespace; tags split on commas only, since a tag
may contain spaces.
"""

import logging
import re

import click

DEFAULT_LIB_LEVELS = {"sqlalchemy": logging.WARNING, "alembic": logging.WARNING}

_LOGGER_ITEM_SEPARATORS = re.compile(r"[,\s]+")


def _split_items(
    value: str | list[str] | tuple[str, ...] | None, separators: re.Pattern[str]
) -> list[str]:
    """Split one or many raw option values into a flat list of non-empty items."""
    if value is None:
        return []
    raw = [value] if isinstance(value, str) else list(value)
    return [item for chunk in raw for item in separators.split(chunk) if item]


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Parse ``NAME=LEVEL`` pairs into a logger-name to numeric-level mapping.

    The result starts from `DEFAULT_LIB_LEVELS`, so SQLAlchemy and Alembic stay
    at WARNING unless explicitly overridden.

    Raises:
        click.BadParameter: If an item is not ``NAME=LEVEL`` or LEVEL is not a
            standard logging level name.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _split_items(value, _LOGGER_ITEM_SEPARATORS):
        name, sep, level_name = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        level = logging.getLevelNamesMapping().get(level_name.strip().upper())
        if level is None:
            raise click.BadParameter(f"Invalid log level: {level_name}")
        levels[name.strip()] = level
    return levels


def parse_tags(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...] | None,
) -> tuple[str, ...]:
    """Parse repeated or comma-separated ``--tag`` values into a tuple.

    Only commas separate tags (tags may contain spaces); surrounding
    whitespace is stripped and empty items are dropped.
    """
    items = _split_items(value, re.compile(r","))
    return tuple(tag for item in items if (tag := item.strip()))
