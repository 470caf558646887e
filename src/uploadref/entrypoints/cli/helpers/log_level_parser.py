"""Helpers for parsing logger-level CLI options.

The ``-L/--logger-level`` option takes NAME=LEVEL items, either repeated on
the command line or as one comma/space separated string from the
environment. Items are split apart, and textual level names are checked and
turned into the numeric levels of the `logging` module.
"""

import logging
import re

import click

# Levels applied before any NAME=LEVEL override; none by default.
DEFAULT_LIB_LEVELS: dict[str, int] = {}

_ITEM_SEPARATORS = re.compile(r"[,\s]+")


def _normalize_items(value: str | list[str] | tuple[str, ...] | None) -> list[str]:
    """Flatten an option value into non-empty NAME=LEVEL items.

    Args:
        value: A single string (possibly holding several items) or the tuple
            Click passes for a repeatable option.

    Returns:
        list[str]: Individual items in the order given.
    """
    if not value:
        return []
    chunks = [value] if isinstance(value, str) else list(value)
    return [item for chunk in chunks for item in _ITEM_SEPARATORS.split(chunk) if item]


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...] | None,
) -> dict[str, int]:
    """Click callback mapping NAME=LEVEL items to ``{name: numeric level}``.

    Later items override earlier ones for the same logger name. Level names
    are case-insensitive.

    Raises:
        click.BadParameter: If an item has no ``=`` or names an unknown level.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _normalize_items(value):
        name, sep, level_str = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        lvl = logging.getLevelNamesMapping().get(level_str.strip().upper())
        if lvl is None:
            raise click.BadParameter(f"Invalid log level: {level_str}")
        levels[name.strip()] = lvl
    return levels
