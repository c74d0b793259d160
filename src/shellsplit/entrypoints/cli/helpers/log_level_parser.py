"""Click callback for the repeatable ``-L NAME=LEVEL`` option.

Values may come from repeated flags or from a single comma/space separated
string (the ``SHELLSPLIT_LOGGER_LEVELS`` environment variable).
"""

import logging
import re

import click

_SEPARATORS = re.compile(r"[,\s]+")


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...] | None,
) -> dict[str, int]:
    """Parse NAME=LEVEL pairs into a logger-name -> numeric-level mapping.

    Later pairs override earlier ones for the same logger.

    Raises:
        click.BadParameter: If an item is not NAME=LEVEL or LEVEL is unknown.
    """
    if not value:
        return {}
    chunks = [value] if isinstance(value, str) else list(value)
    levels: dict[str, int] = {}
    for chunk in chunks:
        for item in filter(None, _SEPARATORS.split(chunk)):
            name, sep, level_name = item.partition("=")
            if not sep or not name:
                raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
            level = logging.getLevelNamesMapping().get(level_name.upper())
            if level is None:
                raise click.BadParameter(f"Invalid log level: {level_name}")
            levels[name] = level
    return levels
