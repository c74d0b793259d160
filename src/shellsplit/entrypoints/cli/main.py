"""shellsplit CLI entry point.

Defines the top-level ``shellsplit`` command (via Click-Extra), configures
console logging and the tokenizer preset, and registers the subcommands.

Currently available commands
- ``shellsplit split``: split a command line into words.
- ``shellsplit quote``: quote a single word.
- ``shellsplit join``: quote and join words into a command line.
- ``shellsplit check``: verify that join followed by split is the identity.

Examples
    $ shellsplit split "ls -la 'file name.txt'"
    $ shellsplit --preset simple split --json "ls # not a comment"
    $ shellsplit join ls -la "file name.txt"
"""

from __future__ import annotations

import dataclasses
import logging
from typing import TYPE_CHECKING

import click
import click_extra as clickx

from shellsplit import __version__
from shellsplit import config as app_config
from shellsplit.logging import config_console_handler, log_startup

from .commands import check_command, join_command, quote_command, split_command
from .helpers import parse_log_level

if TYPE_CHECKING:
    from logging import Handler

    from shellsplit.domain.value_objects import Config

logger = logging.getLogger(__name__)


HELP = """shellsplit command-line interface.

    Split command lines into words the way a POSIX shell tokenizes them
    (quotes, escapes and comments, no expansion), and quote or join words so
    that splitting the result gives them back unchanged.
    """


def _build_config(preset: str, enable_comments: bool | None) -> Config:
    cfg = app_config.get_preset(preset)
    if enable_comments is not None:
        cfg = dataclasses.replace(cfg, enable_comments=enable_comments)
    return cfg


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (DEBUG console output with source paths).",
    default=False,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    envvar="SHELLSPLIT_LOGGER_LEVELS",
    help=(
        "Set the minimum LEVEL for specific loggers (NAME=LEVEL). Repeatable "
        "(e.g. -L shellsplit.tokenizer=DEBUG) or via SHELLSPLIT_LOGGER_LEVELS "
        "(comma/space list)."
    ),
    show_envvar=True,
)
@click.option(
    "--preset",
    "preset",
    type=click.Choice(sorted(app_config.PRESETS), case_sensitive=False),
    default=app_config.get_preset_name,
    help=(
        "Tokenizer preset. "
        f"Defaults to ${app_config.PRESET_ENV_VAR}, then 'default'."
    ),
    show_default=False,
)
@click.option(
    "--comments/--no-comments",
    "enable_comments",
    default=None,
    help="Override whether '#' starts a comment for the selected preset.",
)
@clickx.pass_context
def shellsplit(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    logger_levels: dict[str, int],
    preset: str,
    enable_comments: bool | None,
) -> None:
    """shellsplit command-line interface."""

    # 0) compute effective verbosity
    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    # 1) configure console handler
    use_color = ctx.color is not False  # None or True => allow color
    handlers: list[Handler] = [
        config_console_handler(level=level, debug_mode=debug, color=use_color)
    ]

    # 2) configure root logger; handlers filter
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    # 3) tokenizer configuration shared with subcommands
    ctx.obj = _build_config(preset, enable_comments)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        preset=preset,
        handlers=handlers,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


shellsplit.add_command(split_command)
shellsplit.add_command(quote_command)
shellsplit.add_command(join_command)
shellsplit.add_command(check_command)
