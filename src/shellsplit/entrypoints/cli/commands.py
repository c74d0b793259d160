"""shellsplit CLI commands: split, quote, join and check.

Behavior
- Results go to **stdout**; status and error lines go to **stderr**.
- The tokenizer configuration comes from the top-level ``--preset`` and
  ``--comments/--no-comments`` options (see ``main``); commands invoked on
  their own fall back to the default preset.

Failure modes
- Unbalanced quotes or a trailing escape → error line with line/column and
  exit status 1.
- A failed round trip in ``check`` → error line and exit status 1.
"""

from __future__ import annotations

import json
import logging

import click

from shellsplit.domain.errors import SplitError
from shellsplit.domain.value_objects import Config
from shellsplit.quoting import join, quote, validate_roundtrip
from shellsplit.tokenizer import tokenize

from .helpers import error, success

logger = logging.getLogger(__name__)


def _config(ctx: click.Context) -> Config:
    return ctx.find_object(Config) or Config.default()


@click.command(name="split")
@click.argument("text", required=False)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the words as a JSON array instead of one per line.",
)
@click.option(
    "--positions",
    is_flag=True,
    help="Print one JSON object per word with its start line, column and index.",
)
@click.pass_context
def split_command(
    ctx: click.Context, text: str | None, as_json: bool, positions: bool
) -> None:
    """Split TEXT (or stdin) into words using shell quoting rules."""
    if text is None:
        text = click.get_text_stream("stdin").read()
    try:
        tokens = tokenize(text, _config(ctx))
    except SplitError as e:
        error(str(e))
        ctx.exit(1)

    if positions:
        for token in tokens:
            click.echo(
                json.dumps(
                    {
                        "value": token.value,
                        "line": token.start.line,
                        "column": token.start.column,
                        "index": token.start.index,
                    }
                )
            )
    elif as_json:
        click.echo(json.dumps([token.value for token in tokens]))
    else:
        for token in tokens:
            click.echo(token.value)


@click.command(name="quote")
@click.argument("word")
@click.pass_context
def quote_command(ctx: click.Context, word: str) -> None:
    """Print WORD quoted so that it splits back to a single word."""
    click.echo(quote(word, _config(ctx)))


@click.command(name="join")
@click.argument("words", nargs=-1)
@click.pass_context
def join_command(ctx: click.Context, words: tuple[str, ...]) -> None:
    """Quote WORDS and print them as one command line."""
    click.echo(join(words, _config(ctx)))


@click.command(name="check")
@click.argument("words", nargs=-1)
@click.pass_context
def check_command(ctx: click.Context, words: tuple[str, ...]) -> None:
    """Check that joining WORDS and splitting the result gives WORDS back."""
    cfg = _config(ctx)
    if validate_roundtrip(words, cfg):
        success(f"Round trip OK ({len(words)} words)")
        return
    logger.warning("Round trip failed for %s", join(words, cfg))
    error("Round trip failed")
    ctx.exit(1)
