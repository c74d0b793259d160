"""Quoting, joining and round-trip validation.

The inverse of the tokenizer: `quote` picks the least noisy quoting that
splits back to exactly one word, `join` builds a command line from words and
`validate_roundtrip` checks that splitting the joined line is the identity.

Quoting preference, first match wins:
1. empty word -> ``''``;
2. nothing unsafe -> the word unchanged;
3. no single quote -> ``'word'``;
4. no double quote -> ``"word"`` with the escape character and double quote
   escaped;
5. both quote kinds -> single-quoted segments glued with an escaped literal
   single quote, ``'it'\\''s "x"'``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .domain.errors import SplitError
from .domain.value_objects import JOIN_SEPARATOR, Config
from .tokenizer import split_with_config

logger = logging.getLogger(__name__)


def _unsafe_chars(config: Config) -> frozenset[str]:
    return config.whitespace | config.unsafe_chars | frozenset(config.markers)


def quote(word: str, config: Config | None = None) -> str:
    """Quote ``word`` so that splitting the result yields exactly ``[word]``.

    Args:
        word: The word to quote.
        config: Tokenizer configuration the result will be split with;
            defaults to `Config.default`.

    Returns:
        str: The word, quoted only as much as needed.
    """
    config = config if config is not None else Config.default()
    sq, dq, esc = config.single_quote, config.double_quote, config.escape_char

    if not word:
        return sq + sq
    unsafe = _unsafe_chars(config)
    if not any(ch in unsafe for ch in word):
        return word
    if sq not in word:
        return f"{sq}{word}{sq}"
    if dq not in word:
        escaped = "".join(esc + ch if ch in (esc, dq) else ch for ch in word)
        return f"{dq}{escaped}{dq}"
    # close the quote, emit an escaped literal quote, reopen
    glue = sq + esc + sq + sq
    return sq + glue.join(word.split(sq)) + sq


def join(words: Iterable[str], config: Config | None = None) -> str:
    """Quote each word and join them with a single space.

    Returns:
        str: The command line; empty for an empty sequence.
    """
    return JOIN_SEPARATOR.join(quote(word, config) for word in words)


def validate_roundtrip(words: Iterable[str], config: Config | None = None) -> bool:
    """Return True if splitting ``join(words)`` gives back ``words``."""
    config = config if config is not None else Config.default()
    expected = list(words)
    line = join(expected, config)
    try:
        actual = split_with_config(line, config)
    except SplitError as e:
        logger.debug("Round-trip split failed for %r: %s", line, e)
        return False
    if actual != expected:
        logger.debug("Round-trip mismatch: %r != %r", actual, expected)
        return False
    return True
