"""Shell-style tokenizer.

Splits a command line into words in a single pass over its characters. The
quote/escape logic is an explicit state machine: `transition` maps
``(state, character)`` to a `Step` describing the next state and what the
driver loop should do with the character. `Tokenizer` owns the driver loop:
it keeps the word buffer, tracks positions, skips comments and reports
end-of-input errors.

Behavior
- Whitespace outside quotes separates words; runs of whitespace collapse.
- Single quotes are fully literal (the escape character has no effect).
- Inside double quotes only the double quote, the escape character and a
  backslash-newline continuation are escapable; any other escaped character
  keeps its escape character.
- Adjacent quoted and unquoted segments concatenate into one word.
- A comment (when enabled) ends the pending word and runs to end of line.

Failure modes
- ``UnmatchedQuotesError`` positioned at the opening quote.
- ``InvalidEscapeError`` positioned at the trailing escape character.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from .domain.errors import InvalidEscapeError, SplitError, UnmatchedQuotesError
from .domain.value_objects import NEWLINE, Config, Position, Token, advance

logger = logging.getLogger(__name__)


class Mode(Enum):
    """Quoting context the tokenizer is in."""

    NORMAL = "normal"
    SINGLE_QUOTED = "single_quoted"
    DOUBLE_QUOTED = "double_quoted"


@dataclass(frozen=True)
class State:
    """Tokenizer state: a quoting mode, optionally with a pending escape.

    ``State(mode, escaped=True)`` is the ``Escaped(mode)`` state: the next
    character is taken literally and the tokenizer returns to ``mode``.
    """

    mode: Mode
    escaped: bool = False


NORMAL = State(Mode.NORMAL)
SINGLE_QUOTED = State(Mode.SINGLE_QUOTED)
DOUBLE_QUOTED = State(Mode.DOUBLE_QUOTED)
ESCAPED_NORMAL = State(Mode.NORMAL, escaped=True)
ESCAPED_DOUBLE_QUOTED = State(Mode.DOUBLE_QUOTED, escaped=True)


@dataclass(frozen=True)
class Step:
    """Outcome of feeding one character to the state machine.

    Attributes:
        state: The state after the character.
        emit: Text to append to the current word (may be empty).
        flush: Finish the pending word, if any.
        comment: Discard the rest of the line.
        opens_quote: The character is an opening quote.
        opens_escape: The character is an escape character.
    """

    state: State
    emit: str = ""
    flush: bool = False
    comment: bool = False
    opens_quote: bool = False
    opens_escape: bool = False


def transition(state: State, ch: str, config: Config) -> Step:
    """Return the `Step` taken when ``ch`` is read in ``state``."""
    if state.escaped:
        return _escaped(state, ch, config)

    if state.mode is Mode.SINGLE_QUOTED:
        if ch == config.single_quote:
            return Step(NORMAL)
        return Step(state, emit=ch)

    if state.mode is Mode.DOUBLE_QUOTED:
        if ch == config.double_quote:
            return Step(NORMAL)
        if ch == config.escape_char:
            return Step(ESCAPED_DOUBLE_QUOTED, opens_escape=True)
        return Step(state, emit=ch)

    if ch in config.whitespace:
        return Step(NORMAL, flush=True)
    if config.enable_comments and ch == config.comment_char:
        return Step(NORMAL, flush=True, comment=True)
    if ch == config.single_quote:
        return Step(SINGLE_QUOTED, opens_quote=True)
    if ch == config.double_quote:
        return Step(DOUBLE_QUOTED, opens_quote=True)
    if ch == config.escape_char:
        return Step(ESCAPED_NORMAL, opens_escape=True)
    return Step(NORMAL, emit=ch)


def _escaped(state: State, ch: str, config: Config) -> Step:
    if state.mode is Mode.DOUBLE_QUOTED:
        # escaped markers take precedence, even when a marker is a newline
        if ch in (config.double_quote, config.escape_char):
            return Step(DOUBLE_QUOTED, emit=ch)
        if ch == NEWLINE:
            # line continuation
            return Step(DOUBLE_QUOTED)
        return Step(DOUBLE_QUOTED, emit=config.escape_char + ch)
    return Step(State(state.mode), emit=ch)


class Tokenizer:
    """Drives the state machine over an input string.

    A tokenizer holds only its configuration; every call to `tokenize` keeps
    its buffer and state in locals, so one instance may be shared freely.
    """

    def __init__(self, config: Config | None = None) -> None:
        self.config = config if config is not None else Config.default()

    def tokenize(self, text: str) -> list[Token]:
        """Split ``text`` into positioned tokens.

        Raises:
            UnmatchedQuotesError: If a quote is still open at end of input.
            InvalidEscapeError: If the input ends right after an escape character.
        """
        config = self.config
        track = config.track_positions

        tokens: list[Token] = []
        buffer: list[str] = []
        pending = False  # a word has started since the last flush
        in_comment = False
        state = NORMAL
        pos = Position()
        word_start = pos
        quote_start = pos
        escape_start = pos

        for index, ch in enumerate(text):
            if in_comment:
                in_comment = ch != NEWLINE
            else:
                step = transition(state, ch, config)
                if step.flush and pending:
                    tokens.append(Token("".join(buffer), word_start))
                    buffer.clear()
                    pending = False

                marks = step.opens_quote or step.opens_escape
                if marks or (step.emit and not pending):
                    # without tracking, positions are rebuilt from the index
                    here = pos if track else Position.at_index(index)
                    if step.opens_quote:
                        quote_start = here
                    if step.opens_escape:
                        escape_start = here
                    if not pending:
                        pending = True
                        word_start = here
                if step.emit:
                    buffer.append(step.emit)
                in_comment = step.comment
                state = step.state

            if track:
                pos = advance(pos, ch)

        if state.escaped:
            raise self._fail(InvalidEscapeError(config.escape_char, escape_start), text)
        if state.mode is Mode.SINGLE_QUOTED:
            raise self._fail(UnmatchedQuotesError(config.single_quote, quote_start), text)
        if state.mode is Mode.DOUBLE_QUOTED:
            raise self._fail(UnmatchedQuotesError(config.double_quote, quote_start), text)

        if pending:
            tokens.append(Token("".join(buffer), word_start))
        logger.debug("Split %d characters into %d words", len(text), len(tokens))
        return tokens

    @staticmethod
    def _fail(error: SplitError, text: str) -> SplitError:
        logger.debug("Split failed on %d characters: %s", len(text), error)
        return error


def tokenize(text: str, config: Config | None = None) -> list[Token]:
    """Split ``text`` into `Token` values carrying their start positions."""
    return Tokenizer(config).tokenize(text)


def split_with_config(text: str, config: Config) -> list[str]:
    """Split ``text`` into words using ``config``.

    Args:
        text: Command line to split.
        config: Tokenizer configuration.

    Returns:
        list[str]: The words, empty for empty or whitespace-only input.

    Raises:
        UnmatchedQuotesError: If a quote is never closed.
        InvalidEscapeError: If the input ends with an escape character.
    """
    return [token.value for token in Tokenizer(config).tokenize(text)]


def split(text: str) -> list[str]:
    """Split ``text`` into words with the default configuration."""
    return split_with_config(text, Config.default())


def try_split(text: str, config: Config | None = None) -> list[str] | SplitError:
    """Split ``text``, returning the error value instead of raising it.

    Example:
        ```py
        match try_split(line):
            case UnmatchedQuotesError(message, position): ...
            case InvalidEscapeError(message, position): ...
            case words: ...
        ```
    """
    try:
        return split_with_config(text, config if config is not None else Config.default())
    except SplitError as e:
        return e
