"""Module including value objects used across the domain layer."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidConfigError

NEWLINE = "\n"

DEFAULT_WHITESPACE = frozenset(" \t\n\r")
POSIX_WHITESPACE = frozenset(" \t\n")

# Characters a POSIX shell would interpret outside quotes.
SHELL_METACHARACTERS = frozenset("|&;<>()$`*?[]{}~!")

JOIN_SEPARATOR = " "


@dataclass(frozen=True)
class Position:
    """Location of a character in the input text.

    ``line`` and ``column`` are 1-based, ``index`` is the 0-based offset in
    code points.
    """

    line: int = 1
    column: int = 1
    index: int = 0

    @classmethod
    def at_index(cls, index: int) -> Position:
        """Approximate position built from an index only (no line tracking)."""
        return cls(line=1, column=index + 1, index=index)


def advance(pos: Position, ch: str) -> Position:
    """Return the position following ``pos`` once ``ch`` has been consumed."""
    if ch == NEWLINE:
        return Position(line=pos.line + 1, column=1, index=pos.index + 1)
    return Position(line=pos.line, column=pos.column + 1, index=pos.index + 1)


@dataclass(frozen=True)
class Token:
    """A finalized word together with the position where it started."""

    value: str
    start: Position


@dataclass(frozen=True)
class Config:
    """Immutable tokenizer configuration.

    Built once and passed into every split/quote/join call. Use one of the
    presets (`Config.default`, `Config.posix`, `Config.simple`) or construct
    a custom value; inconsistent combinations are rejected on construction.

    Raises:
        InvalidConfigError: If a marker character is not a single character,
            two markers coincide, a marker is also whitespace, or the
            whitespace set does not contain the join separator (a space).
    """

    single_quote: str = "'"
    double_quote: str = '"'
    escape_char: str = "\\"
    comment_char: str = "#"
    whitespace: frozenset[str] = DEFAULT_WHITESPACE
    enable_comments: bool = True
    track_positions: bool = True
    unsafe_chars: frozenset[str] = SHELL_METACHARACTERS

    def __post_init__(self) -> None:
        # accept any iterable of characters, store a frozenset
        object.__setattr__(self, "whitespace", frozenset(self.whitespace))
        object.__setattr__(self, "unsafe_chars", frozenset(self.unsafe_chars))

        markers = self.markers
        for name, ch in zip(
            ("single_quote", "double_quote", "escape_char", "comment_char"), markers
        ):
            if len(ch) != 1:
                raise InvalidConfigError(f"{name} must be a single character, got {ch!r}")
            if ch in self.whitespace:
                raise InvalidConfigError(f"{name} {ch!r} is also a whitespace character")
        if len(set(markers)) != len(markers):
            raise InvalidConfigError(f"marker characters must be distinct, got {markers!r}")
        if any(len(ch) != 1 for ch in self.whitespace):
            raise InvalidConfigError("whitespace entries must be single characters")
        if JOIN_SEPARATOR not in self.whitespace:
            raise InvalidConfigError("whitespace must include a plain space")

    @property
    def markers(self) -> tuple[str, str, str, str]:
        """The quote, escape and comment characters, in that order."""
        return (self.single_quote, self.double_quote, self.escape_char, self.comment_char)

    # ------------------------------------------------------------------ presets

    @classmethod
    def default(cls) -> Config:
        """Standard POSIX characters, comments on, positions tracked."""
        return cls()

    @classmethod
    def posix(cls) -> Config:
        """Like `default` but only the POSIX ``IFS`` whitespace (space, tab, newline)."""
        return cls(whitespace=POSIX_WHITESPACE)

    @classmethod
    def simple(cls) -> Config:
        """Comments off and positions untracked, for throughput-sensitive use."""
        return cls(enable_comments=False, track_positions=False)
