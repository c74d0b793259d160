"""Domain-layer error definitions."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .value_objects import Position

# ============================================================================
#                           General errors
# ============================================================================


class ShellSplitError(Exception):
    """Base class for all shellsplit errors."""


class InvalidConfigError(ShellSplitError, ValueError):
    """Raised when a tokenizer configuration is internally inconsistent."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Invalid tokenizer configuration: {reason}")
        self.reason = reason


class UnknownPresetError(ShellSplitError, KeyError):
    """Raised when a configuration preset name is not registered."""

    def __init__(self, name: str, known: list[str]) -> None:
        super().__init__(name)
        self.name = name
        self.known = known

    def __str__(self) -> str:
        return f"Unknown preset '{self.name}' (expected one of: {', '.join(self.known)})."


# ============================================================================
#                           Split errors
# ============================================================================


class SplitError(ShellSplitError):
    """Base class for structural errors found while splitting input.

    Subclasses form a closed set: ``UnmatchedQuotesError`` and
    ``InvalidEscapeError``. Both carry the human-readable ``message`` and the
    ``position`` of the delimiter that caused the failure, and can be matched
    structurally::

        match err:
            case UnmatchedQuotesError(message, position): ...
            case InvalidEscapeError(message, position): ...
    """

    __match_args__ = ("message", "position")

    kind = "split"

    def __init__(self, message: str, position: Position) -> None:
        super().__init__(
            f"{message} at line {position.line}, column {position.column}"
        )
        self.message = message
        self.position = position


class UnmatchedQuotesError(SplitError):
    """Raised when an opening quote has no closing match by end of input."""

    kind = "unmatched_quotes"

    def __init__(self, quote: str, position: Position) -> None:
        super().__init__(f"Unmatched {quote} quote", position)
        self.quote = quote


class InvalidEscapeError(SplitError):
    """Raised when an escape character is not followed by anything to escape."""

    kind = "invalid_escape"

    def __init__(self, escape_char: str, position: Position) -> None:
        super().__init__(f"Trailing escape character {escape_char!r}", position)
        self.escape_char = escape_char
