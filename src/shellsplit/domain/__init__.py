"""Domain layer: positions, configuration and errors."""

from .errors import (
    InvalidConfigError,
    InvalidEscapeError,
    ShellSplitError,
    SplitError,
    UnknownPresetError,
    UnmatchedQuotesError,
)
from .value_objects import Config, Position, Token, advance

__all__ = [
    "Config",
    "InvalidConfigError",
    "InvalidEscapeError",
    "Position",
    "ShellSplitError",
    "SplitError",
    "Token",
    "UnknownPresetError",
    "UnmatchedQuotesError",
    "advance",
]
