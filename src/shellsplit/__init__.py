"""shellsplit

Shell-style command-line splitting with quote, escape and comment handling,
plus the inverse operations: minimal quoting, joining and a round-trip check.

Example:
    ```py
    >>> from shellsplit import join, split
    >>> split("ls -la 'file name.txt'  # list it")
    ['ls', '-la', 'file name.txt']
    >>> join(["ls", "-la", "file name.txt"])
    "ls -la 'file name.txt'"
    ```
"""

__version__ = "0.1.0"

# pylint: disable=wrong-import-position
from .domain.errors import (
    InvalidConfigError,
    InvalidEscapeError,
    ShellSplitError,
    SplitError,
    UnknownPresetError,
    UnmatchedQuotesError,
)
from .domain.value_objects import Config, Position, Token, advance
from .quoting import join, quote, validate_roundtrip
from .tokenizer import split, split_with_config, tokenize, try_split

__all__ = [
    "__version__",
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
    "join",
    "quote",
    "split",
    "split_with_config",
    "tokenize",
    "try_split",
    "validate_roundtrip",
]
