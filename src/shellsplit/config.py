"""Configuration utilities for shellsplit.

This module centralizes the named tokenizer presets and the environment
variables the command-line interface reads them from.
"""

import os
from collections.abc import Callable

from shellsplit.domain.errors import UnknownPresetError
from shellsplit.domain.value_objects import Config

PRESET_ENV_VAR = "SHELLSPLIT_PRESET"  # pragma: no mutate
DEFAULT_PRESET = "default"  # pragma: no mutate

PRESETS: dict[str, Callable[[], Config]] = {
    "default": Config.default,
    "posix": Config.posix,
    "simple": Config.simple,
}


def get_preset(name: str) -> Config:
    """Build the configuration registered under ``name``.

    Args:
        name: Preset name, matched case-insensitively.

    Returns:
        A fresh `Config` for the preset.

    Raises:
        UnknownPresetError: If no preset is registered under ``name``.
    """
    try:
        factory = PRESETS[name.strip().lower()]
    except KeyError as e:
        raise UnknownPresetError(name, sorted(PRESETS)) from e
    return factory()


def get_preset_name() -> str:
    """Get the preset name from the environment.

    Returns:
        The value of `SHELLSPLIT_PRESET`, or ``"default"`` when unset or empty.
    """
    return os.environ.get(PRESET_ENV_VAR) or DEFAULT_PRESET
