"""CLI helpers: stderr status lines and logger-level option parsing."""

from .log_level_parser import parse_log_level
from .messages import error, success

__all__ = ["error", "parse_log_level", "success"]
