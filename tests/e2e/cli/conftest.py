"""Fixtures and test helpers for end-to-end CLI tests.

Provides a test-only ``log-demo`` command that emits messages on project and
third-party loggers, plus a CliRunner fixture.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from shellsplit.entrypoints.cli.main import shellsplit

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit representative log messages at every level."""
    logger = logging.getLogger("shellsplit.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and any Click-Extra sections."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register the 'log-demo' command for the duration of a test."""
    shellsplit.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(shellsplit, "log-demo")


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep the developer's environment from changing CLI defaults."""
    for name in ("SHELLSPLIT_PRESET", "SHELLSPLIT_LOGGER_LEVELS"):
        monkeypatch.delenv(name, raising=False)
