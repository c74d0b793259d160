"""Global pytest configuration for shellsplit.

Tests under ``tests/unit/`` and ``tests/e2e/`` receive the matching marker
automatically, and hypothesis runs with a fixed profile so property tests stay
deterministic in CI.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from hypothesis import HealthCheck, settings

from shellsplit import Config

# pylint: disable=unused-argument

TESTS_ROOT = Path(__file__).parent.resolve()
DIRECTORY_MARKERS = {"unit": "unit", "e2e": "e2e"}

settings.register_profile(
    "shellsplit",
    max_examples=300,
    derandomize=True,
    suppress_health_check=[HealthCheck.too_slow],
)
settings.load_profile("shellsplit")


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add the directory marker (``unit``/``e2e``) to collected items."""
    for item in items:
        try:
            top = item.path.resolve().relative_to(TESTS_ROOT).parts[0]
        except ValueError:  # pragma: no cover - collected outside tests/
            continue
        if (marker := DIRECTORY_MARKERS.get(top)) is None:
            continue
        if not any(m.name == marker for m in item.iter_markers()):
            item.add_marker(getattr(pytest.mark, marker))


@pytest.fixture(params=["default", "posix", "simple"])
def preset_config(request: pytest.FixtureRequest) -> Config:
    """Each built-in preset in turn."""
    return getattr(Config, request.param)()
