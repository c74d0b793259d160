"""Directory markers applied by the top-level ``tests/conftest.py``."""

from __future__ import annotations


def test_unit_marker_applied(request):
    """Tests under tests/unit/ carry the ``unit`` marker."""
    assert request.node.get_closest_marker("unit") is not None
    assert request.node.get_closest_marker("e2e") is None
