# tests/unit/conftest.py
"""Tier markers for unit tests."""

from __future__ import annotations

import pytest

# Files that touch the filesystem or drive the CLI
TIER2_PATTERNS = [
    "test_cli_",
    "test_config_loader",
]


def pytest_collection_modifyitems(items):
    """Mark tests as tier1 (pure logic) or tier2 (filesystem / CLI)."""
    for item in items:
        fspath = str(item.fspath)
        if any(pattern in fspath for pattern in TIER2_PATTERNS):
            item.add_marker(pytest.mark.tier2)
        else:
            item.add_marker(pytest.mark.tier1)
