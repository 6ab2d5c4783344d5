# tests/conftest.py
"""
Root conftest - shared fixtures for the jsonconv test suite.

Test Tiers:
===========
- tier1: Pure logic tests - schema definition, coercion, accessors (<5s)
         Run: pytest -m tier1
- tier2: Tests touching the filesystem or CLI (tmp_path, CliRunner)
         Run: pytest -m "tier1 or tier2"

Markers are assigned automatically in tests/unit/conftest.py.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Dict

import pytest
import yaml

from jsonconv.config import ConfigDef, Importance, ValidString


@pytest.fixture
def write_yaml(tmp_path: Path) -> Callable[..., Path]:
    """Fixture returning a helper that writes a dict to a YAML file."""

    def _write(data: Dict[str, Any], name: str = "converter.yaml") -> Path:
        path = tmp_path / name
        path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_def() -> ConfigDef:
    """A small frozen definition covering each presentation feature."""
    definition = ConfigDef("Sample")
    definition.define_string(
        "sample.mode",
        "fast",
        Importance.LOW,
        "Mode.",
        validator=ValidString(["fast", "slow"]),
        group="B",
        order_in_group=0,
    )
    definition.define_boolean(
        "sample.enable", True, Importance.HIGH, "Enable.", group="A", order_in_group=1
    )
    definition.define_int(
        "sample.limit", 10, Importance.MEDIUM, "Limit.", group="A", order_in_group=0
    )
    definition.define_string("sample.label", None, Importance.LOW, "Label.")
    return definition.freeze()
