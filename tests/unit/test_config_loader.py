# tests/unit/test_config_loader.py
"""Tests for YAML loading into flat dotted keys."""

from __future__ import annotations

import pytest

from jsonconv.converter import DecimalFormat, JsonConverterConfig
from jsonconv.core.config import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    flatten_keys,
    load_yaml,
)


def test_flatten_keys_joins_nested_mappings():
    assert flatten_keys({"schemas": {"enable": False, "cache": {"size": 5}}, "top": 1}) == {
        "schemas.enable": False,
        "schemas.cache.size": 5,
        "top": 1,
    }


def test_load_yaml_nested_and_dotted_keys(write_yaml):
    path = write_yaml(
        {
            "schemas": {"enable": False, "cache.size": 5000},
            "decimal.serialization.format": "NUMERIC",
        }
    )

    props = load_yaml(path)
    assert props == {
        "schemas.enable": False,
        "schemas.cache.size": 5000,
        "decimal.serialization.format": "NUMERIC",
    }

    config = JsonConverterConfig(props)
    assert config.schemas_enabled() is False
    assert config.schema_cache_size() == 5000
    assert config.decimal_serialization_format() is DecimalFormat.NUMERIC


def test_load_yaml_empty_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_yaml(path) == {}


def test_load_yaml_missing_file(tmp_path):
    with pytest.raises(ConfigNotFoundError) as exc_info:
        load_yaml(tmp_path / "missing.yaml")
    assert "missing.yaml" in str(exc_info.value)


def test_load_yaml_directory(tmp_path):
    with pytest.raises(ConfigError, match="directory"):
        load_yaml(tmp_path)


def test_load_yaml_invalid_syntax(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("schemas: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigParseError, match="Invalid YAML"):
        load_yaml(path)


def test_load_yaml_root_must_be_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ConfigParseError, match="mapping"):
        load_yaml(path)
