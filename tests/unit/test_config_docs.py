# tests/unit/test_config_docs.py
"""Tests for generated reference documentation."""

from jsonconv.config.docs import format_value
from jsonconv.converter import JsonConverterConfig


def test_format_value():
    assert format_value(True) == "true"
    assert format_value(None) == "null"
    assert format_value(1000) == "1000"
    assert format_value(["a", "b"]) == "a,b"
    assert format_value("") == '""'


def test_rst_lists_every_option_in_order():
    rst = JsonConverterConfig.config_def().to_rst()

    positions = [
        rst.index("``converter.type``"),
        rst.index("``schemas.enable``"),
        rst.index("``schemas.cache.size``"),
        rst.index("``decimal.serialization.format``"),
        rst.index("``decimal.deserialization.format``"),
    ]
    assert positions == sorted(positions)
    assert "  * Default: true" in rst
    assert "  * Default: 1000" in rst
    assert "  * Valid Values: [BINARY, TEXT, NUMERIC]" in rst
    assert "  * Importance: high" in rst


def test_markdown_has_one_table_per_group():
    md = JsonConverterConfig.config_def().to_markdown()

    assert md.index("### General") < md.index("### Schemas") < md.index("### serialization")
    assert "| `schemas.cache.size` |" in md
    assert md.count("| Name | Description |") == 3
