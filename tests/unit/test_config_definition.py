# tests/unit/test_config_definition.py
"""
Tests for ConfigDef: definition-time errors, ordering, parsing.
"""

from __future__ import annotations

import pytest

from jsonconv.config import (
    NO_DEFAULT_VALUE,
    ConfigDef,
    ConfigType,
    Importance,
    ParsedConfig,
    ValidString,
    Width,
    in_enum_names,
)
from jsonconv.core.config import (
    ConfigDefinitionError,
    ConfigError,
    ConfigValidationError,
)

# =============================================================================
# Definition-time errors
# =============================================================================


def test_duplicate_key_is_rejected():
    definition = ConfigDef().define_int("a.b", 1, Importance.LOW, "doc")

    with pytest.raises(ConfigDefinitionError, match="a.b is defined twice"):
        definition.define_boolean("a.b", True, Importance.LOW, "doc")


def test_default_must_satisfy_validator():
    with pytest.raises(ConfigDefinitionError) as exc_info:
        ConfigDef().define_string(
            "mode", "medium", Importance.LOW, "doc", validator=ValidString(["fast", "slow"])
        )

    assert "mode" in str(exc_info.value)
    assert "fast, slow" in str(exc_info.value)


def test_default_must_match_type():
    with pytest.raises(ConfigDefinitionError):
        ConfigDef().define_int("limit", "ten", Importance.LOW, "doc")


def test_default_is_coerced():
    definition = ConfigDef().define_int("limit", "10", Importance.LOW, "doc")
    assert definition["limit"].default == 10


def test_frozen_definition_rejects_new_options(sample_def):
    with pytest.raises(ConfigDefinitionError, match="frozen"):
        sample_def.define_int("another", 1, Importance.LOW, "doc")

    assert "another" not in sample_def


def test_descriptors_are_immutable(sample_def):
    with pytest.raises(AttributeError, match="immutable"):
        sample_def["sample.limit"].default = 99

    assert sample_def["sample.limit"].default == 10


def test_unknown_importance_is_a_definition_error():
    with pytest.raises(ConfigDefinitionError, match="urgent"):
        ConfigDef().define_int("a", 1, "urgent", "doc")


@pytest.mark.parametrize("default", [None, "x", NO_DEFAULT_VALUE])
def test_unknown_type_is_a_definition_error(default):
    with pytest.raises(ConfigDefinitionError, match="decimal"):
        ConfigDef().define("a", "decimal", default, Importance.LOW, "doc")


def test_unknown_width_is_a_definition_error():
    with pytest.raises(ConfigDefinitionError):
        ConfigDef().define_int("a", 1, Importance.LOW, "doc", width="huge")


def test_bad_metadata_field_is_a_definition_error():
    with pytest.raises(ConfigDefinitionError, match="order_in_group"):
        ConfigDef().define_int("a", 1, Importance.LOW, "doc", order_in_group="first")


def test_enum_values_are_normalised():
    definition = ConfigDef().define("a", "int", "3", "high", "doc", width="short")
    option = definition["a"]

    assert option.type is ConfigType.INT
    assert option.importance is Importance.HIGH
    assert option.width is Width.SHORT
    assert option.default == 3


# =============================================================================
# Ordering
# =============================================================================


def test_names_follow_registration_order(sample_def):
    assert sample_def.names() == ["sample.mode", "sample.enable", "sample.limit", "sample.label"]


def test_groups_follow_first_use(sample_def):
    assert sample_def.groups() == ["B", "A"]


def test_descriptors_sort_by_group_then_order(sample_def):
    assert [option.name for option in sample_def.descriptors()] == [
        "sample.label",
        "sample.mode",
        "sample.limit",
        "sample.enable",
    ]


def test_ungrouped_options_sort_by_importance_then_name():
    definition = (
        ConfigDef()
        .define_int("z.low", 1, Importance.LOW, "doc")
        .define_int("b.high", 1, Importance.HIGH, "doc")
        .define_int("a.low", 1, Importance.LOW, "doc")
    )
    assert [option.name for option in definition.descriptors()] == ["b.high", "a.low", "z.low"]


# =============================================================================
# Parsing
# =============================================================================


def test_parse_fills_defaults(sample_def):
    assert sample_def.parse({}) == {
        "sample.mode": "fast",
        "sample.enable": True,
        "sample.limit": 10,
        "sample.label": None,
    }


def test_parse_ignores_unknown_keys(sample_def):
    values = sample_def.parse({"other": 1, "sample.limit": 3})
    assert "other" not in values
    assert values["sample.limit"] == 3


def test_optional_option_validates_when_present():
    definition = ConfigDef().define_string(
        "color", None, Importance.LOW, "doc", validator=ValidString(["red"])
    )

    assert definition.parse({})["color"] is None
    assert definition.parse({"color": "red"})["color"] == "red"
    with pytest.raises(ConfigValidationError):
        definition.parse({"color": "blue"})


def test_required_option_must_be_supplied():
    definition = ConfigDef().define(
        "topic", ConfigType.STRING, NO_DEFAULT_VALUE, Importance.HIGH, "doc"
    )

    assert definition["topic"].required
    assert definition.default_values() == {}
    with pytest.raises(ConfigValidationError, match="Missing required configuration"):
        definition.parse({})
    assert definition.parse({"topic": "orders"}) == {"topic": "orders"}


def test_validate_all_returns_errors_without_raising(sample_def):
    errors = sample_def.validate_all({"sample.mode": "warp", "sample.limit": "x"})

    assert set(errors) == {"sample.mode", "sample.limit"}
    assert "warp" in errors["sample.mode"]
    assert sample_def.validate_all({}) == {}


def test_in_enum_names_reads_names_when_built():
    calls = []

    def names():
        calls.append(1)
        return ["ONE", "TWO"]

    validator = in_enum_names(names)
    validator.ensure_valid("k", "TWO")
    validator.ensure_valid("k", "ONE")

    assert calls == [1]
    with pytest.raises(ValueError, match="String must be one of: ONE, TWO"):
        validator.ensure_valid("k", "THREE")


# =============================================================================
# ParsedConfig
# =============================================================================


def test_typed_getters_check_declared_type(sample_def):
    config = ParsedConfig(sample_def, {}, do_log=False)

    assert config.get_int("sample.limit") == 10
    assert config.get_boolean("sample.enable") is True
    with pytest.raises(ConfigError, match="declared as int"):
        config.get_boolean("sample.limit")


def test_get_unknown_key_raises(sample_def):
    config = ParsedConfig(sample_def, {}, do_log=False)

    with pytest.raises(ConfigError, match="Unknown configuration"):
        config.get("missing.key")
