# jsonconv/config/__init__.py
"""
Generic configuration-definition framework.

This package provides:
- ConfigDef: ordered option definitions (the schema)
- ParsedConfig: validated, immutable configuration instances
- Validators for restricting option values
- Reference documentation rendering

Usage:
    from jsonconv.config import ConfigDef, Importance, ParsedConfig

    definition = ConfigDef("Example").define_int("limit", 10, Importance.LOW, "Limit.")
    config = ParsedConfig(definition.freeze(), {"limit": 20})
    config.get_int("limit")  # 20
"""

from jsonconv.config.definition import NO_DEFAULT_VALUE, ConfigDef, OptionDescriptor
from jsonconv.config.parsed import ParsedConfig
from jsonconv.config.types import ConfigType, Importance, Width
from jsonconv.config.validators import ValidString, Validator, in_enum_names

__all__ = [
    "ConfigDef",
    "OptionDescriptor",
    "NO_DEFAULT_VALUE",
    "ParsedConfig",
    "ConfigType",
    "Importance",
    "Width",
    "Validator",
    "ValidString",
    "in_enum_names",
]
