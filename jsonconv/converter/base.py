# jsonconv/converter/base.py
"""
Options shared by every converter.

Converter schemas extend the definition returned by
new_converter_config_def() instead of starting from an empty ConfigDef.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from jsonconv.config import ConfigDef, Importance, ParsedConfig, in_enum_names

TYPE_CONFIG = "converter.type"
TYPE_DOC = "How this converter will be used."


class ConverterType(str, Enum):
    """Which part of a record a converter handles."""

    KEY = "key"
    VALUE = "value"
    HEADER = "header"

    @classmethod
    def names(cls) -> List[str]:
        return [member.value for member in cls]


def new_converter_config_def(name: str = "ConverterConfig") -> ConfigDef:
    """Return a fresh, unfrozen definition holding the base converter options."""
    return ConfigDef(name).define_string(
        TYPE_CONFIG,
        None,
        Importance.LOW,
        TYPE_DOC,
        validator=in_enum_names(ConverterType.names),
    )


class ConverterConfig(ParsedConfig):
    """Parsed configuration for a converter."""

    __slots__ = ()

    def converter_type(self) -> Optional[ConverterType]:
        """Return the configured converter type, or None when not set."""
        value = self.get_string(TYPE_CONFIG)
        return ConverterType(value) if value is not None else None


__all__ = ["TYPE_CONFIG", "ConverterType", "ConverterConfig", "new_converter_config_def"]
