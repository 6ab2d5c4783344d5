# jsonconv/converter/json_config.py
"""
Configuration options for JSON converter instances.

The option definitions are built once per process, on first use, and shared
by every JsonConverterConfig. Each instance validates its own input against
that shared definition and exposes typed accessors.

Usage:
    from jsonconv.converter import JsonConverterConfig, DecimalFormat

    config = JsonConverterConfig({"decimal.serialization.format": "NUMERIC"})
    config.schemas_enabled()               # True
    config.decimal_serialization_format()  # DecimalFormat.NUMERIC
"""

from __future__ import annotations

import threading
from typing import Any, Mapping, Optional

from jsonconv.config import ConfigDef, Importance, Width, in_enum_names
from jsonconv.converter.base import ConverterConfig, new_converter_config_def
from jsonconv.converter.formats import DecimalFormat
from jsonconv.logging.logger import get_logger
from jsonconv.logging.tags import CONVERTER

logger = get_logger(__name__)

SCHEMAS_ENABLE_CONFIG = "schemas.enable"
SCHEMAS_ENABLE_DEFAULT = True
SCHEMAS_ENABLE_DOC = "Include schemas within each of the serialized values and keys."
SCHEMAS_ENABLE_DISPLAY = "Enable Schemas"

SCHEMAS_CACHE_SIZE_CONFIG = "schemas.cache.size"
SCHEMAS_CACHE_SIZE_DEFAULT = 1000
SCHEMAS_CACHE_SIZE_DOC = (
    "The maximum number of schemas that can be cached in this converter instance."
)
SCHEMAS_CACHE_SIZE_DISPLAY = "Schema Cache Size"

SERIALIZATION_DECIMAL_FORMAT_CONFIG = "decimal.serialization.format"
SERIALIZATION_DECIMAL_FORMAT_DEFAULT = DecimalFormat.BINARY.name
SERIALIZATION_DECIMAL_FORMAT_DOC = (
    "The serialization format for decimals. Can be either BINARY, TEXT or NUMERIC"
)
SERIALIZATION_DECIMAL_FORMAT_DISPLAY = "JSON Decimal Serialization Format"

DESERIALIZATION_DECIMAL_FORMAT_CONFIG = "decimal.deserialization.format"
DESERIALIZATION_DECIMAL_FORMAT_DEFAULT = DecimalFormat.BINARY.name
DESERIALIZATION_DECIMAL_FORMAT_DOC = (
    "The deserialization format for decimals. Can be either BINARY, TEXT or NUMERIC"
)
DESERIALIZATION_DECIMAL_FORMAT_DISPLAY = "JSON Decimal Deserialization Format"

SCHEMAS_GROUP = "Schemas"
SERIALIZATION_GROUP = "serialization"


# =============================================================================
# Schema
# =============================================================================


def build_json_converter_config_def() -> ConfigDef:
    """
    Build a new, frozen definition of every JSON converter option.

    Starts from the base converter options and adds the JSON-specific ones.
    Most callers want the shared instance from JsonConverterConfig.config_def().
    """
    definition = new_converter_config_def("JsonConverterConfig")

    order = 0
    definition.define_boolean(
        SCHEMAS_ENABLE_CONFIG,
        SCHEMAS_ENABLE_DEFAULT,
        Importance.HIGH,
        SCHEMAS_ENABLE_DOC,
        group=SCHEMAS_GROUP,
        order_in_group=order,
        width=Width.MEDIUM,
        display_name=SCHEMAS_ENABLE_DISPLAY,
    )
    order += 1
    # Positivity is enforced by the schema cache, not here.
    definition.define_int(
        SCHEMAS_CACHE_SIZE_CONFIG,
        SCHEMAS_CACHE_SIZE_DEFAULT,
        Importance.HIGH,
        SCHEMAS_CACHE_SIZE_DOC,
        group=SCHEMAS_GROUP,
        order_in_group=order,
        width=Width.MEDIUM,
        display_name=SCHEMAS_CACHE_SIZE_DISPLAY,
    )

    order = 0
    definition.define_string(
        SERIALIZATION_DECIMAL_FORMAT_CONFIG,
        SERIALIZATION_DECIMAL_FORMAT_DEFAULT,
        Importance.LOW,
        SERIALIZATION_DECIMAL_FORMAT_DOC,
        validator=in_enum_names(DecimalFormat.names),
        group=SERIALIZATION_GROUP,
        order_in_group=order,
        width=Width.MEDIUM,
        display_name=SERIALIZATION_DECIMAL_FORMAT_DISPLAY,
    )
    order += 1
    definition.define_string(
        DESERIALIZATION_DECIMAL_FORMAT_CONFIG,
        DESERIALIZATION_DECIMAL_FORMAT_DEFAULT,
        Importance.LOW,
        DESERIALIZATION_DECIMAL_FORMAT_DOC,
        validator=in_enum_names(DecimalFormat.names),
        group=SERIALIZATION_GROUP,
        order_in_group=order,
        width=Width.MEDIUM,
        display_name=DESERIALIZATION_DECIMAL_FORMAT_DISPLAY,
    )

    return definition.freeze()


_CONFIG_DEF: Optional[ConfigDef] = None
_CONFIG_DEF_LOCK = threading.Lock()


def _shared_config_def() -> ConfigDef:
    global _CONFIG_DEF

    if _CONFIG_DEF is None:
        with _CONFIG_DEF_LOCK:
            if _CONFIG_DEF is None:
                _CONFIG_DEF = build_json_converter_config_def()
                logger.debug(
                    f"{CONVERTER} Built shared JSON converter config definition "
                    f"({len(_CONFIG_DEF)} options)"
                )
    return _CONFIG_DEF


# =============================================================================
# Config
# =============================================================================


class JsonConverterConfig(ConverterConfig):
    """
    Configuration options for JSON converter instances.

    Args:
        props: Raw key/value input. Absent keys fall back to defaults.

    Raises:
        ConfigValidationError: If a value has the wrong type or a decimal
            format isn't one of DecimalFormat.names()
    """

    __slots__ = ()

    def __init__(self, props: Optional[Mapping[str, Any]] = None, do_log: bool = True):
        super().__init__(_shared_config_def(), props or {}, do_log=do_log)

    @staticmethod
    def config_def() -> ConfigDef:
        """The shared, read-only option definitions."""
        return _shared_config_def()

    def schemas_enabled(self) -> bool:
        """
        Return whether schemas are enabled.

        Returns:
            True if enabled, or False otherwise
        """
        return self.get_boolean(SCHEMAS_ENABLE_CONFIG)

    def schema_cache_size(self) -> int:
        """Get the cache size."""
        return self.get_int(SCHEMAS_CACHE_SIZE_CONFIG)

    def decimal_serialization_format(self) -> DecimalFormat:
        """
        Get the serialization format for decimal types.

        Raises:
            UnknownFormatError: If the stored name no longer matches a format
        """
        return DecimalFormat.for_name(self.get_string(SERIALIZATION_DECIMAL_FORMAT_CONFIG))

    def decimal_deserialization_format(self) -> DecimalFormat:
        """Get the deserialization format for decimal types."""
        return DecimalFormat.for_name(self.get_string(DESERIALIZATION_DECIMAL_FORMAT_CONFIG))


__all__ = [
    "JsonConverterConfig",
    "build_json_converter_config_def",
    "SCHEMAS_ENABLE_CONFIG",
    "SCHEMAS_ENABLE_DEFAULT",
    "SCHEMAS_CACHE_SIZE_CONFIG",
    "SCHEMAS_CACHE_SIZE_DEFAULT",
    "SERIALIZATION_DECIMAL_FORMAT_CONFIG",
    "SERIALIZATION_DECIMAL_FORMAT_DEFAULT",
    "DESERIALIZATION_DECIMAL_FORMAT_CONFIG",
    "DESERIALIZATION_DECIMAL_FORMAT_DEFAULT",
]
