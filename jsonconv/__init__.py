"""
jsonconv - configuration schema for a JSON record converter.

Public API:
    - JsonConverterConfig: validated, immutable converter settings with typed accessors
    - DecimalFormat: BINARY / TEXT / NUMERIC decimal encodings
    - ConfigDef / ParsedConfig: the generic option-definition framework underneath
    - ConfigError and subclasses: every configuration failure

Examples:
    >>> from jsonconv import JsonConverterConfig, DecimalFormat
    >>> config = JsonConverterConfig({"schemas.enable": False})
    >>> config.schemas_enabled()
    False
    >>> config.decimal_serialization_format() is DecimalFormat.BINARY
    True

    Loading from YAML:
    >>> from jsonconv import load_yaml
    >>> config = JsonConverterConfig(load_yaml("converter.yaml"))
"""

__version__ = "0.1.0"

from jsonconv.config import ConfigDef, Importance, OptionDescriptor, ParsedConfig, Width
from jsonconv.converter import (
    ConverterType,
    DecimalFormat,
    JsonConverterConfig,
    UnknownFormatError,
)
from jsonconv.core.config import (
    ConfigDefinitionError,
    ConfigError,
    ConfigValidationError,
    load_yaml,
)

__all__ = [
    "__version__",
    "JsonConverterConfig",
    "DecimalFormat",
    "ConverterType",
    "UnknownFormatError",
    "ConfigDef",
    "OptionDescriptor",
    "ParsedConfig",
    "Importance",
    "Width",
    "ConfigError",
    "ConfigDefinitionError",
    "ConfigValidationError",
    "load_yaml",
]
