# jsonconv/converter/__init__.py
"""
Converter configuration schemas.

Public API:
    - JsonConverterConfig: validated JSON converter settings
    - DecimalFormat: decimal serialization formats
    - ConverterType / ConverterConfig: options shared by all converters
"""

from .base import TYPE_CONFIG, ConverterConfig, ConverterType, new_converter_config_def
from .formats import DecimalFormat, UnknownFormatError
from .json_config import JsonConverterConfig, build_json_converter_config_def

__all__ = [
    "JsonConverterConfig",
    "build_json_converter_config_def",
    "DecimalFormat",
    "UnknownFormatError",
    "ConverterConfig",
    "ConverterType",
    "TYPE_CONFIG",
    "new_converter_config_def",
]
