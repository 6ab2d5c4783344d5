# jsonconv/logging/tags.py
"""
Logging subsystem tags.

Prefixes used across jsonconv so log output stays searchable.
"""

CONFIG = "[CONFIG]"
DEFINITION = "[DEFINITION]"
VALIDATION = "[VALIDATION]"
CONVERTER = "[CONVERTER]"
CLI = "[CLI]"
