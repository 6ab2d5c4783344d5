# jsonconv/config/parsed.py
"""
Parsed configuration instances.

ParsedConfig validates raw input against a ConfigDef once, at construction,
and then only serves reads. Instances are immutable and safe to share.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, List, Mapping

from jsonconv.config.definition import ConfigDef
from jsonconv.config.types import ConfigType
from jsonconv.core.config import ConfigError
from jsonconv.logging.logger import get_logger
from jsonconv.logging.tags import CONFIG

logger = get_logger(__name__)


class ParsedConfig:
    """
    Validated, immutable snapshot of option values.

    Args:
        definition: Schema to validate against
        props: Raw key/value input; absent keys fall back to defaults
        do_log: Log resolved values and unknown keys on construction

    Raises:
        ConfigValidationError: If any supplied value is invalid
    """

    __slots__ = ("_definition", "_originals", "_values")

    def __init__(self, definition: ConfigDef, props: Mapping[str, Any], do_log: bool = True):
        values = definition.parse(props)
        object.__setattr__(self, "_definition", definition)
        object.__setattr__(self, "_originals", MappingProxyType(dict(props)))
        object.__setattr__(self, "_values", MappingProxyType(values))

        if do_log:
            self._log_values()

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # -------------------------------------------------------------------------
    # Generic access
    # -------------------------------------------------------------------------

    @property
    def definition(self) -> ConfigDef:
        return self._definition

    def get(self, key: str) -> Any:
        """Get the validated value of a declared option."""
        if key not in self._values:
            raise ConfigError(f"Unknown configuration '{key}'")
        return self._values[key]

    def _typed(self, key: str, expected: ConfigType) -> Any:
        value = self.get(key)
        declared = self._definition[key].type
        if declared is not expected:
            raise ConfigError(
                f"Configuration '{key}' is declared as {declared.value}, not {expected.value}"
            )
        return value

    def get_boolean(self, key: str) -> bool:
        return self._typed(key, ConfigType.BOOLEAN)

    def get_int(self, key: str) -> int:
        return self._typed(key, ConfigType.INT)

    def get_string(self, key: str) -> str:
        return self._typed(key, ConfigType.STRING)

    def values(self) -> Mapping[str, Any]:
        """Read-only view of every validated value."""
        return self._values

    def originals(self) -> Mapping[str, Any]:
        """Read-only view of the raw input this instance was built from."""
        return self._originals

    def unused(self) -> List[str]:
        """Supplied keys that the definition doesn't declare."""
        return sorted(str(key) for key in self._originals if key not in self._definition)

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------

    def _log_values(self) -> None:
        lines = "".join(f"\n\t{key} = {value}" for key, value in sorted(self._values.items()))
        logger.info(f"{CONFIG} {type(self).__name__} values: {lines}")

        for key in self.unused():
            logger.warning(
                f"{CONFIG} The configuration '{key}' was supplied but isn't a known config."
            )

    # -------------------------------------------------------------------------
    # Dunder
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParsedConfig):
            return NotImplemented
        return type(self) is type(other) and dict(self._values) == dict(other._values)

    def __hash__(self) -> int:
        return hash((type(self).__name__, tuple(sorted(self._values))))

    def __repr__(self) -> str:
        values: Dict[str, Any] = dict(self._values)
        return f"{type(self).__name__}({values!r})"


__all__ = ["ParsedConfig"]
