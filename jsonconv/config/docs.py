# jsonconv/config/docs.py
"""
Reference documentation generated from a ConfigDef.

Both renderers walk ConfigDef.descriptors(), so generated docs follow the
same group/order sequence as any UI built on the definition.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List

if TYPE_CHECKING:
    from jsonconv.config.definition import ConfigDef, OptionDescriptor


def format_value(value: Any) -> str:
    """Render a default value the way it would be written in a properties file."""
    from jsonconv.config.definition import NO_DEFAULT_VALUE

    if value is NO_DEFAULT_VALUE:
        return ""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(str(item) for item in value) if value else '""'
    if value == "":
        return '""'
    return str(value)


def _valid_values(option: OptionDescriptor) -> str:
    if option.validator is None:
        return ""
    return str(option.validator)


def to_rst(definition: ConfigDef) -> str:
    """Render every option as an RST definition block."""
    lines: List[str] = []
    for option in definition.descriptors():
        lines.append(f"``{option.name}``")
        lines.append(f"  {option.documentation}")
        lines.append("")
        lines.append(f"  * Type: {option.type.value}")
        if not option.required:
            lines.append(f"  * Default: {format_value(option.default)}")
        valid = _valid_values(option)
        if valid:
            lines.append(f"  * Valid Values: {valid}")
        lines.append(f"  * Importance: {option.importance.value}")
        lines.append("")
    return "\n".join(lines)


def to_markdown(definition: ConfigDef) -> str:
    """Render one markdown table per group, ungrouped options first."""
    sections: List[str] = []
    current = object()
    rows: List[str] = []

    def flush() -> None:
        if rows:
            sections.append("\n".join(rows))

    for option in definition.descriptors():
        if option.group != current:
            flush()
            current = option.group
            rows = [
                f"### {option.group or 'General'}",
                "",
                "| Name | Description | Type | Default | Valid Values | Importance |",
                "|---|---|---|---|---|---|",
            ]
        rows.append(
            f"| `{option.name}` | {option.documentation} | {option.type.value} "
            f"| {format_value(option.default)} | {_valid_values(option)} "
            f"| {option.importance.value} |"
        )
    flush()
    return "\n\n".join(sections) + "\n"


__all__ = ["format_value", "to_rst", "to_markdown"]
