# jsonconv/cli/commands/config.py
"""
Converter configuration commands.

Usage:
    jsonconv config show                     # Table of every option
    jsonconv config show --group Schemas     # One group only
    jsonconv config docs --format markdown   # Reference docs
    jsonconv config validate converter.yaml  # Validate a YAML config
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from jsonconv.cli.ui import console, ui
from jsonconv.config.docs import format_value
from jsonconv.converter import JsonConverterConfig
from jsonconv.core.config import ConfigError, load_yaml
from jsonconv.logging.logger import get_logger
from jsonconv.logging.tags import CLI

logger = get_logger(__name__)

DOC_FORMATS = ("rst", "markdown")


# =============================================================================
# show
# =============================================================================


def show_command(group: Optional[str] = None) -> None:
    """Print the option table, optionally restricted to one group."""
    definition = JsonConverterConfig.config_def()
    options = definition.descriptors()

    if group is not None:
        if group not in definition.groups():
            ui.error(f"Unknown group: {escape(group)}")
            ui.info(f"Available: {', '.join(definition.groups())}")
            raise typer.Exit(1)
        options = [option for option in options if option.group == group]

    logger.debug(f"{CLI} Showing {len(options)} option(s)")
    ui.header("JSON Converter Config", subtitle=f"{len(options)} option(s)")

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Name", style="cyan")
    table.add_column("Display Name")
    table.add_column("Type", style="green")
    table.add_column("Default")
    table.add_column("Valid Values", style="dim")
    table.add_column("Importance")
    table.add_column("Group", style="dim")

    for option in options:
        table.add_row(
            option.name,
            escape(option.display_name),
            option.type.value,
            escape(format_value(option.default)),
            escape(str(option.validator) if option.validator else ""),
            option.importance.value,
            escape(option.group or ""),
        )

    console.print(table)


# =============================================================================
# docs
# =============================================================================


def docs_command(fmt: str = "rst") -> None:
    """Print reference documentation in the requested format."""
    if fmt not in DOC_FORMATS:
        ui.error(f"Unknown format: {escape(fmt)}")
        ui.info(f"Available: {', '.join(DOC_FORMATS)}")
        raise typer.Exit(1)

    definition = JsonConverterConfig.config_def()
    text = definition.to_rst() if fmt == "rst" else definition.to_markdown()
    typer.echo(text)


# =============================================================================
# validate
# =============================================================================


def validate_command(path: Path, json_output: bool = False) -> None:
    """Validate a YAML file against the converter options."""
    try:
        props = load_yaml(path)
    except ConfigError as e:
        ui.error(escape(str(e)))
        raise typer.Exit(1)

    errors = JsonConverterConfig.config_def().validate_all(props)
    if errors:
        logger.debug(f"{CLI} {path}: {len(errors)} invalid option(s)")
        for message in errors.values():
            ui.error(escape(message))
        raise typer.Exit(1)

    config = JsonConverterConfig(props, do_log=False)

    if json_output:
        typer.echo(json.dumps(dict(config.values()), indent=2))
        return

    for key in config.unused():
        ui.warning(f"Unknown option ignored: {escape(key)}")

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Name", style="cyan")
    table.add_column("Value", style="green")
    for key, value in config.values().items():
        table.add_row(key, escape(format_value(value)))

    console.print(table)
    ui.success(f"{escape(str(path))} is valid")
