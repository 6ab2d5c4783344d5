# jsonconv/cli/cli.py
"""
jsonconv CLI - Main application.

Commands:
    jsonconv config show       Show every converter option with its default
    jsonconv config docs       Print reference docs (rst or markdown)
    jsonconv config validate   Validate a YAML converter config

NOTE: Commands import their implementation lazily, when invoked.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from jsonconv.logging.logger import configure_logging

app = typer.Typer(
    name="jsonconv",
    help="jsonconv - JSON converter configuration tools.",
    no_args_is_help=True,
    add_completion=False,
)

config_app = typer.Typer(help="Converter configuration commands", no_args_is_help=True)
app.add_typer(config_app, name="config")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """jsonconv - JSON converter configuration tools."""
    configure_logging(level=logging.DEBUG if verbose else logging.WARNING)


@config_app.command("show")
def show(
    group: Optional[str] = typer.Option(None, "--group", "-g", help="Only show options in this group."),
) -> None:
    """Show every converter option in presentation order."""
    from jsonconv.cli.commands import config as mod

    mod.show_command(group=group)


@config_app.command("docs")
def docs(
    fmt: str = typer.Option("rst", "--format", "-f", help="Output format: rst or markdown."),
) -> None:
    """Print reference documentation for converter options."""
    from jsonconv.cli.commands import config as mod

    mod.docs_command(fmt=fmt)


@config_app.command("validate")
def validate(
    path: Path = typer.Argument(..., help="Path to a YAML converter config."),
    json_output: bool = typer.Option(False, "--json", help="Print resolved values as JSON."),
) -> None:
    """Validate a YAML converter config and print the resolved values."""
    from jsonconv.cli.commands import config as mod

    mod.validate_command(path=path, json_output=json_output)


if __name__ == "__main__":
    app()
