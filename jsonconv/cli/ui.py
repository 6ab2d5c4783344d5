# jsonconv/cli/ui.py
"""
Shared UI helpers for CLI commands.

Usage:
    from jsonconv.cli.ui import ui, console

    ui.header("Converter Config")
    ui.success("Valid")
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel

console = Console()


class UI:
    """Consistent styling for CLI output."""

    def print(self, msg: str, style: str = "") -> None:
        """Print with optional Rich styling."""
        if style:
            console.print(f"[{style}]{msg}[/{style}]")
        else:
            console.print(msg)

    def header(self, title: str, subtitle: str = "") -> None:
        """Print a fitted box around the command title."""
        if subtitle:
            content = f"[bold]{title}[/bold]\n[dim]{subtitle}[/dim]"
        else:
            content = f"[bold]{title}[/bold]"
        console.print(Panel.fit(content, border_style="blue"))

    def section(self, title: str) -> None:
        console.print(f"\n[bold cyan]{title}[/bold cyan]")

    def success(self, msg: str) -> None:
        console.print(f"[green]✓[/green] {msg}")

    def error(self, msg: str) -> None:
        console.print(f"[red]✗[/red] {msg}")

    def warning(self, msg: str, detail: str = "") -> None:
        detail_str = f" [dim]({detail})[/dim]" if detail else ""
        console.print(f"[yellow]⚠[/yellow] {msg}{detail_str}")

    def info(self, msg: str) -> None:
        console.print(f"[dim]{msg}[/dim]")


ui = UI()

__all__ = ["UI", "ui", "console"]
