"""Typer callbacks for CLI."""

import typer

from spectrafit.ui import VERSION, console


def version_callback(value: bool | None) -> None:
    """Show version information and exit."""
    if value:
        console.print(f"[header]spectrafit[/header] [dim]v{VERSION}[/dim]")
        raise typer.Exit
