"""UI messages and status indicators."""

from __future__ import annotations

import logging

from spectrafit.ui.console import console

logger = logging.getLogger("spectrafit.ui")

__all__ = ["error", "info", "success", "warning"]


def success(message: str, indent: int = 0) -> None:
    """Display a success message."""
    console.print(f"{'  ' * indent}[success]✓[/success] {message}")


def warning(message: str, indent: int = 0) -> None:
    """Display a warning message."""
    console.print(f"{'  ' * indent}[warning]⚠[/warning]  {message}")
    logger.warning(message)


def error(message: str, indent: int = 0) -> None:
    """Display an error message."""
    console.print(f"{'  ' * indent}[error]✗[/error] {message}")
    logger.error(message)


def info(message: str, indent: int = 0) -> None:
    """Display an info message."""
    console.print(f"{'  ' * indent}[dim]▸[/dim] {message}")
