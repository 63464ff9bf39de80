"""UI tables for displaying fit results."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich import box
from rich.table import Table

from spectrafit.ui.console import console

if TYPE_CHECKING:
    from spectrafit.core.fitting.optimize import FitResult

__all__ = ["create_table", "print_fit_result", "print_summary"]


def create_table(title: str | None = None, show_header: bool = True) -> Table:
    """Create a standard table with consistent styling."""
    return Table(
        title=title,
        title_style="header" if title else None,
        box=box.ROUNDED,
        show_header=show_header,
        header_style="bold cyan",
        border_style="dim",
    )


def print_summary(items: dict[str, Any], title: str = "Summary") -> None:
    """Print a standard two-column summary table."""
    table = create_table(title, show_header=False)
    table.add_column("Item", style="metric")
    table.add_column("Value", style="value")

    for key, value in items.items():
        table.add_row(key, str(value))

    console.print(table)


def print_fit_result(result: FitResult, title: str = "Fitted peaks") -> None:
    """Print fitted peaks followed by the error and iteration count."""
    with_mu = any(peak.mu is not None for peak in result.peaks)

    table = create_table(title)
    table.add_column("#", style="dim", justify="right")
    for column in ("x", "y", "width"):
        table.add_column(column, justify="right")
    if with_mu:
        table.add_column("mu", justify="right")

    for index, peak in enumerate(result.peaks):
        row = [str(index), f"{peak.x:.6g}", f"{peak.y:.6g}", f"{peak.width:.6g}"]
        if with_mu:
            row.append("" if peak.mu is None else f"{peak.mu:.4f}")
        table.add_row(*row)

    console.print(table)
    print_summary({"Error": f"{result.error:.6g}", "Iterations": result.iterations}, "Fit")
