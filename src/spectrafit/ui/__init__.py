"""Terminal output and logging for the spectrafit CLI."""

from spectrafit.ui.console import SPECTRAFIT_THEME, VERSION, console
from spectrafit.ui.logging import close_logging, setup_logging
from spectrafit.ui.messages import error, info, success, warning
from spectrafit.ui.tables import create_table, print_fit_result, print_summary

__all__ = [
    "SPECTRAFIT_THEME",
    "VERSION",
    "close_logging",
    "console",
    "create_table",
    "error",
    "info",
    "print_fit_result",
    "print_summary",
    "setup_logging",
    "success",
    "warning",
]
