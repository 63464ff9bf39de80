"""Console configuration and theme for the spectrafit CLI."""

from rich.console import Console
from rich.theme import Theme

from spectrafit import __version__

SPECTRAFIT_THEME = Theme(
    {
        # --- Semantic Status ---
        "success": "bold green",
        "warning": "bold yellow",
        "error": "bold red",
        "info": "cyan",
        # --- UI Structure ---
        "header": "bold cyan",
        # --- Data & Values ---
        "key": "cyan",
        "value": "green",
        "metric": "bold green",
        "path": "blue underline",
        "code": "bold magenta",
    }
)

# Single console instance for entire application
console = Console(theme=SPECTRAFIT_THEME)

VERSION = __version__

__all__ = ["SPECTRAFIT_THEME", "VERSION", "console"]
