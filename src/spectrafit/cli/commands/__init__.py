"""CLI command implementations."""

from spectrafit.cli.commands.fit import fit_command
from spectrafit.cli.commands.init import init_command

__all__ = ["fit_command", "init_command"]
