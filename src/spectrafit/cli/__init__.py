"""Command-line interface for spectrafit."""

from spectrafit.cli.app import app

__all__ = ["app"]
