"""Init command implementation."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from spectrafit.core.shared.exceptions import ConfigError
from spectrafit.io.config import generate_default_config
from spectrafit.ui import error, info, success


def init_command(
    path: Annotated[
        Path,
        typer.Argument(help="Where to write the configuration", dir_okay=False, resolve_path=True),
    ] = Path("spectrafit.toml"),
    shape: Annotated[
        str,
        typer.Option("--shape", "-s", help="Peak shape written to [shape]"),
    ] = "gaussian",
    method: Annotated[
        str,
        typer.Option("--method", "-m", help="Optimization method written to [optimization]"),
    ] = "lm",
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Replace an existing file"),
    ] = False,
) -> None:
    """Write a configuration file with the default bounds and solver settings.

    Examples
    --------
      Gaussian peaks, Levenberg-Marquardt:
        $ spectrafit init

      Pseudo-Voigt peaks with bounded trust-region steps:
        $ spectrafit init fit.toml --shape pseudovoigt --method trf
    """
    if path.exists() and not force:
        error(f"Refusing to overwrite [path]{path}[/path]")
        info("Pass [code]--force[/code] to replace it")
        raise typer.Exit(1)

    try:
        content = generate_default_config(shape, method)
    except ConfigError as exc:
        error(escape(str(exc)))
        raise typer.Exit(1) from exc

    path.write_text(content)
    success(f"Wrote [path]{path}[/path]")
