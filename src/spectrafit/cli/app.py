"""Main Typer application for spectrafit."""

from typing import Annotated

import typer

from spectrafit.cli.callbacks import version_callback
from spectrafit.cli.commands import fit_command, init_command

app = typer.Typer(
    name="spectrafit",
    help="spectrafit - Fit spectra to sums of Gaussian, Lorentzian and pseudo-Voigt peaks",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """spectrafit - Least-squares fitting of peak shapes in 1D spectra."""


app.command(name="fit")(fit_command)
app.command(name="init")(init_command)
