"""Fit command implementation."""

from __future__ import annotations

import pathlib  # noqa: TC003
from typing import Annotated

import typer
from rich.markup import escape

from spectrafit.core.domain.config import FitOptions
from spectrafit.core.fitting.optimize import optimize
from spectrafit.core.fitting.optimizer import TIMEOUT_MESSAGE
from spectrafit.core.shared.exceptions import SpectraFitError
from spectrafit.io.config import load_config
from spectrafit.io.readers import read_peaks, read_spectrum
from spectrafit.ui import close_logging, error, info, print_fit_result, setup_logging, warning


def fit_command(
    spectrum: Annotated[
        pathlib.Path,
        typer.Argument(
            help="Path to spectrum file (two columns: x, y)",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    peaklist: Annotated[
        pathlib.Path,
        typer.Argument(
            help="Path to peak list file (.csv, .json) with columns x, y, width[, mu]",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    config: Annotated[
        pathlib.Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to TOML configuration file",
            exists=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    shape: Annotated[
        str | None,
        typer.Option("--shape", "-s", help="Peak shape (gaussian, lorentzian, pseudovoigt)"),
    ] = None,
    method: Annotated[
        str | None,
        typer.Option("--method", "-m", help="Optimization method (lm, trf, dogbox)"),
    ] = None,
    max_iterations: Annotated[
        int | None,
        typer.Option("--max-iterations", help="Maximum number of function evaluations", min=1),
    ] = None,
    log_file: Annotated[
        pathlib.Path | None,
        typer.Option("--log-file", help="Write a log file (.log or .json)", dir_okay=False),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Show log messages on the console"),
    ] = False,
) -> None:
    """Fit a spectrum starting from a list of peak guesses.

    Command-line options override values from the configuration file.

    Examples
    --------
      Fit with Gaussian peaks:
        $ spectrafit fit spectrum.csv peaks.csv

      Pseudo-Voigt fit with a configuration file:
        $ spectrafit fit spectrum.csv peaks.csv --config spectrafit.toml --shape pseudovoigt
    """
    setup_logging(log_file, verbose)
    try:
        options = load_config(config) if config is not None else FitOptions()
        if shape is not None:
            options.shape.kind = shape
        if method is not None:
            options.optimization.kind = method
        if max_iterations is not None:
            options.optimization.options["max_iterations"] = max_iterations

        data = read_spectrum(spectrum)
        peaks = read_peaks(peaklist)
        info(f"Fitting {len(peaks)} peak(s) on {data.size} points")

        result = optimize(data, peaks, options)
        print_fit_result(result)
        if result.message == TIMEOUT_MESSAGE:
            warning("Time limit reached before convergence; showing the best parameters found")
    except SpectraFitError as exc:
        error(escape(str(exc)))
        raise typer.Exit(1) from exc
    finally:
        close_logging()
