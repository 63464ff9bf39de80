"""Spectrum and peak list readers."""

from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

import numpy as np
import pandas as pd

from spectrafit.core.domain.peaks import Peak, create_peaks
from spectrafit.core.domain.spectrum import Spectrum
from spectrafit.core.shared.exceptions import DataError, DataIOError

PeakReader = Callable[[Path], list[Peak]]

PEAK_READERS: dict[str, PeakReader] = {}

REQUIRED_PEAK_COLUMNS = ("x", "y", "width")


def register_reader(file_types: str | Iterable[str]) -> Callable[[PeakReader], PeakReader]:
    """Decorator to register a peak list reader for specific file suffixes."""
    if isinstance(file_types, str):
        file_types = [file_types]

    def decorator(fn: PeakReader) -> PeakReader:
        for ft in file_types:
            PEAK_READERS[ft] = fn
        return fn

    return decorator


def read_spectrum(path: Path) -> Spectrum:
    """Read a two-column spectrum (x, y).

    Comma-separated files (``.csv``) may carry a header row; other files are
    read as whitespace-separated text. Lines starting with ``#`` are ignored.
    """
    if not path.exists():
        msg = f"Spectrum file not found: {path}"
        raise DataIOError(msg)

    if path.suffix.lower() == ".csv":
        first_row = pd.read_csv(path, comment="#", header=None, nrows=1, dtype=str)
        header = None if all(_is_number(cell) for cell in first_row.iloc[0]) else 0
        frame = pd.read_csv(path, comment="#", header=header)
    else:
        frame = pd.read_csv(path, comment="#", sep=r"\s+", header=None)

    if frame.shape[1] < 2:
        msg = f"Expected two columns (x, y) in {path}, found {frame.shape[1]}"
        raise DataIOError(msg)

    try:
        x = frame.iloc[:, 0].to_numpy(dtype=float)
        y = frame.iloc[:, 1].to_numpy(dtype=float)
        return Spectrum.from_data({"x": x, "y": y})
    except (ValueError, DataError) as exc:
        msg = f"Invalid spectrum in {path}: {exc}"
        raise DataIOError(msg) from exc


def _is_number(text: str) -> bool:
    try:
        float(text)
    except ValueError:
        return False
    return True


def _records_to_peaks(frame: pd.DataFrame, path: Path) -> list[Peak]:
    missing = [col for col in REQUIRED_PEAK_COLUMNS if col not in frame.columns]
    if missing:
        msg = f"Peak list {path} is missing column(s): {', '.join(missing)}"
        raise DataIOError(msg)

    records: list[dict[str, Any]] = []
    for record in frame.to_dict(orient="records"):
        records.append({
            key: value
            for key, value in record.items()
            if not (isinstance(value, float) and np.isnan(value))
        })

    try:
        return create_peaks(records)
    except DataError as exc:
        msg = f"Invalid peak list {path}: {exc}"
        raise DataIOError(msg) from exc


@register_reader(".csv")
def read_csv_peaks(path: Path) -> list[Peak]:
    """Read peaks from a CSV file with at least the columns x, y, width."""
    return _records_to_peaks(pd.read_csv(path, comment="#"), path)


@register_reader(".json")
def read_json_peaks(path: Path) -> list[Peak]:
    """Read peaks from a JSON array of objects."""
    try:
        frame = pd.read_json(path, orient="records")
    except ValueError as exc:
        msg = f"Invalid JSON peak list {path}: {exc}"
        raise DataIOError(msg) from exc
    return _records_to_peaks(frame, path)


def read_peaks(path: Path) -> list[Peak]:
    """Read a peak list, dispatching on the file suffix."""
    if not path.exists():
        msg = f"Peak list file not found: {path}"
        raise DataIOError(msg)

    reader = PEAK_READERS.get(path.suffix.lower())
    if reader is None:
        msg = f"Unsupported peak list format: {path.suffix} (supported: {', '.join(PEAK_READERS)})"
        raise DataIOError(msg)
    return reader(path)
