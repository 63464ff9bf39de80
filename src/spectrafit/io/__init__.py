"""Input and configuration files."""

from spectrafit.io.config import generate_default_config, load_config, save_config
from spectrafit.io.readers import read_peaks, read_spectrum

__all__ = ["generate_default_config", "load_config", "read_peaks", "read_spectrum", "save_config"]
