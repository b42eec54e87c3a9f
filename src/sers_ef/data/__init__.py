"""
Spectrum pair loading (load_spectrum_pair, get_spectrum_arrays, etc.).
"""

from .io import (
    RAMAN_COL,
    SERS_COL,
    SPECTRUM_COLS,
    WAVE_NUMBER_COL,
    get_spectrum_arrays,
    load_spectrum_pair,
    spectra_to_tidy,
)

__all__ = [
    "RAMAN_COL",
    "SERS_COL",
    "SPECTRUM_COLS",
    "WAVE_NUMBER_COL",
    "get_spectrum_arrays",
    "load_spectrum_pair",
    "spectra_to_tidy",
]
