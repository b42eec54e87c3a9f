"""
SERS-EF - Surface-Enhanced Raman Spectroscopy Enhancement Factor

Estimates the SERS enhancement factor from a normal Raman spectrum and a
SERS spectrum on a shared Raman shift axis, with band localization,
a diagnostic plot and a PDF report of the evidence record.
"""

from .data import get_spectrum_arrays, load_spectrum_pair, spectra_to_tidy
from .errors import EFDivisionByZeroError, InvalidInputError
from .estimation import EFParameters, EFResult, compute_ef
from .processing import find_closest_band, scipy_peak_finder
from .report import build_ef_report_pdf
from .visualization import plot_enhancement_factor

__version__ = "0.1.0"

__all__ = [
    "EFDivisionByZeroError",
    "EFParameters",
    "EFResult",
    "InvalidInputError",
    "build_ef_report_pdf",
    "compute_ef",
    "find_closest_band",
    "get_spectrum_arrays",
    "load_spectrum_pair",
    "plot_enhancement_factor",
    "scipy_peak_finder",
    "spectra_to_tidy",
    "__version__",
]
