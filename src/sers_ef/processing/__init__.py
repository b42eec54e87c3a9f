"""
Spectral input handling: normalization, validation and band localization.
"""

from .band import (
    MODE_NEAREST,
    MODE_PEAK,
    BandLocation,
    PeakFinder,
    default_band,
    find_closest_band,
    nearest_index,
    scipy_peak_finder,
)
from .validation import (
    as_spectrum_array,
    normalize_spectra,
    validate_parameters,
)

__all__ = [
    "BandLocation",
    "MODE_NEAREST",
    "MODE_PEAK",
    "PeakFinder",
    "as_spectrum_array",
    "default_band",
    "find_closest_band",
    "nearest_index",
    "normalize_spectra",
    "scipy_peak_finder",
    "validate_parameters",
]
