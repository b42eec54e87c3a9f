"""
Band localization: find the spectral index used for intensity extraction.

Two strategies are supported. Peak-aware mode snaps to a prominent SERS peak
near the requested band; nearest mode takes the axis sample closest to the
band value. Peak detection is an injected PeakFinder so both paths can be
exercised independently.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np
from scipy.signal import find_peaks

from sers_ef.constants import PEAK_PROMINENCE_FACTOR

logger = logging.getLogger(__name__)

# (spectrum, min_prominence) -> ascending peak indices
PeakFinder = Callable[[np.ndarray, float], np.ndarray]

MODE_PEAK = "peak"
MODE_NEAREST = "nearest"


@dataclass(frozen=True)
class BandLocation:
    """Located band of interest and the evidence used to find it."""

    value: float
    index: int
    mode: str
    peak_indices: tuple[int, ...] = ()


def scipy_peak_finder(spectrum: np.ndarray, min_prominence: float) -> np.ndarray:
    """
    Local maxima whose prominence is at least min_prominence.

    Thin wrapper around scipy.signal.find_peaks. Endpoints are never peaks.
    A flat-topped peak is reported at its first (leftmost) sample rather than
    at the plateau middle.
    """
    _, props = find_peaks(
        np.asarray(spectrum, dtype=float),
        prominence=min_prominence,
        plateau_size=1,
    )
    return np.asarray(props["left_edges"], dtype=int)


def default_band(wave_number: np.ndarray, sers_spectrum: np.ndarray) -> float:
    """Axis value at the first global maximum of the SERS spectrum."""
    return float(wave_number[int(np.argmax(sers_spectrum))])


def nearest_index(wave_number: np.ndarray, band: float) -> int:
    """
    Index minimizing |wave_number[i] - band|; ties go to the lowest index.

    The axis may be ascending, descending or unordered.
    """
    return int(np.argmin(np.abs(np.asarray(wave_number, dtype=float) - band)))


def find_closest_band(
    wave_number: np.ndarray,
    sers_spectrum: np.ndarray,
    band: Optional[float] = None,
    *,
    peak_finder: Optional[PeakFinder] = scipy_peak_finder,
    prominence_factor: float = PEAK_PROMINENCE_FACTOR,
) -> BandLocation:
    """
    Locate the index of the requested band for intensity lookup.

    Peak-aware mode (peak_finder given): detect SERS peaks with prominence
    >= prominence_factor * max(sers_spectrum). Take the axis index nearest
    the band value, then the detected peak index nearest that axis index
    (ties to the lowest index). The anchor is an index, not a band value.

    Nearest mode (peak_finder is None, or no peak qualifies): the axis index
    nearest the band value.

    Args:
        wave_number: Raman shift axis (cm⁻¹), normalized 1-D array.
        sers_spectrum: SERS intensities aligned with wave_number.
        band: Target band (cm⁻¹). Defaults to the SERS maximum position.
        peak_finder: Peak detection strategy, or None to disable it.
        prominence_factor: Minimum prominence as a fraction of the maximum.

    Returns:
        BandLocation with the located axis value, index, mode and peaks.
    """
    if band is None:
        band = default_band(wave_number, sers_spectrum)

    anchor = nearest_index(wave_number, band)

    if peak_finder is not None:
        min_prominence = prominence_factor * float(np.max(sers_spectrum))
        peaks = np.asarray(peak_finder(sers_spectrum, min_prominence), dtype=int)
        peaks = np.sort(peaks)
        if peaks.size > 0:
            idx = int(peaks[int(np.argmin(np.abs(peaks - anchor)))])
            logger.debug(
                "Band %.2f snapped to peak at index %d (%.2f cm^-1)",
                band,
                idx,
                wave_number[idx],
            )
            return BandLocation(
                value=float(wave_number[idx]),
                index=idx,
                mode=MODE_PEAK,
                peak_indices=tuple(int(p) for p in peaks),
            )
        logger.debug(
            "No SERS peak above prominence %.4g; using nearest axis sample",
            min_prominence,
        )

    return BandLocation(
        value=float(wave_number[anchor]),
        index=anchor,
        mode=MODE_NEAREST,
    )
