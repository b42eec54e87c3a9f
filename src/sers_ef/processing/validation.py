"""
Input normalization and validation for enhancement factor estimation.

Spectra may arrive as lists, numpy arrays, pandas Series, or single-row /
single-column matrices. They are flattened to 1-D float arrays in the order
supplied; nothing is resorted.
"""

import numbers
from typing import Any, Optional

import numpy as np

from sers_ef.errors import InvalidInputError

SPECTRUM_NAMES = ("wave_number", "raman_spectrum", "sers_spectrum")
POSITIVE_PARAMETERS = ("wavelength", "na", "rho", "mol_weight", "surf_area")


def as_spectrum_array(values: Any, name: str) -> np.ndarray:
    """
    Convert one spectral sequence to a finite 1-D float array.

    Row (1, n) and column (n, 1) orientations are both accepted.

    Raises:
        InvalidInputError: If values are non-numeric, empty, non-finite,
            or not a single row/column.
    """
    try:
        arr = np.asarray(values, dtype=float)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"{name} must contain numeric values: {e}") from e

    if arr.ndim > 1:
        if sum(dim > 1 for dim in arr.shape) > 1:
            raise InvalidInputError(
                f"{name} must be a single row or column, got shape {arr.shape}"
            )
    arr = arr.ravel()

    if arr.size == 0:
        raise InvalidInputError(f"{name} is empty")
    if not np.all(np.isfinite(arr)):
        raise InvalidInputError(f"{name} contains NaN or infinite values")
    return arr


def normalize_spectra(
    wave_number: Any,
    raman_spectrum: Any,
    sers_spectrum: Any,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Normalize the three aligned sequences to 1-D float arrays of equal length.

    Args:
        wave_number: Raman shift axis (cm⁻¹), ascending or descending.
        raman_spectrum: Normal Raman intensities (a.u.).
        sers_spectrum: SERS intensities (a.u.).

    Returns:
        Tuple (wave_number, raman_spectrum, sers_spectrum) of float arrays.

    Raises:
        InvalidInputError: If any sequence is invalid or lengths differ.
    """
    arrays = tuple(
        as_spectrum_array(values, name)
        for values, name in zip(
            (wave_number, raman_spectrum, sers_spectrum), SPECTRUM_NAMES
        )
    )
    lengths = {name: arr.size for name, arr in zip(SPECTRUM_NAMES, arrays)}
    if len(set(lengths.values())) != 1:
        raise InvalidInputError(f"Spectra must have equal lengths, got {lengths}")
    return arrays


def _as_real(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidInputError(f"{name} must be a real number, got {value!r}")
    out = float(value)
    if not np.isfinite(out):
        raise InvalidInputError(f"{name} must be finite, got {value!r}")
    return out


def validate_parameters(
    *,
    band: Optional[float],
    wavelength: float,
    na: float,
    rho: float,
    mol_weight: float,
    surf_area: float,
    show_plot: bool,
) -> dict[str, Any]:
    """
    Check type and sign constraints of the physical parameters.

    Returns:
        Dict of the parameters coerced to float (band stays None if omitted).

    Raises:
        InvalidInputError: If a parameter is non-numeric, non-finite,
            non-positive, or show_plot is not a boolean.
    """
    params: dict[str, Any] = {
        "band": None if band is None else _as_real(band, "band"),
    }
    raw = {
        "wavelength": wavelength,
        "na": na,
        "rho": rho,
        "mol_weight": mol_weight,
        "surf_area": surf_area,
    }
    for name in POSITIVE_PARAMETERS:
        val = _as_real(raw[name], name)
        if val <= 0:
            raise InvalidInputError(f"{name} must be positive, got {val}")
        params[name] = val

    if not isinstance(show_plot, (bool, np.bool_)):
        raise InvalidInputError(f"show_plot must be a boolean, got {show_plot!r}")
    params["show_plot"] = bool(show_plot)
    return params
