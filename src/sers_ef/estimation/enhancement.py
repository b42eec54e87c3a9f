"""
SERS enhancement factor (EF) estimation.

EF = (I_SERS * N_normal) / (I_normal * N_SERS), where the intensities are
read at the located band and the molecule counts follow from the excitation
volume (normal Raman) and a monolayer under the laser spot (SERS).

Reference:
    Childs, A., Vinogradova, E., Ruiz-Zepeda, F., Velazquez-Salazar, J. J., &
    Jose-Yacaman, M. (2016). Biocompatible gold/silver nanostars for
    surface-enhanced Raman scattering. Journal of Raman Spectroscopy, 47(6),
    651-655. https://doi.org/10.1002/jrs.4888
"""

import logging
import math
from dataclasses import asdict, dataclass, field
from typing import Any, Optional

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from sers_ef.constants import (
    DEFAULT_MOL_WEIGHT,
    DEFAULT_NA,
    DEFAULT_RHO,
    DEFAULT_SHOW_PLOT,
    DEFAULT_SURF_AREA,
    DEFAULT_WAVELENGTH_NM,
    ZERO_DIVISION_MODES,
)
from sers_ef.errors import EFDivisionByZeroError, InvalidInputError
from sers_ef.estimation.optics import (
    excitation_volume,
    normal_molecule_count,
    sers_molecule_count,
)
from sers_ef.processing.band import PeakFinder, find_closest_band, scipy_peak_finder
from sers_ef.processing.validation import normalize_spectra, validate_parameters

logger = logging.getLogger(__name__)

_SPECTRUM_FIELDS = ("wave_number", "raman_spectrum", "sers_spectrum")


@dataclass(frozen=True)
class EFParameters:
    """Physical parameters of an EF estimation (band=None means SERS maximum)."""

    band: Optional[float] = None
    wavelength: float = DEFAULT_WAVELENGTH_NM
    na: float = DEFAULT_NA
    rho: float = DEFAULT_RHO
    mol_weight: float = DEFAULT_MOL_WEIGHT
    surf_area: float = DEFAULT_SURF_AREA
    show_plot: bool = DEFAULT_SHOW_PLOT

    def __post_init__(self) -> None:
        checked = validate_parameters(**asdict(self))
        for name, value in checked.items():
            object.__setattr__(self, name, value)


@dataclass(frozen=True, eq=False)
class EFResult:
    """
    Evidence record of one EF estimation.

    Holds every input (spectra as read-only arrays) and every derived
    quantity. Lengths are in meters, volumes in m^3.
    """

    wave_number: np.ndarray = field(repr=False)
    raman_spectrum: np.ndarray = field(repr=False)
    sers_spectrum: np.ndarray = field(repr=False)
    band: Optional[float]
    wavelength: float
    na: float
    rho: float
    mol_weight: float
    surf_area: float
    show_plot: bool
    closest_band: float
    closest_index: int
    i_normal: float
    i_sers: float
    r: float
    h: float
    vol_exc: float
    n_normal: float
    n_sers: float
    ef: float
    band_mode: str
    peak_indices: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        for name in _SPECTRUM_FIELDS:
            arr = np.array(getattr(self, name), dtype=float)
            arr.setflags(write=False)
            object.__setattr__(self, name, arr)

    def summary(self) -> dict[str, Any]:
        """Scalar fields (everything except the spectra and peak list)."""
        return {
            k: v
            for k, v in asdict(self).items()
            if k not in _SPECTRUM_FIELDS and k != "peak_indices"
        }

    def to_series(self) -> pd.Series:
        """Scalar fields as a Series, e.g. for tabular reports."""
        return pd.Series(self.summary(), dtype=object, name="value")


def _divide_ef(numerator: float, denominator: float, zero_division: str) -> float:
    if denominator == 0 and zero_division == "raise":
        raise EFDivisionByZeroError(
            "EF denominator is zero (normal Raman intensity or SERS molecule "
            "count at the selected band)"
        )
    with np.errstate(divide="ignore", invalid="ignore"):
        ef = float(np.float64(numerator) / np.float64(denominator))
    if not math.isfinite(ef):
        logger.warning("Enhancement factor is not finite: %s", ef)
    return ef


def compute_ef(
    wave_number: Any,
    raman_spectrum: Any,
    sers_spectrum: Any,
    *,
    band: Optional[float] = None,
    wavelength: float = DEFAULT_WAVELENGTH_NM,
    na: float = DEFAULT_NA,
    rho: float = DEFAULT_RHO,
    mol_weight: float = DEFAULT_MOL_WEIGHT,
    surf_area: float = DEFAULT_SURF_AREA,
    show_plot: bool = DEFAULT_SHOW_PLOT,
    peak_finder: Optional[PeakFinder] = scipy_peak_finder,
    zero_division: str = "raise",
    ax: Optional[plt.Axes] = None,
) -> tuple[float, EFResult]:
    """
    Estimate the SERS enhancement factor at a Raman band.

    Args:
        wave_number: Raman shift axis (cm⁻¹), row or column, any order.
        raman_spectrum: Normal Raman spectrum (a.u.) aligned with wave_number.
        sers_spectrum: SERS spectrum (a.u.) aligned with wave_number.
        band: Raman band of interest (cm⁻¹). Default: position of the SERS
            maximum.
        wavelength: Excitation wavelength (nm).
        na: Numerical aperture of the objective.
        rho: Density of the molecule under test (g/cm³).
        mol_weight: Molecular weight of the molecule under test (g/mol).
        surf_area: Surface area of one molecule (nm²).
        show_plot: Render the diagnostic plot after computing. Without ax
            each call opens a new pyplot figure that stays open for
            plt.show() or plt.gcf(); close it (or pass ax) in loops.
        peak_finder: Peak detection strategy; None selects nearest-sample
            band localization.
        zero_division: "raise" to raise EFDivisionByZeroError on a zero
            denominator, "propagate" to return inf/nan.
        ax: Optional axes for the diagnostic plot. No figure is created
            when given.

    Returns:
        Tuple (EF, EFResult).

    Raises:
        InvalidInputError: Invalid spectra or parameters.
        EFDivisionByZeroError: Zero denominator with zero_division="raise".

    Example:
        >>> ef, result = compute_ef(wn, raman, sers, band=1262, show_plot=False)
        >>> result.closest_band, result.i_sers
    """
    if zero_division not in ZERO_DIVISION_MODES:
        raise InvalidInputError(
            f"zero_division must be one of {ZERO_DIVISION_MODES}, got {zero_division!r}"
        )
    params = EFParameters(
        band=band,
        wavelength=wavelength,
        na=na,
        rho=rho,
        mol_weight=mol_weight,
        surf_area=surf_area,
        show_plot=show_plot,
    )
    wn, raman, sers = normalize_spectra(wave_number, raman_spectrum, sers_spectrum)

    location = find_closest_band(wn, sers, params.band, peak_finder=peak_finder)
    i_normal = float(raman[location.index])
    i_sers = float(sers[location.index])

    geometry = excitation_volume(params.wavelength, params.na)
    n_normal = normal_molecule_count(geometry.vol_exc, params.rho, params.mol_weight)
    n_sers = sers_molecule_count(geometry.r, params.surf_area)

    ef = _divide_ef(i_sers * n_normal, i_normal * n_sers, zero_division)

    result = EFResult(
        wave_number=wn,
        raman_spectrum=raman,
        sers_spectrum=sers,
        closest_band=location.value,
        closest_index=location.index,
        i_normal=i_normal,
        i_sers=i_sers,
        r=geometry.r,
        h=geometry.h,
        vol_exc=geometry.vol_exc,
        n_normal=float(n_normal),
        n_sers=float(n_sers),
        ef=ef,
        band_mode=location.mode,
        peak_indices=location.peak_indices,
        **asdict(params),
    )
    logger.debug(
        "EF %.5g at %.2f cm^-1 (index %d, %s mode)",
        ef,
        location.value,
        location.index,
        location.mode,
    )

    if params.show_plot:
        from sers_ef.visualization.plots import plot_enhancement_factor

        try:
            plot_enhancement_factor(result, ax=ax)
        except Exception as e:
            logger.warning("Could not render enhancement factor plot: %s", e)

    return ef, result
