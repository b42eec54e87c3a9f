"""
Optical geometry of the focused laser and molecule counts.

The excitation volume is approximated as a cylinder: radius from the Airy
disk of the objective, height from its depth of focus. All lengths are in
meters.
"""

from dataclasses import dataclass

import numpy as np
from scipy import special

from sers_ef.constants import AVOGADRO, CM3_TO_M3, NM2_PER_M2, NM_TO_M

# First positive zero of J1 divided by 2*pi (~0.6098)
AIRY_ZERO_FACTOR = float(special.jn_zeros(1, 1)[0] / (2 * np.pi))


@dataclass(frozen=True)
class ExcitationVolume:
    """Cylindrical excitation volume of the focused laser spot."""

    r: float  # laser spot radius (m)
    h: float  # depth of focus (m)
    vol_exc: float  # m^3


def depth_of_focus(wavelength_nm: float, na: float) -> float:
    """h = 2 * lambda / NA^2, in meters."""
    lam = wavelength_nm * NM_TO_M
    return (2 * lam) / na**2


def spot_radius(wavelength_nm: float, na: float) -> float:
    """r = z1 * lambda / NA, in meters."""
    lam = wavelength_nm * NM_TO_M
    return AIRY_ZERO_FACTOR * lam / na


def excitation_volume(wavelength_nm: float, na: float) -> ExcitationVolume:
    """
    Compute the laser spot geometry for a given excitation and objective.

    Args:
        wavelength_nm: Excitation wavelength (nm).
        na: Numerical aperture of the objective.

    Returns:
        ExcitationVolume with radius, depth of focus and V = pi * r^2 * h.
    """
    r = spot_radius(wavelength_nm, na)
    h = depth_of_focus(wavelength_nm, na)
    return ExcitationVolume(r=r, h=h, vol_exc=np.pi * r**2 * h)


def normal_molecule_count(vol_exc: float, rho: float, mol_weight: float) -> float:
    """
    Molecules inside the excitation volume of a bulk (normal Raman) sample.

    Density is converted from g/cm^3 to g/m^3 by dividing by 1e-6.
    """
    return vol_exc * (rho / CM3_TO_M3) * AVOGADRO / mol_weight


def sers_molecule_count(r: float, surf_area: float) -> float:
    """
    Molecules in a monolayer under the laser spot.

    surf_area is the footprint of one molecule in nm^2.
    """
    return np.pi * r**2 / (surf_area / NM2_PER_M2)
