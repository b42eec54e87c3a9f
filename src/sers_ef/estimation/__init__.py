"""
Enhancement factor estimation: optical geometry, molecule counts and EF.
"""

from .enhancement import EFParameters, EFResult, compute_ef
from .optics import (
    AIRY_ZERO_FACTOR,
    ExcitationVolume,
    depth_of_focus,
    excitation_volume,
    normal_molecule_count,
    sers_molecule_count,
    spot_radius,
)

__all__ = [
    "AIRY_ZERO_FACTOR",
    "EFParameters",
    "EFResult",
    "ExcitationVolume",
    "compute_ef",
    "depth_of_focus",
    "excitation_volume",
    "normal_molecule_count",
    "sers_molecule_count",
    "spot_radius",
]
