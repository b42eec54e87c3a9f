"""
Shared constants for SERS enhancement factor estimation.
"""

# Default parameters (see estimation.enhancement.compute_ef)
DEFAULT_WAVELENGTH_NM = 785.0
DEFAULT_NA = 0.25
DEFAULT_RHO = 1.26  # g/cm^3
DEFAULT_MOL_WEIGHT = 479.02  # g/mol
DEFAULT_SURF_AREA = 4.0  # nm^2
DEFAULT_SHOW_PLOT = True

# Peaks below this fraction of the SERS maximum are ignored
PEAK_PROMINENCE_FACTOR = 0.10

AVOGADRO = 6.022140857e23  # mol^-1

# Unit conversions
NM_TO_M = 1e-9
CM3_TO_M3 = 1e-6
NM2_PER_M2 = 1e18

ZERO_DIVISION_MODES = ("raise", "propagate")
