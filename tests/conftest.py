import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
import pytest  # noqa: E402


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")


@pytest.fixture
def scenario_spectra():
    """Four-sample axis with a single SERS peak at 1200 cm^-1."""
    wave_number = np.array([1000.0, 1100.0, 1200.0, 1300.0])
    raman = np.array([1.0, 1.0, 1.0, 1.0])
    sers = np.array([1.0, 2.0, 10.0, 2.0])
    return wave_number, raman, sers


@pytest.fixture
def synthetic_spectra():
    """Lorentzian bands at 1000 and 1600 cm^-1 on a sloped baseline."""
    wave_number = np.arange(400.0, 1802.0, 2.0)

    def lorentz(center, width=6.0):
        return width**2 / ((wave_number - center) ** 2 + width**2)

    raman = 20.0 + 5.0 * lorentz(1000.0) + 8.0 * lorentz(1600.0)
    sers = 100.0 + 0.02 * (wave_number - 400.0)
    sers = sers + 2000.0 * lorentz(1000.0) + 3000.0 * lorentz(1600.0)
    return wave_number, raman, sers
