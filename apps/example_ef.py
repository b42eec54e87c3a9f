"""
Example: estimate the SERS enhancement factor of the bundled sample dataset.

Run from the repository root:

    python apps/example_ef.py
"""

import logging
from pathlib import Path

import matplotlib.pyplot as plt

from sers_ef import (
    build_ef_report_pdf,
    compute_ef,
    get_spectrum_arrays,
    load_spectrum_pair,
)
from sers_ef.utils import format_field_label

DATA_FILE = Path(__file__).resolve().parents[1] / "example_data" / "sers_example.csv"
REPORT_FILE = Path("sers_ef_report.pdf")


def main() -> None:
    logging.basicConfig(
        level=logging.INFO, format="%(levelname)s %(name)s: %(message)s"
    )

    pair = load_spectrum_pair(DATA_FILE)
    wave_number, raman_spectrum, sers_spectrum = get_spectrum_arrays(pair)

    ef, result = compute_ef(
        wave_number,
        raman_spectrum,
        sers_spectrum,
        band=1107,
        wavelength=570,
        mol_weight=550,
        na=0.25,
        rho=1.26,
        surf_area=8,
        show_plot=True,
    )

    for field, value in result.summary().items():
        print(f"{format_field_label(field):>32}: {value}")
    print(f"\nE.F. = {ef:.5G}")

    build_ef_report_pdf(result, figure=plt.gcf(), output_path=REPORT_FILE)
    print(f"Report saved as: {REPORT_FILE}")
    plt.show()


if __name__ == "__main__":
    main()
