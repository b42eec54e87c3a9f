from pathlib import Path

import numpy as np
import pandas as pd
import pytest
from scipy.io import savemat

from sers_ef import InvalidInputError, compute_ef
from sers_ef.data import (
    SPECTRUM_COLS,
    get_spectrum_arrays,
    load_spectrum_pair,
    spectra_to_tidy,
)

EXAMPLE_FILE = Path(__file__).resolve().parents[1] / "example_data" / "sers_example.csv"


def test_load_csv_with_aliased_headers(tmp_path):
    path = tmp_path / "pair.csv"
    path.write_text(
        "Raman Shift (cm-1),Normal,SERS\n"
        "1300,1.0,2.0\n"
        "1200,1.5,10.0\n"
        "1100,1.0,2.0\n"
    )
    df = load_spectrum_pair(path)
    assert list(df.columns) == SPECTRUM_COLS
    wn, raman, sers = get_spectrum_arrays(df)
    np.testing.assert_array_equal(wn, [1300.0, 1200.0, 1100.0])
    np.testing.assert_array_equal(raman, [1.0, 1.5, 1.0])
    np.testing.assert_array_equal(sers, [2.0, 10.0, 2.0])


def test_load_tab_separated_text(tmp_path):
    path = tmp_path / "pair.txt"
    path.write_text(
        "waveNumber\tramanSpectrum\tSERSspectrum\n"
        "100\t1\t3\n"
        "200\t2\t4\n"
    )
    wn, raman, sers = get_spectrum_arrays(load_spectrum_pair(path))
    np.testing.assert_array_equal(wn, [100.0, 200.0])
    np.testing.assert_array_equal(sers, [3.0, 4.0])


def test_load_mat_file(tmp_path):
    path = tmp_path / "pair.mat"
    savemat(
        path,
        {
            "waveNumber": np.array([1000.0, 1100.0, 1200.0]),
            "ramanSpectrum": np.array([[1.0], [1.0], [1.0]]),
            "SERSspectrum": np.array([1.0, 8.0, 1.0]),
        },
    )
    wn, raman, sers = get_spectrum_arrays(load_spectrum_pair(path))
    np.testing.assert_array_equal(wn, [1000.0, 1100.0, 1200.0])
    np.testing.assert_array_equal(raman, [1.0, 1.0, 1.0])
    np.testing.assert_array_equal(sers, [1.0, 8.0, 1.0])


def test_mat_file_missing_variable(tmp_path):
    path = tmp_path / "pair.mat"
    savemat(path, {"waveNumber": np.arange(3.0), "ramanSpectrum": np.ones(3)})
    with pytest.raises(InvalidInputError, match="SERSspectrum"):
        load_spectrum_pair(path)


def test_mat_file_length_mismatch(tmp_path):
    path = tmp_path / "pair.mat"
    savemat(
        path,
        {
            "waveNumber": np.arange(3.0),
            "ramanSpectrum": np.ones(3),
            "SERSspectrum": np.ones(2),
        },
    )
    with pytest.raises(InvalidInputError, match="differ in length"):
        load_spectrum_pair(path)


def test_load_excel(tmp_path):
    path = tmp_path / "pair.xlsx"
    pd.DataFrame(
        {
            "wave_number": [400.0, 402.0, 404.0],
            "raman_intensity": [1.0, 2.0, 1.0],
            "sers_intensity": [5.0, 50.0, 5.0],
        }
    ).to_excel(path, index=False)
    wn, _, sers = get_spectrum_arrays(load_spectrum_pair(path))
    np.testing.assert_array_equal(wn, [400.0, 402.0, 404.0])
    np.testing.assert_array_equal(sers, [5.0, 50.0, 5.0])


def test_missing_column(tmp_path):
    path = tmp_path / "pair.csv"
    path.write_text("wave_number,raman_intensity\n1,2\n3,4\n")
    with pytest.raises(InvalidInputError, match="sers_intensity"):
        load_spectrum_pair(path)


def test_non_numeric_rows_are_skipped(tmp_path, caplog):
    path = tmp_path / "pair.csv"
    path.write_text(
        "wave_number,raman_intensity,sers_intensity\n"
        "100,1,2\n"
        "n/a,1,2\n"
        "300,1,4\n"
    )
    df = load_spectrum_pair(path)
    assert df["wave_number"].tolist() == [100.0, 300.0]
    assert "Skipping 1 non-numeric rows" in caplog.text


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_spectrum_pair(tmp_path / "absent.csv")


def test_unsupported_suffix(tmp_path):
    path = tmp_path / "pair.json"
    path.write_text("{}")
    with pytest.raises(InvalidInputError, match="Unsupported"):
        load_spectrum_pair(path)


def test_get_spectrum_arrays_requires_columns():
    with pytest.raises(InvalidInputError):
        get_spectrum_arrays(pd.DataFrame({"wave_number": [1.0]}))


def test_spectra_to_tidy():
    df = pd.DataFrame(
        {
            "wave_number": [1.0, 2.0],
            "raman_intensity": [3.0, 4.0],
            "sers_intensity": [5.0, 6.0],
        }
    )
    tidy = spectra_to_tidy(df)
    assert len(tidy) == 4
    assert tidy.loc[tidy["spectrum"] == "SERS", "intensity"].tolist() == [5.0, 6.0]


def test_example_dataset_estimation():
    wn, raman, sers = get_spectrum_arrays(load_spectrum_pair(EXAMPLE_FILE))
    assert wn.size == 701
    ef, result = compute_ef(
        wn,
        raman,
        sers,
        band=1107,
        wavelength=570,
        mol_weight=550,
        na=0.25,
        rho=1.26,
        surf_area=8,
        show_plot=False,
    )
    assert result.band_mode == "peak"
    assert abs(result.closest_band - 1107.0) <= 2.0
    assert ef > 0
