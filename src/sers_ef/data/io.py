"""
Spectrum pair I/O for enhancement factor estimation.

A spectrum pair is one Raman shift axis with a normal Raman spectrum and a
SERS spectrum aligned to it. Files are read into a DataFrame with columns
wave_number, raman_intensity, sers_intensity, in file row order. Supported
inputs: MATLAB .mat files (waveNumber, ramanSpectrum, SERSspectrum variables),
delimited text (.csv, .txt) and Excel (.xlsx, .xls).
"""

import logging
import re
from pathlib import Path
from typing import Union

import numpy as np
import pandas as pd
from scipy.io import loadmat

from sers_ef.errors import InvalidInputError
from sers_ef.processing.validation import normalize_spectra

logger = logging.getLogger(__name__)

WAVE_NUMBER_COL = "wave_number"
RAMAN_COL = "raman_intensity"
SERS_COL = "sers_intensity"
SPECTRUM_COLS = [WAVE_NUMBER_COL, RAMAN_COL, SERS_COL]

MAT_VARIABLES = {
    WAVE_NUMBER_COL: "waveNumber",
    RAMAN_COL: "ramanSpectrum",
    SERS_COL: "SERSspectrum",
}

# Accepted header spellings, compared after lowercasing and dropping
# everything except letters and digits.
_COLUMN_ALIASES = {
    WAVE_NUMBER_COL: {
        "wavenumber",
        "wavenumbercm1",
        "ramanshift",
        "ramanshiftcm1",
        "shift",
    },
    RAMAN_COL: {"ramanintensity", "ramanspectrum", "normal", "normalraman", "raman"},
    SERS_COL: {"sersintensity", "sersspectrum", "sers"},
}

TEXT_SUFFIXES = (".csv", ".txt")
EXCEL_SUFFIXES = (".xlsx", ".xls")
MAT_SUFFIXES = (".mat",)


def _normalize_header(name: object) -> str:
    return re.sub(r"[^a-z0-9]", "", str(name).lower())


def _rename_spectrum_columns(df: pd.DataFrame, source: str) -> pd.DataFrame:
    """Map aliased headers onto SPECTRUM_COLS; raise if any is missing."""
    rename: dict = {}
    for col in df.columns:
        key = _normalize_header(col)
        for target, aliases in _COLUMN_ALIASES.items():
            if key in aliases and target not in rename.values():
                rename[col] = target
                break
    out = df.rename(columns=rename)
    missing = [c for c in SPECTRUM_COLS if c not in out.columns]
    if missing:
        raise InvalidInputError(
            f"Columns {missing} not found in {source}. "
            f"Available: {list(df.columns)}"
        )
    return out[SPECTRUM_COLS]


def _read_mat(path: Path) -> pd.DataFrame:
    contents = loadmat(path)
    missing = [v for v in MAT_VARIABLES.values() if v not in contents]
    if missing:
        raise InvalidInputError(f"Variables {missing} not found in {path.name}")
    columns = {col: np.ravel(contents[var]) for col, var in MAT_VARIABLES.items()}
    lengths = {col: arr.size for col, arr in columns.items()}
    if len(set(lengths.values())) != 1:
        raise InvalidInputError(
            f"Spectrum variables in {path.name} differ in length: {lengths}"
        )
    return pd.DataFrame(columns)


def _read_table(path: Path) -> pd.DataFrame:
    if path.suffix.lower() in EXCEL_SUFFIXES:
        raw = pd.read_excel(path)
    else:
        raw = pd.read_csv(path, sep=None, engine="python")
    df = _rename_spectrum_columns(raw, path.name)
    df = df.apply(pd.to_numeric, errors="coerce")
    n_bad = int(df.isna().any(axis=1).sum())
    if n_bad:
        logger.warning("Skipping %d non-numeric rows in %s", n_bad, path.name)
        df = df.dropna(how="any")
    return df.reset_index(drop=True)


def load_spectrum_pair(file_path: Union[str, Path]) -> pd.DataFrame:
    """
    Load a spectrum pair from a .mat, .csv/.txt or .xlsx/.xls file.

    Args:
        file_path: Path to the spectrum file.

    Returns:
        DataFrame with wave_number, raman_intensity, sers_intensity columns,
        rows in file order.

    Raises:
        FileNotFoundError: If the file does not exist.
        InvalidInputError: Unsupported suffix, missing columns/variables, or
            invalid spectra.

    Example:
        >>> pair = load_spectrum_pair("example_data/sers_example.csv")
        >>> wn, raman, sers = get_spectrum_arrays(pair)
    """
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    suffix = path.suffix.lower()
    if suffix in MAT_SUFFIXES:
        df = _read_mat(path)
    elif suffix in TEXT_SUFFIXES + EXCEL_SUFFIXES:
        df = _read_table(path)
    else:
        raise InvalidInputError(
            f"Unsupported spectrum file type '{path.suffix}' for {path.name}"
        )

    # Validates lengths and finiteness
    normalize_spectra(df[WAVE_NUMBER_COL], df[RAMAN_COL], df[SERS_COL])
    return df.astype(float)


def get_spectrum_arrays(
    df: pd.DataFrame,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Return (wave_number, raman_spectrum, sers_spectrum) arrays in row order."""
    missing = [c for c in SPECTRUM_COLS if c not in df.columns]
    if missing:
        raise InvalidInputError(
            f"DataFrame must contain columns {SPECTRUM_COLS}. Missing: {missing}"
        )
    return tuple(df[c].to_numpy(dtype=float) for c in SPECTRUM_COLS)


def spectra_to_tidy(df: pd.DataFrame) -> pd.DataFrame:
    """
    Convert a spectrum pair to long format (wave_number, spectrum, intensity).
    """
    tidy = df.reset_index(drop=True).melt(
        id_vars=[WAVE_NUMBER_COL],
        value_vars=[RAMAN_COL, SERS_COL],
        var_name="spectrum",
        value_name="intensity",
    )
    tidy["spectrum"] = tidy["spectrum"].map({RAMAN_COL: "Normal", SERS_COL: "SERS"})
    return tidy
