"""
Diagnostic plotting for enhancement factor estimation.

plot_enhancement_factor: normal and SERS spectra on a shared axis, with the
located band marked and annotated with its position and the EF.
"""

from typing import Optional

import matplotlib.pyplot as plt
from matplotlib.lines import Line2D
import numpy as np
import pandas as pd
import seaborn as sns

from sers_ef.estimation.enhancement import EFResult

RAMAN_SHIFT_COL = "raman_shift"
INTENSITY_COL = "intensity"
SPECTRUM_COL = "spectrum"
NORMAL_LABEL = "Normal"
SERS_LABEL = "SERS"
SPECTRUM_PALETTE = {NORMAL_LABEL: "black", SERS_LABEL: "red"}
BAND_MARKER_COLOR = "blue"
PEAK_MARKER_COLOR = "tab:orange"


def result_to_tidy(result: EFResult) -> pd.DataFrame:
    """Long-format (raman_shift, intensity, spectrum) frame in sample order."""
    n = result.wave_number.size
    return pd.DataFrame(
        {
            RAMAN_SHIFT_COL: np.concatenate([result.wave_number, result.wave_number]),
            INTENSITY_COL: np.concatenate(
                [result.raman_spectrum, result.sers_spectrum]
            ),
            SPECTRUM_COL: [NORMAL_LABEL] * n + [SERS_LABEL] * n,
        }
    )


def format_annotation(result: EFResult) -> str:
    """Band position and EF as shown next to the band marker."""
    return f"k = {result.closest_band:0.1f} cm⁻¹\nE.F. = {result.ef:0.5G}"


def plot_enhancement_factor(
    result: EFResult,
    *,
    show_peaks: bool = False,
    title: Optional[str] = None,
    figsize: Optional[tuple[float, float]] = None,
    ax: Optional[plt.Axes] = None,
) -> plt.Figure:
    """
    Plot normal and SERS spectra with the located band and EF annotation.

    Spectra are drawn in the sample order of the result (never resorted).

    Args:
        result: EFResult from compute_ef.
        show_peaks: If True, also mark the detected SERS peaks (peak mode only).
        title: Optional plot title.
        figsize: Optional (width, height) in inches.
        ax: Optional axes to draw on.

    Returns:
        matplotlib.figure.Figure.
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.get_figure()
    fig.patch.set_facecolor("white")

    sns.lineplot(
        data=result_to_tidy(result),
        x=RAMAN_SHIFT_COL,
        y=INTENSITY_COL,
        hue=SPECTRUM_COL,
        hue_order=[NORMAL_LABEL, SERS_LABEL],
        palette=SPECTRUM_PALETTE,
        estimator=None,
        sort=False,
        legend=False,
        ax=ax,
    )

    if show_peaks and result.peak_indices:
        idx = np.asarray(result.peak_indices, dtype=int)
        ax.plot(
            result.wave_number[idx],
            result.sers_spectrum[idx],
            linestyle="none",
            marker="o",
            markerfacecolor="none",
            color=PEAK_MARKER_COLOR,
            label="_nolegend_",
        )

    ax.plot(
        [result.closest_band],
        [result.i_sers],
        linestyle="none",
        marker="o",
        markerfacecolor="none",
        color=BAND_MARKER_COLOR,
        label="_nolegend_",
    )
    ax.text(1.025 * result.closest_band, result.i_sers, format_annotation(result))

    _apply_aesthetics(ax, title=title)
    return fig


def _apply_aesthetics(ax: plt.Axes, *, title: Optional[str] = None) -> None:
    """Apply labels, legend placement, and clean scientific style."""
    if title is not None:
        ax.set_title(title, pad=12, fontsize=12, fontweight="bold")
    ax.set_xlabel("Raman Shift (cm⁻¹)")
    ax.set_ylabel("Raman Intensity (a.u.)")
    handles = [
        Line2D([], [], color=color, label=label)
        for label, color in SPECTRUM_PALETTE.items()
    ]
    ax.legend(handles=handles, loc="upper left")
    sns.despine(ax=ax)
    ax.grid(True, alpha=0.3, linestyle="--")
