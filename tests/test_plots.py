import matplotlib.pyplot as plt
import numpy as np
import pytest

from sers_ef import compute_ef
from sers_ef.visualization import (
    format_annotation,
    plot_enhancement_factor,
    result_to_tidy,
)


@pytest.fixture
def result(synthetic_spectra):
    wn, raman, sers = synthetic_spectra
    return compute_ef(wn, raman, sers, band=1000, show_plot=False)[1]


def test_result_to_tidy(result):
    tidy = result_to_tidy(result)
    n = result.wave_number.size
    assert len(tidy) == 2 * n
    assert list(tidy["spectrum"].unique()) == ["Normal", "SERS"]
    np.testing.assert_array_equal(tidy["intensity"].to_numpy()[n:], result.sers_spectrum)


def test_format_annotation(result):
    text = format_annotation(result)
    assert text.startswith("k = 1000.0 cm⁻¹\n")
    assert f"E.F. = {result.ef:0.5G}" in text


def test_plot_enhancement_factor(result):
    fig = plot_enhancement_factor(result, title="EF")
    ax = fig.axes[0]
    legend_labels = [t.get_text() for t in ax.get_legend().get_texts()]
    assert legend_labels == ["Normal", "SERS"]
    assert any("E.F. =" in t.get_text() for t in ax.texts)
    assert ax.get_xlabel() == "Raman Shift (cm⁻¹)"
    assert ax.get_title() == "EF"


def test_plot_marks_located_band(result):
    fig = plot_enhancement_factor(result)
    marker = fig.axes[0].lines[-1]
    assert marker.get_xdata()[0] == result.closest_band
    assert marker.get_ydata()[0] == result.i_sers


def test_plot_show_peaks_adds_marker_line(result):
    n_plain = len(plot_enhancement_factor(result).axes[0].lines)
    n_peaks = len(plot_enhancement_factor(result, show_peaks=True).axes[0].lines)
    assert n_peaks == n_plain + 1


def test_plot_on_given_axes(result):
    fig, ax = plt.subplots()
    assert plot_enhancement_factor(result, ax=ax) is fig


def test_plot_keeps_sample_order():
    wn = np.array([1300.0, 1200.0, 1100.0, 1000.0])
    _, result = compute_ef(
        wn, np.ones(4), np.array([2.0, 10.0, 2.0, 1.0]), show_plot=False
    )
    fig = plot_enhancement_factor(result)
    np.testing.assert_array_equal(fig.axes[0].lines[0].get_xdata(), wn)


def test_compute_ef_draws_on_given_axes(scenario_spectra):
    wn, raman, sers = scenario_spectra
    fig, ax = plt.subplots()
    compute_ef(wn, raman, sers, band=1200, show_plot=True, ax=ax)
    assert ax.get_legend() is not None
    assert any("E.F. =" in t.get_text() for t in ax.texts)
