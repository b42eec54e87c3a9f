"""
PDF report generation for enhancement factor results.

Uses ReportLab to compile the input parameters, the derived optical
quantities and the diagnostic plot of one EF estimation into a PDF.
"""

import io
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

import pandas as pd
from reportlab.lib import colors
from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import (
    Image,
    Paragraph,
    SimpleDocTemplate,
    Spacer,
    Table,
    TableStyle,
)

from sers_ef.estimation.enhancement import EFResult
from sers_ef.utils.labels import format_field_label

PARAMETER_FIELDS = [
    "band",
    "wavelength",
    "na",
    "rho",
    "mol_weight",
    "surf_area",
]
DERIVED_FIELDS = [
    "closest_band",
    "closest_index",
    "band_mode",
    "i_normal",
    "i_sers",
    "r",
    "h",
    "vol_exc",
    "n_normal",
    "n_sers",
    "ef",
]


def _fields_to_frame(result: EFResult, fields: list[str]) -> pd.DataFrame:
    """Two-column (Quantity, Value) frame for the given result fields."""
    summary = result.summary()
    return pd.DataFrame(
        {
            "Quantity": [format_field_label(f) for f in fields],
            "Value": pd.Series([summary[f] for f in fields], dtype=object),
        }
    )


def _df_to_table_data(
    df: pd.DataFrame,
    *,
    float_fmt: str = "{:.6g}",
) -> list[list[str]]:
    """Convert DataFrame to list of lists for ReportLab Table."""

    def _fmt(x: Any) -> str:
        if x is None:
            return "—"
        if isinstance(x, float):
            return float_fmt.format(x)
        return str(x)

    headers = [str(c) for c in df.columns]
    rows = [[_fmt(v) for v in row] for row in df.itertuples(index=False)]
    return [headers] + rows


def _styled_table(table_data: list[list[str]], header_color: str) -> Table:
    usable_width = 6.5 * inch
    t = Table(table_data, colWidths=[usable_width * 0.6, usable_width * 0.4])
    t.setStyle(
        TableStyle(
            [
                ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor(header_color)),
                ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
                ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                ("FONTSIZE", (0, 0), (-1, 0), 9),
                ("BOTTOMPADDING", (0, 0), (-1, 0), 8),
                ("FONTSIZE", (0, 1), (-1, -1), 8),
                ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
                (
                    "ROWBACKGROUNDS",
                    (0, 1),
                    (-1, -1),
                    [colors.white, colors.HexColor("#f5f5f5")],
                ),
            ]
        )
    )
    return t


def _figure_to_image_bytes(fig, *, dpi: int = 150) -> bytes:
    """Serialize matplotlib Figure to PNG bytes."""
    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=dpi, bbox_inches="tight")
    buf.seek(0)
    return buf.getvalue()


def build_ef_report_pdf(
    result: EFResult,
    *,
    figure: Optional[Any] = None,
    report_title: str = "SERS Enhancement Factor Report",
    output_path: Optional[str | Path] = None,
) -> bytes:
    """
    Compile one EF estimation into a PDF report.

    Args:
        result: EFResult from compute_ef.
        figure: Optional matplotlib Figure (e.g. plot_enhancement_factor).
        report_title: Title on first page.
        output_path: If provided, also save PDF to this path.

    Returns:
        PDF file contents as bytes.
    """
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=letter,
        rightMargin=0.75 * inch,
        leftMargin=0.75 * inch,
        topMargin=0.75 * inch,
        bottomMargin=0.75 * inch,
    )
    styles = getSampleStyleSheet()
    title_style = ParagraphStyle(
        "ReportTitle",
        parent=styles["Heading1"],
        fontSize=18,
        spaceAfter=12,
    )
    heading_style = ParagraphStyle(
        "SectionHeading",
        parent=styles["Heading2"],
        fontSize=14,
        spaceBefore=18,
        spaceAfter=8,
    )
    body_style = styles["Normal"]

    flow: list = []

    flow.append(Paragraph(report_title, title_style))
    flow.append(
        Paragraph(
            f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M')}",
            body_style,
        )
    )
    flow.append(
        Paragraph(
            f"<b>E.F. = {result.ef:.5G}</b> at {result.closest_band:.1f} "
            "cm<super>-1</super> "
            f"({result.wave_number.size} spectral samples).",
            body_style,
        )
    )
    flow.append(Spacer(1, 0.25 * inch))

    # 1. Input parameters
    flow.append(Paragraph("1. Parameters", heading_style))
    flow.append(
        Paragraph(
            "Requested band (— when the SERS maximum was used) and the "
            "physical constants of the estimation.",
            body_style,
        )
    )
    flow.append(Spacer(1, 0.1 * inch))
    params_df = _fields_to_frame(result, PARAMETER_FIELDS)
    flow.append(_styled_table(_df_to_table_data(params_df), "#4472C4"))
    flow.append(Spacer(1, 0.3 * inch))

    # 2. Derived quantities
    flow.append(Paragraph("2. Derived Quantities", heading_style))
    flow.append(
        Paragraph(
            "Located band, intensities at that band, cylindrical excitation "
            "volume and molecule counts. "
            "E.F. = (I<sub>SERS</sub> N<sub>normal</sub>) / "
            "(I<sub>normal</sub> N<sub>SERS</sub>).",
            body_style,
        )
    )
    flow.append(Spacer(1, 0.1 * inch))
    derived_df = _fields_to_frame(result, DERIVED_FIELDS)
    flow.append(_styled_table(_df_to_table_data(derived_df), "#70AD47"))
    flow.append(Spacer(1, 0.3 * inch))

    if figure is not None:
        flow.append(Paragraph("3. Spectra", heading_style))
        img_bytes = _figure_to_image_bytes(figure)
        img = Image(io.BytesIO(img_bytes), width=5.5 * inch, height=3.5 * inch)
        flow.append(img)

    doc.build(flow)
    pdf_bytes = buffer.getvalue()

    if output_path is not None:
        Path(output_path).write_bytes(pdf_bytes)

    return pdf_bytes
