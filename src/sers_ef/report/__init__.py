"""
PDF report generation for enhancement factor results.
"""

from .pdf_builder import build_ef_report_pdf

__all__ = [
    "build_ef_report_pdf",
]
