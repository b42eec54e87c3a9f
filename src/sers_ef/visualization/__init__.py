"""
Diagnostic plotting for enhancement factor results.
"""

from .plots import format_annotation, plot_enhancement_factor, result_to_tidy

__all__ = [
    "format_annotation",
    "plot_enhancement_factor",
    "result_to_tidy",
]
