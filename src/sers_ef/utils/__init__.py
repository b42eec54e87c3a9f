"""
Utility functions for SERS enhancement factor reporting.
"""

from .labels import format_field_label

__all__ = [
    "format_field_label",
]
