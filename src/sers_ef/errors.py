"""
Exceptions raised by the enhancement factor estimator.
"""


class InvalidInputError(ValueError):
    """Spectra or physical parameters fail validation."""


class EFDivisionByZeroError(ZeroDivisionError):
    """The EF denominator (normal intensity or SERS molecule count) is zero."""
