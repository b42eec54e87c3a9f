"""String formatting utilities for result fields and display labels."""

# Acronyms to display in all caps when they appear as whole words.
_LABEL_ACRONYMS = ("na", "ef", "sers")

# Physical units appended to known result fields.
FIELD_UNITS = {
    "band": "cm-1",
    "closest_band": "cm-1",
    "wavelength": "nm",
    "rho": "g/cm³",
    "mol_weight": "g/mol",
    "surf_area": "nm²",
    "i_normal": "a.u.",
    "i_sers": "a.u.",
    "r": "m",
    "h": "m",
    "vol_exc": "m³",
}

# Field names that read badly when title-cased.
_FIELD_OVERRIDES = {
    "r": "Laser Spot Radius",
    "h": "Depth Of Focus",
    "vol_exc": "Excitation Volume",
    "rho": "Density",
    "i_normal": "Normal Intensity",
    "i_sers": "SERS Intensity",
    "n_normal": "Normal Molecules",
    "n_sers": "SERS Molecules",
}


def format_field_label(field: str, *, with_units: bool = True) -> str:
    """
    Convert a result field name to a human-readable display label.

    Example: "mol_weight" -> "Mol Weight (g/mol)".
    Example: "na" -> "NA" (acronyms kept in caps).

    Args:
        field: Snake_case field name (e.g. from EFResult.summary()).
        with_units: Append the physical unit in parentheses when known.

    Returns:
        Title-style label with underscores replaced by spaces.
    """
    label = _FIELD_OVERRIDES.get(field)
    if label is None:
        words = field.split("_")
        label = " ".join(
            w.upper() if w.lower() in _LABEL_ACRONYMS else w.title() for w in words
        )
    unit = FIELD_UNITS.get(field)
    if with_units and unit:
        label = f"{label} ({unit})"
    return label
