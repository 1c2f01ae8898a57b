"""Predefined Earth gravity fields.

Lookup table for the coefficient sets of the WGS-72 and WGS-84 geodetic
systems, as tabulated by Vallado et al. (2006) for use with SGP4.

References:
    1. D. Vallado, P. Crawford, R. Hujsak, and T.S. Kelso, *Revisiting
       Spacetrack Report #3*, AIAA/AAS Astrodynamics Specialist
       Conference, 2006, Tables 2 and 3.
"""

from __future__ import annotations

from gravjax.constants import (
    WGS72_GM,
    WGS72_J2,
    WGS72_J3,
    WGS72_J4,
    WGS72_R,
    WGS84_GM,
    WGS84_J2,
    WGS84_J3,
    WGS84_J4,
    WGS84_R,
)
from gravjax.gravity_field._types import (
    GravityFieldPreset,
    PredefinedGravityField,
    UnknownPresetError,
)

_PRESETS = {
    PredefinedGravityField.WGS72: GravityFieldPreset(
        gm=WGS72_GM,
        radius=WGS72_R,
        j2=WGS72_J2,
        j3=WGS72_J3,
        j4=WGS72_J4,
        reference="Vallado et al. (2006), Table 2",
    ),
    PredefinedGravityField.WGS84: GravityFieldPreset(
        gm=WGS84_GM,
        radius=WGS84_R,
        j2=WGS84_J2,
        j3=WGS84_J3,
        j4=WGS84_J4,
        reference="Vallado et al. (2006), Table 3",
    ),
}


def available_presets() -> list[PredefinedGravityField]:
    """Return the predefined gravity fields, in table order."""
    return list(_PRESETS.keys())


def get_preset(preset: PredefinedGravityField | str) -> GravityFieldPreset:
    """Look up the constants of a predefined gravity field.

    Args:
        preset: Preset member, or its name (see
            :meth:`PredefinedGravityField.from_name`).

    Returns:
        GravityFieldPreset: Gravitational parameter, reference radius and
            zonal coefficients of the preset.

    Raises:
        UnknownPresetError: If *preset* does not name a predefined field.

    Examples:
        ```python
        from gravjax.gravity_field import PredefinedGravityField, get_preset
        get_preset(PredefinedGravityField.WGS84).radius
        ```
    """
    if isinstance(preset, str):
        preset = PredefinedGravityField.from_name(preset)
    if preset not in _PRESETS:
        raise UnknownPresetError(
            f"Unknown predefined gravity field: {preset!r}. "
            f"Available: {[p.value for p in _PRESETS]}"
        )
    return _PRESETS[preset]
