"""Type definitions for the gravity field package.

Provides the identifiers, records and exceptions shared by the
gravity field modules:

- :class:`PredefinedGravityField`: Closed set of named coefficient presets.
- :class:`GravityFieldPreset`: Immutable record of one preset's constants.
- :class:`GravityFieldError` and its subclasses: Errors raised by
  :class:`~gravjax.gravity_field.model.GravityFieldModel`.
"""

from __future__ import annotations

import enum
from typing import NamedTuple


class PredefinedGravityField(enum.Enum):
    """Bodies with a predefined gravity field.

    The value is the canonical string name accepted wherever a preset can
    be given as text.

    Attributes:
        WGS72: Earth, World Geodetic System 1972.
        WGS84: Earth, World Geodetic System 1984.
    """

    WGS72 = "WGS72"
    WGS84 = "WGS84"

    @classmethod
    def from_name(cls, name: str) -> PredefinedGravityField:
        """Resolve a preset from its name.

        Matching ignores case as well as ``-`` and ``_`` separators, so
        ``"WGS-84"``, ``"wgs_84"`` and ``"WGS84"`` are equivalent.

        Args:
            name: Preset name.

        Returns:
            PredefinedGravityField: Matching preset.

        Raises:
            UnknownPresetError: If no preset has this name.
        """
        key = str(name).upper().replace("-", "").replace("_", "")
        for member in cls:
            if member.value == key:
                return member
        raise UnknownPresetError(
            f"Unknown predefined gravity field: {name!r}. "
            f"Available: {[m.value for m in cls]}"
        )


class GravityFieldPreset(NamedTuple):
    """Constants defining one predefined gravity field.

    Attributes:
        gm: Gravitational parameter [m^3/s^2].
        radius: Reference radius [m].
        j2: Zonal coefficient of degree 2 [dimensionless].
        j3: Zonal coefficient of degree 3 [dimensionless].
        j4: Zonal coefficient of degree 4 [dimensionless].
        reference: Source of the values.
    """

    gm: float
    radius: float
    j2: float
    j3: float
    j4: float
    reference: str = ""


class GravityFieldError(ValueError):
    """Base class for gravity field configuration and evaluation errors."""


class UnknownPresetError(GravityFieldError):
    """Requested predefined gravity field does not exist."""


class UnconfiguredGravityFieldError(GravityFieldError):
    """Model evaluated before a usable gravitational parameter was set."""


class DegenerateGeometryError(GravityFieldError):
    """Query position coincides with the origin of the gravity field."""
