"""Gravity field models of a central body.

Provides the potential, its gradient and its gradient tensor:

- **Point mass**: JAX-traceable point-mass kernels
- **Zonal**: J2..J4 zonal harmonic extension of the point-mass potential
- **Presets**: WGS-72 and WGS-84 Earth gravity constants
- **Model**: Immutable, validated :class:`GravityFieldModel`
"""

from ._types import (
    DegenerateGeometryError,
    GravityFieldError,
    GravityFieldPreset,
    PredefinedGravityField,
    UnconfiguredGravityFieldError,
    UnknownPresetError,
)
from .model import GravityFieldModel
from .point_mass import (
    gradient_point_mass,
    gradient_tensor_point_mass,
    potential_point_mass,
    relative_position,
)
from .presets import available_presets, get_preset
from .zonal import gradient_tensor_zonal, gradient_zonal, potential_zonal

__all__ = [
    # Types
    "PredefinedGravityField",
    "GravityFieldPreset",
    # Errors
    "GravityFieldError",
    "UnknownPresetError",
    "UnconfiguredGravityFieldError",
    "DegenerateGeometryError",
    # Point mass
    "relative_position",
    "potential_point_mass",
    "gradient_point_mass",
    "gradient_tensor_point_mass",
    # Zonal
    "potential_zonal",
    "gradient_zonal",
    "gradient_tensor_zonal",
    # Presets
    "available_presets",
    "get_preset",
    # Model
    "GravityFieldModel",
]
