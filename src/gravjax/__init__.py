"""
gravjax is a small gravity field library for orbit and attitude dynamics, implemented in JAX.
"""

from .constants import (
    GM_EARTH,
    R_EARTH,
    WGS72_GM,
    WGS72_R,
    WGS72_J2,
    WGS72_J3,
    WGS72_J4,
    WGS84_GM,
    WGS84_R,
    WGS84_J2,
    WGS84_J3,
    WGS84_J4,
)

from .config import set_dtype, get_dtype

from .gravity_field import (
    PredefinedGravityField,
    GravityFieldPreset,
    GravityFieldError,
    UnknownPresetError,
    UnconfiguredGravityFieldError,
    DegenerateGeometryError,
    GravityFieldModel,
    available_presets,
    get_preset,
    potential_point_mass,
    gradient_point_mass,
    gradient_tensor_point_mass,
    potential_zonal,
    gradient_zonal,
    gradient_tensor_zonal,
)

from .gravity_gradient import torque_gravity_gradient

__all__ = [
    # Constants
    "GM_EARTH",
    "R_EARTH",
    "WGS72_GM",
    "WGS72_R",
    "WGS72_J2",
    "WGS72_J3",
    "WGS72_J4",
    "WGS84_GM",
    "WGS84_R",
    "WGS84_J2",
    "WGS84_J3",
    "WGS84_J4",
    # Config
    "set_dtype",
    "get_dtype",
    # Gravity field
    "PredefinedGravityField",
    "GravityFieldPreset",
    "GravityFieldError",
    "UnknownPresetError",
    "UnconfiguredGravityFieldError",
    "DegenerateGeometryError",
    "GravityFieldModel",
    "available_presets",
    "get_preset",
    "potential_point_mass",
    "gradient_point_mass",
    "gradient_tensor_point_mass",
    "potential_zonal",
    "gradient_zonal",
    "gradient_tensor_zonal",
    # Attitude
    "torque_gravity_gradient",
]
