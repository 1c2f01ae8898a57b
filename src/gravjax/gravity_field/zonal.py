"""Zonal harmonic gravity field through degree 4.

Extends the point-mass potential with the axisymmetric J2, J3 and J4
terms of a spherical harmonic expansion.  The body's symmetry axis is
taken to be the z-axis of the frame the positions are expressed in.

.. math::

    U = \\frac{\\mu}{r} \\left( 1 - \\sum_{n=2}^{4} J_n
        \\left(\\frac{R}{r}\\right)^n P_n(\\sin\\phi) \\right),
    \\quad \\sin\\phi = z / r

This is separate from the point-mass kernels in
:mod:`gravjax.gravity_field.point_mass`; nothing in the point-mass path
reads zonal coefficients.  The gradient and gradient tensor are the exact
first and second derivatives of the potential obtained with
``jax.grad`` and ``jax.hessian``.

References:
    1. O. Montenbruck and E. Gill, *Satellite Orbits: Models, Methods
       and Applications*, 2012, p. 56-59.
    2. D. Vallado, *Fundamentals of Astrodynamics and Applications
       (4th Ed.)*, 2013, p. 550-552.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from gravjax.gravity_field.point_mass import relative_position


def _legendre_p2_p4(s: Array) -> tuple[Array, Array, Array]:
    """Legendre polynomials P2, P3, P4 evaluated at *s*."""
    s2 = s * s
    p2 = 0.5 * (3.0 * s2 - 1.0)
    p3 = 0.5 * (5.0 * s2 * s - 3.0 * s)
    p4 = 0.125 * (35.0 * s2 * s2 - 30.0 * s2 + 3.0)
    return p2, p3, p4


def _zonal_potential_relative(
    d: Array,
    gm: float,
    radius: float,
    j2: float,
    j3: float,
    j4: float,
) -> Array:
    r = jnp.linalg.norm(d)
    s = d[2] / r
    q = radius / r
    q2 = q * q

    p2, p3, p4 = _legendre_p2_p4(s)
    perturbation = j2 * q2 * p2 + j3 * q2 * q * p3 + j4 * q2 * q2 * p4

    return gm / r * (1.0 - perturbation)


def potential_zonal(
    r_object: ArrayLike,
    r_origin: ArrayLike,
    gm: float,
    radius: float,
    j2: float,
    j3: float = 0.0,
    j4: float = 0.0,
) -> Array:
    """Gravitational potential including J2, J3 and J4 zonal terms.

    Args:
        r_object: Query position [m].  Shape ``(3,)`` or ``(6,)`` (only
            first 3 elements used).
        r_origin: Origin of the gravity field [m].  Shape ``(3,)``.
        gm: Gravitational parameter [m^3/s^2].
        radius: Reference radius of the coefficients [m].
        j2: Zonal coefficient of degree 2.
        j3: Zonal coefficient of degree 3.
        j4: Zonal coefficient of degree 4.

    Returns:
        Potential [m^2/s^2], scalar array.

    Examples:
        ```python
        import jax.numpy as jnp
        from gravjax.constants import WGS84_GM, WGS84_J2, WGS84_R
        from gravjax.gravity_field import potential_zonal
        r = jnp.array([7000e3, 0.0, 1000e3])
        U = potential_zonal(r, jnp.zeros(3), WGS84_GM, WGS84_R, WGS84_J2)
        ```
    """
    d = relative_position(r_object, r_origin)
    return _zonal_potential_relative(d, gm, radius, j2, j3, j4)


def gradient_zonal(
    r_object: ArrayLike,
    r_origin: ArrayLike,
    gm: float,
    radius: float,
    j2: float,
    j3: float = 0.0,
    j4: float = 0.0,
) -> Array:
    """Gradient of the zonal potential (gravitational acceleration).

    Args:
        r_object: Query position [m].  Shape ``(3,)`` or ``(6,)``.
        r_origin: Origin of the gravity field [m].  Shape ``(3,)``.
        gm: Gravitational parameter [m^3/s^2].
        radius: Reference radius of the coefficients [m].
        j2: Zonal coefficient of degree 2.
        j3: Zonal coefficient of degree 3.
        j4: Zonal coefficient of degree 4.

    Returns:
        Gradient [m/s^2], shape ``(3,)``.
    """
    d = relative_position(r_object, r_origin)
    return jax.grad(_zonal_potential_relative)(d, gm, radius, j2, j3, j4)


def gradient_tensor_zonal(
    r_object: ArrayLike,
    r_origin: ArrayLike,
    gm: float,
    radius: float,
    j2: float,
    j3: float = 0.0,
    j4: float = 0.0,
) -> Array:
    """Gradient tensor of the zonal potential.

    Args:
        r_object: Query position [m].  Shape ``(3,)`` or ``(6,)``.
        r_origin: Origin of the gravity field [m].  Shape ``(3,)``.
        gm: Gravitational parameter [m^3/s^2].
        radius: Reference radius of the coefficients [m].
        j2: Zonal coefficient of degree 2.
        j3: Zonal coefficient of degree 3.
        j4: Zonal coefficient of degree 4.

    Returns:
        Gradient tensor [1/s^2], shape ``(3, 3)``.
    """
    d = relative_position(r_object, r_origin)
    return jax.hessian(_zonal_potential_relative)(d, gm, radius, j2, j3, j4)
