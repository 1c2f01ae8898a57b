"""Point-mass gravity field kernels.

Potential, gradient of the potential, and gradient tensor of the
potential of a point mass located at an arbitrary origin.  The potential
uses the positive sign convention ``U = gm / r``, so the gradient is the
gravitational acceleration itself.

The kernels are pure ``jax.numpy`` functions: they can be wrapped in
``jax.jit``, ``jax.vmap`` or differentiated with ``jax.grad``.  They
perform no validation, and a query at the origin yields ``inf``/``nan``.
Use :class:`~gravjax.gravity_field.model.GravityFieldModel` for checked
evaluation.

All inputs and outputs use SI base units (metres, seconds).

References:
    1. O. Montenbruck and E. Gill, *Satellite Orbits: Models, Methods
       and Applications*, 2012, p. 54-56.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from gravjax.config import get_dtype


def relative_position(r_object: ArrayLike, r_origin: ArrayLike) -> Array:
    """Position of *r_object* relative to the field origin.

    Args:
        r_object: Query position [m].  Shape ``(3,)`` or ``(6,)`` (only
            first 3 elements used).
        r_origin: Origin of the gravity field [m].  Shape ``(3,)``.

    Returns:
        Relative position [m], shape ``(3,)``.
    """
    _float = get_dtype()
    r_obj = jnp.asarray(r_object, dtype=_float)[:3]
    r_org = jnp.asarray(r_origin, dtype=_float)[:3]
    return r_obj - r_org


def potential_point_mass(
    r_object: ArrayLike,
    r_origin: ArrayLike,
    gm: float,
) -> Array:
    """Gravitational potential of a point mass.

    .. math::

        U = \\frac{\\mu}{|\\mathbf{d}|}, \\quad
        \\mathbf{d} = \\mathbf{r} - \\mathbf{r}_0

    Args:
        r_object: Query position [m].  Shape ``(3,)`` or ``(6,)``.
        r_origin: Origin of the gravity field [m].  Shape ``(3,)``.
        gm: Gravitational parameter [m^3/s^2].

    Returns:
        Potential [m^2/s^2], scalar array.

    Examples:
        ```python
        import jax.numpy as jnp
        from gravjax.constants import GM_EARTH, R_EARTH
        from gravjax.gravity_field import potential_point_mass
        U = potential_point_mass(jnp.array([R_EARTH, 0.0, 0.0]), jnp.zeros(3), GM_EARTH)
        ```
    """
    d = relative_position(r_object, r_origin)
    return gm / jnp.linalg.norm(d)


def gradient_point_mass(
    r_object: ArrayLike,
    r_origin: ArrayLike,
    gm: float,
) -> Array:
    """Gradient of the point-mass potential.

    Equal to the gravitational acceleration, pointing from the query
    position towards the origin:

    .. math::

        \\nabla U = -\\frac{\\mu \\, \\mathbf{d}}{|\\mathbf{d}|^3}

    Args:
        r_object: Query position [m].  Shape ``(3,)`` or ``(6,)``.
        r_origin: Origin of the gravity field [m].  Shape ``(3,)``.
        gm: Gravitational parameter [m^3/s^2].

    Returns:
        Gradient [m/s^2], shape ``(3,)``.
    """
    d = relative_position(r_object, r_origin)
    d_norm = jnp.linalg.norm(d)

    # Integer power by multiplication, not pow()
    d_norm3 = d_norm * d_norm * d_norm

    return -gm * d / d_norm3


def gradient_tensor_point_mass(
    r_object: ArrayLike,
    r_origin: ArrayLike,
    gm: float,
) -> Array:
    """Gradient tensor (Hessian) of the point-mass potential.

    .. math::

        \\nabla \\nabla U = \\frac{\\mu}{|\\mathbf{d}|^5}
        \\left( 3 \\, \\mathbf{d} \\mathbf{d}^T - |\\mathbf{d}|^2 I \\right)

    The tensor is symmetric and traceless away from the origin (Laplace's
    equation).  It drives gravity-gradient torques and the position
    partials of the state transition matrix.

    Args:
        r_object: Query position [m].  Shape ``(3,)`` or ``(6,)``.
        r_origin: Origin of the gravity field [m].  Shape ``(3,)``.
        gm: Gravitational parameter [m^3/s^2].

    Returns:
        Gradient tensor [1/s^2], shape ``(3, 3)``.

    Examples:
        ```python
        import jax.numpy as jnp
        from gravjax.constants import GM_EARTH, R_EARTH
        from gravjax.gravity_field import gradient_tensor_point_mass
        G = gradient_tensor_point_mass(
            jnp.array([R_EARTH + 500e3, 0.0, 0.0]), jnp.zeros(3), GM_EARTH
        )
        float(jnp.trace(G))
        ```
    """
    d = relative_position(r_object, r_origin)
    d_norm = jnp.linalg.norm(d)
    d_sqr = jnp.dot(d, d)

    d_norm5 = d_norm * d_norm * d_norm * d_norm * d_norm
    identity = jnp.eye(3, dtype=d.dtype)

    return gm / d_norm5 * (3.0 * jnp.outer(d, d) - d_sqr * identity)
