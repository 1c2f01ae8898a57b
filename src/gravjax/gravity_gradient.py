"""Gravity gradient torque from a gravity gradient tensor.

The differential gravitational acceleration across an extended rigid
body produces a torque about its centre of mass.  Given the gradient
tensor :math:`\\Gamma` of the potential at the centre of mass, the torque
in the body frame is

.. math::

    \\tau_i = -\\epsilon_{ijk} \\left( \\Gamma_b I \\right)_{kj},
    \\quad \\Gamma_b = R \\, \\Gamma \\, R^T

where :math:`I` is the inertia tensor and :math:`R` rotates inertial
vectors into the body frame.  For a point-mass field this reduces to the
familiar :math:`3\\mu / r^3 \\, (\\hat{r}_b \\times I \\hat{r}_b)`.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from gravjax.config import get_dtype


def torque_gravity_gradient(
    gradient_tensor: ArrayLike,
    I: ArrayLike,  # noqa: E741
    R_eci_to_body: ArrayLike | None = None,
) -> Array:
    """Compute the gravity gradient torque in the body frame.

    Args:
        gradient_tensor: Gradient tensor of the potential at the centre of
            mass, inertial frame, shape ``(3, 3)`` [1/s^2].
        I: Inertia tensor in the body frame, shape ``(3, 3)`` [kg m^2].
        R_eci_to_body: Rotation from the inertial to the body frame,
            shape ``(3, 3)``.  ``None`` means the frames coincide.

    Returns:
        Gravity gradient torque in the body frame, shape ``(3,)`` [N m].

    Examples:
        ```python
        import jax.numpy as jnp
        from gravjax.gravity_field import gradient_tensor_point_mass
        from gravjax.gravity_gradient import torque_gravity_gradient
        G = gradient_tensor_point_mass(
            jnp.array([7000e3, 1000e3, 0.0]), jnp.zeros(3), 3.986004418e14
        )
        tau = torque_gravity_gradient(G, jnp.diag(jnp.array([10.0, 20.0, 30.0])))
        ```
    """
    _float = get_dtype()
    G = jnp.asarray(gradient_tensor, dtype=_float)
    I = jnp.asarray(I, dtype=_float)  # noqa: E741

    if R_eci_to_body is not None:
        R = jnp.asarray(R_eci_to_body, dtype=_float)
        G = R @ G @ R.T

    M = G @ I

    return -jnp.array([
        M[2, 1] - M[1, 2],
        M[0, 2] - M[2, 0],
        M[1, 0] - M[0, 1],
    ])
